from .db import (
    Base,
    SessionLocal,
    create_tables,
    engine,
    get_db,
    ProductoORM,
    ReglaPrecioORM,
    ExistenciaORM,
)

__all__ = [
    "Base",
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "ProductoORM",
    "ReglaPrecioORM",
    "ExistenciaORM",
]
