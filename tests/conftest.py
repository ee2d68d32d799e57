"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests:
base de datos en memoria, cliente HTTP de pruebas, datos de ejemplo
y fuentes de datos falsas para probar el repositorio de productos.
"""

import pytest
import os
from typing import Generator, Dict, Any, List, Optional
from uuid import uuid4
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["INVENTORY_BACKEND"] = "sql"
os.environ["PRICING_IVA_RATE"] = "0.19"
os.environ["INVENTORY_LOW_STOCK_THRESHOLD"] = "5"

from main import app
from database.db import get_db, Base
from database.models import ProductoORM, ReglaPrecioORM, ExistenciaORM
from datasources.base import ProductoDatasource, PrecioDatasource, InventarioDatasource
from models.productos import ProductoCreate, Inventario, EstadoInventario
from core.exceptions import NotFoundException, ServiceUnavailableException


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==================== Producto Fixtures ====================

@pytest.fixture
def producto_data() -> Dict[str, Any]:
    """Sample producto data for testing."""
    return {
        "nombre": "Audífonos inalámbricos",
        "descripcion": "Audífonos bluetooth con cancelación de ruido",
        "categoria": "electronica",
        "precio_base": 100.0
    }


@pytest.fixture
def producto_ropa_data() -> Dict[str, Any]:
    """Sample producto data in another categoria."""
    return {
        "nombre": "Camiseta algodón",
        "descripcion": None,
        "categoria": "ropa",
        "precio_base": 40.0
    }


@pytest.fixture
def producto_instance(db_session: Session, producto_data: Dict[str, Any]) -> ProductoORM:
    """Create a producto in the database."""
    producto = ProductoORM(
        id="aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa",
        nombre=producto_data["nombre"],
        descripcion=producto_data["descripcion"],
        categoria=producto_data["categoria"],
        precio_base=producto_data["precio_base"],
    )
    db_session.add(producto)
    db_session.commit()
    db_session.refresh(producto)
    return producto


@pytest.fixture
def regla_descuento_electronica(db_session: Session) -> ReglaPrecioORM:
    """Active 10% discount rule for electronica."""
    regla = ReglaPrecioORM(
        categoria="electronica",
        porcentaje_descuento=10.0,
        activa=True,
        descripcion="Temporada de tecnología",
    )
    db_session.add(regla)
    db_session.commit()
    return regla


@pytest.fixture
def existencia_instance(db_session: Session, producto_instance: ProductoORM) -> ExistenciaORM:
    """Stock of 20 units for producto_instance."""
    existencia = ExistenciaORM(id_producto=producto_instance.id, cantidad=20)
    db_session.add(existencia)
    db_session.commit()
    return existencia


# ==================== Fake Data Sources ====================

class FakeProductoDatasource(ProductoDatasource):
    """In-memory product store that records every call."""

    def __init__(self, calls: Optional[List[str]] = None):
        self.productos: Dict[str, ProductoORM] = {}
        self.calls = calls if calls is not None else []

    def create(self, data: ProductoCreate) -> ProductoORM:
        self.calls.append("store.create")
        producto = ProductoORM(
            id=str(uuid4()),
            nombre=data.nombre,
            descripcion=data.descripcion,
            categoria=data.categoria,
            precio_base=data.precio_base,
        )
        self.productos[producto.id] = producto
        return producto

    def find_by_id(self, producto_id: str) -> ProductoORM:
        self.calls.append("store.find_by_id")
        if producto_id not in self.productos:
            raise NotFoundException(resource="Producto", identifier=producto_id)
        return self.productos[producto_id]

    def list(self, skip: int = 0, limit: int = 100) -> List[ProductoORM]:
        self.calls.append("store.list")
        ordered = sorted(self.productos.values(), key=lambda p: p.nombre)
        return ordered[skip:skip + limit]

    def count(self) -> int:
        return len(self.productos)


class FakePrecioDatasource(PrecioDatasource):
    """Pricing engine returning configurable prices."""

    def __init__(self, default_price: float = 99.9, calls: Optional[List[str]] = None):
        self.default_price = default_price
        self.prices: Dict[str, float] = {}
        self.fail = False
        self.calls = calls if calls is not None else []

    def price_for(self, producto_id: str) -> float:
        self.calls.append("pricing.price_for")
        if self.fail:
            raise ServiceUnavailableException("precios")
        return self.prices.get(producto_id, self.default_price)


class FakeInventarioDatasource(InventarioDatasource):
    """Inventory lookup returning configurable stock, or failing on demand."""

    def __init__(self, default_cantidad: int = 10, calls: Optional[List[str]] = None, fail: bool = False):
        self.default_cantidad = default_cantidad
        self.cantidades: Dict[str, int] = {}
        self.fail = fail
        self.calls = calls if calls is not None else []

    def status_for(self, producto_id: str) -> Inventario:
        self.calls.append("inventory.status_for")
        if self.fail:
            raise ServiceUnavailableException("inventario")
        cantidad = self.cantidades.get(producto_id, self.default_cantidad)
        estado = EstadoInventario.disponible if cantidad > 0 else EstadoInventario.agotado
        return Inventario(estado=estado, cantidad=cantidad)


@pytest.fixture
def calls() -> List[str]:
    """Shared call log for the fake data sources."""
    return []


@pytest.fixture
def fake_producto_datasource(calls: List[str]) -> FakeProductoDatasource:
    return FakeProductoDatasource(calls=calls)


@pytest.fixture
def fake_precio_datasource(calls: List[str]) -> FakePrecioDatasource:
    return FakePrecioDatasource(calls=calls)


@pytest.fixture
def fake_inventario_datasource(calls: List[str]) -> FakeInventarioDatasource:
    return FakeInventarioDatasource(calls=calls)
