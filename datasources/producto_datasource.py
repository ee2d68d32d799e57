"""
Fuente de datos SQL para la entidad Producto.
Gestiona la persistencia de los datos descriptivos de los productos.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from datasources.base import ProductoDatasource
from datasources.sql_datasource import BaseSqlDatasource
from database.models import ProductoORM
from models.productos import ProductoCreate

logger = logging.getLogger(__name__)


class SqlProductoDatasource(BaseSqlDatasource[ProductoORM], ProductoDatasource):
    """Almacén de productos respaldado por SQLAlchemy."""

    resource_name = "Producto"

    def __init__(self, db: Session):
        """
        Inicializa la fuente de datos de productos.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, ProductoORM)

    def create(self, data: ProductoCreate) -> ProductoORM:
        """
        Persiste un producto nuevo.

        El commit se hace aquí: el producto queda almacenado aunque el
        enriquecimiento posterior (precio, inventario) falle.

        Args:
            data: Datos validados del producto

        Returns:
            El producto creado con su identificador asignado
        """
        producto = ProductoORM(
            nombre=data.nombre,
            descripcion=data.descripcion,
            categoria=data.categoria,
            precio_base=data.precio_base,
        )
        created = self.add(producto)
        self.commit()

        logger.debug(f"Producto {created.id} almacenado")
        return created

    def find_by_id(self, producto_id: str) -> ProductoORM:
        return self.get_by_id_or_fail(producto_id)

    def list(self, skip: int = 0, limit: int = 100) -> List[ProductoORM]:
        return self.get_all(skip=skip, limit=limit, order_by="nombre")

    def count(self) -> int:
        return self.count_all()
