"""
Service for Producto business logic.

Validates identifiers and pagination before delegating to the
ProductoRepository, which assembles each product from its data sources.
"""

from typing import List
import logging

from repositories.producto_repository import ProductoRepository
from models.productos import Producto, ProductoCreate
from core.security import validate_uuid
from core.pagination import calculate_skip

logger = logging.getLogger(__name__)


class ProductoService:
    """Service for managing producto use cases."""

    def __init__(self, repository: ProductoRepository):
        """
        Initialize producto service.

        Args:
            repository: ProductoRepository instance
        """
        self.repository = repository

    def create_producto(self, producto_data: ProductoCreate) -> Producto:
        """
        Create a new producto.

        Args:
            producto_data: Producto creation data

        Returns:
            Created producto with current price and inventory

        Raises:
            ServiceUnavailableException: If pricing or inventory cannot be reached
        """
        producto = self.repository.create(producto_data)

        logger.info(
            f"Producto {producto.id_producto} creado: precio={producto.precio} "
            f"inventario={producto.inventario.estado.value}"
        )
        return producto

    def get_producto(self, producto_id: str) -> Producto:
        """
        Get a producto by ID.

        Raises:
            ValidationException: If producto_id is not a valid UUID
            NotFoundException: If producto not found
            ServiceUnavailableException: If pricing or inventory cannot be reached
        """
        producto_id = validate_uuid(producto_id, "producto_id")
        return self.repository.get_details(producto_id)

    def get_productos(
        self,
        page: int = 0,
        page_size: int = 50
    ) -> tuple[List[Producto], int]:
        """
        Get a page of productos.

        Returns:
            Tuple of (list of productos, total count)
        """
        skip = calculate_skip(page, page_size)
        productos = self.repository.list_details(skip=skip, limit=page_size)
        total_count = self.repository.count()
        return productos, total_count
