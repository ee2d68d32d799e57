"""
Dependency injection for data sources, the product repository and services.

This module wires the concrete data sources selected by configuration
into the ProductoRepository for each request. Route handlers only
depend on ``get_producto_service``; tests override the data source
dependencies to plug in fakes.
"""

from typing import Generator
import logging

from sqlalchemy.orm import Session
from fastapi import Depends

from config import settings
from database.db import get_db
from datasources.base import ProductoDatasource, PrecioDatasource, InventarioDatasource
from datasources.producto_datasource import SqlProductoDatasource
from datasources.precio_datasource import ReglasPrecioDatasource
from datasources.inventario_datasource import (
    HttpInventarioDatasource,
    SqlInventarioDatasource,
    create_inventory_client,
)
from repositories.producto_repository import ProductoRepository
from services.producto_service import ProductoService

logger = logging.getLogger(__name__)


# ==================== Data Source Dependencies ====================

def get_producto_datasource(db: Session = Depends(get_db)) -> ProductoDatasource:
    """
    Get the product store.

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        SqlProductoDatasource instance
    """
    return SqlProductoDatasource(db)


def get_precio_datasource(db: Session = Depends(get_db)) -> PrecioDatasource:
    """
    Get the pricing engine, evaluating the rules stored in the database.

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        ReglasPrecioDatasource instance using the configured IVA rate
    """
    return ReglasPrecioDatasource(db, iva_rate=settings.pricing_iva_rate)


def get_inventario_datasource(
    db: Session = Depends(get_db),
) -> Generator[InventarioDatasource, None, None]:
    """
    Get the inventory lookup selected by ``settings.inventory_backend``.

    For the ``http`` backend an httpx client is opened for the request
    and closed once the response has been produced.

    Args:
        db: Database session (injected by FastAPI)

    Yields:
        HttpInventarioDatasource or SqlInventarioDatasource
    """
    threshold = settings.inventory_low_stock_threshold

    if settings.inventory_backend == "http":
        client = create_inventory_client(
            settings.inventory_api_url,
            settings.inventory_timeout_seconds,
        )
        try:
            yield HttpInventarioDatasource(client, low_stock_threshold=threshold)
        finally:
            client.close()
    else:
        yield SqlInventarioDatasource(db, low_stock_threshold=threshold)


# ==================== Repository Dependencies ====================

def get_producto_repository(
    producto_datasource: ProductoDatasource = Depends(get_producto_datasource),
    precio_datasource: PrecioDatasource = Depends(get_precio_datasource),
    inventario_datasource: InventarioDatasource = Depends(get_inventario_datasource),
) -> ProductoRepository:
    """
    Get ProductoRepository composed of the three data sources.

    Returns:
        ProductoRepository instance
    """
    return ProductoRepository(
        producto_datasource,
        precio_datasource,
        inventario_datasource,
    )


# ==================== Service Dependencies ====================

def get_producto_service(
    repository: ProductoRepository = Depends(get_producto_repository),
) -> ProductoService:
    """
    Get ProductoService instance.

    This is the main dependency to use in route handlers for producto operations.

    Example:
        ```python
        @router.get("/productos/{producto_id}")
        def obtener_producto(
            producto_id: str,
            service: ProductoService = Depends(get_producto_service)
        ):
            return service.get_producto(producto_id)
        ```
    """
    return ProductoService(repository)
