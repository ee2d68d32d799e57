"""
Producto routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for producto endpoints.
All assembly logic is delegated to ProductoService and, through it,
to the ProductoRepository.

Responsibilities:
- Parse HTTP requests
- Delegate to service layer
- Format HTTP responses
- Map service exceptions to status codes
"""

from fastapi import APIRouter, HTTPException, Query, Depends, status
import logging

from models.productos import Producto, ProductoCreate
from models.common import PaginatedResponse
from core.pagination import create_paginated_response
from core.exceptions import (
    AppException,
    NotFoundException,
    ServiceUnavailableException,
)
from services.producto_service import ProductoService
from dependencies import get_producto_service
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/productos", tags=["productos"])


# ==================== Exception Handler ====================

def handle_service_exception(e: Exception) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if isinstance(e, NotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    elif isinstance(e, ServiceUnavailableException):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message
        )
    elif isinstance(e, AppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor"
        )


# ==================== Endpoints ====================

@router.post("/", response_model=Producto, status_code=status.HTTP_201_CREATED)
def crear_producto(
    producto: ProductoCreate,
    service: ProductoService = Depends(get_producto_service),
):
    """
    Create a new producto.

    The response carries the price computed by the pricing rules and the
    inventory status reported for the new identifier.

    Args:
        producto: Producto data
        service: Injected ProductoService

    Returns:
        Created producto with price and inventory
    """
    try:
        return service.create_producto(producto)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error creating producto: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al crear producto"
        )


@router.get("/", response_model=PaginatedResponse[Producto])
def obtener_productos(
    page: int = Query(0, ge=0, description="Número de página (0-indexed)"),
    page_size: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Tamaño de página"
    ),
    service: ProductoService = Depends(get_producto_service),
):
    """
    Get list of productos with pagination.

    Every item is returned with its current price and inventory.

    Args:
        page: Page number (0-indexed)
        page_size: Items per page
        service: Injected ProductoService

    Returns:
        Paginated list of productos
    """
    try:
        items, total = service.get_productos(page=page, page_size=page_size)
        return create_paginated_response(items, page, page_size, total)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting productos: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener productos"
        )


@router.get("/{producto_id}", response_model=Producto)
def obtener_producto(
    producto_id: str,
    service: ProductoService = Depends(get_producto_service),
):
    """
    Get a producto by ID.

    Price and inventory are recomputed on every call.

    Args:
        producto_id: Producto ID
        service: Injected ProductoService

    Returns:
        Producto with price and inventory
    """
    try:
        return service.get_producto(producto_id)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting producto {producto_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener producto"
        )
