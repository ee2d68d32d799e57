"""
Paginación del listado de productos (páginas numeradas desde 0).
"""

from typing import List, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class PaginationMeta(BaseModel):
    """Posición de una página dentro del catálogo."""
    page: int = Field(..., ge=0, description="Página actual, desde 0")
    page_size: int = Field(..., ge=1, description="Productos por página")
    total_items: int = Field(..., ge=0, description="Productos en el catálogo")
    total_pages: int = Field(..., ge=0, description="Páginas disponibles")
    has_next: bool
    has_previous: bool


def calculate_pagination_meta(page: int, page_size: int, total_items: int) -> PaginationMeta:
    # división entera redondeando hacia arriba
    total_pages = -(-total_items // page_size) if page_size > 0 else 0

    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page + 1 < total_pages,
        has_previous=page > 0,
    )


def create_paginated_response(items: List[Any], page: int, page_size: int, total_items: int) -> dict:
    """
    Arma el sobre `{success, data, pagination, timestamp}` que devuelve
    `GET /productos/`; `items` ya viene con precio e inventario.
    """
    return {
        "success": True,
        "data": items,
        "pagination": calculate_pagination_meta(page, page_size, total_items).model_dump(),
        "timestamp": datetime.now(timezone.utc),
    }


def calculate_skip(page: int, page_size: int) -> int:
    """Offset de la consulta para la página pedida."""
    return page * page_size
