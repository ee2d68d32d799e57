"""
Modelos comunes de respuesta para la API.

Estos modelos proporcionan respuestas consistentes y estandarizadas
para los endpoints de la API
"""
from typing import Generic, TypeVar, List
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from core.pagination import PaginationMeta

#generic type para datos paginados
T = TypeVar('T')


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaginatedResponse(BaseModel, Generic[T]):
    """Respuesta paginada genérica."""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    data: List[T] = Field(..., description="Lista de items de la página actual")
    pagination: PaginationMeta = Field(..., description="Metadata de paginación")
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    inventory_backend: str = Field(..., description="Fuente de datos de inventario configurada")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=_utcnow)
