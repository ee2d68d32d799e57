""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Validación de identificadores
- Funciones auxiliares de paginación
"""

from .exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    DatabaseException,
    ServiceUnavailableException,
)
from .security import validate_uuid
from .pagination import (
    PaginationMeta,
    calculate_pagination_meta,
    create_paginated_response,
    calculate_skip,
)

__all__ = [
    # Excepciones
    "AppException",
    "NotFoundException",
    "ValidationException",
    "DatabaseException",
    "ServiceUnavailableException",
    # validación
    "validate_uuid",
    # paginacion
    "PaginationMeta",
    "calculate_pagination_meta",
    "create_paginated_response",
    "calculate_skip",
]
