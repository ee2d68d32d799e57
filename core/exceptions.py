"""
Errores del catálogo.

Las fuentes de datos y el repositorio lanzan estas excepciones; la capa de
rutas las traduce a respuestas HTTP con `status_code`.
"""

from typing import Optional, Any


class AppException(Exception):
    """Raíz de los errores del catálogo, con su código HTTP."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """El almacén no conoce el identificador pedido."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404)


class ValidationException(AppException):
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message=message, status_code=422, details=details)


class DatabaseException(AppException):
    """Fallo de SQLAlchemy en el almacén de productos."""

    def __init__(self, message: str = "Error de base de datos"):
        super().__init__(message=message, status_code=500)


class ServiceUnavailableException(AppException):
    """Inventario o precios no pudieron responder."""

    def __init__(
        self,
        service: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = dict(details or {})
        details["service"] = service
        super().__init__(
            message=message or f"Servicio de {service} no disponible",
            status_code=503,
            details=details,
        )
