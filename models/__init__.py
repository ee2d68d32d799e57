from .productos import (
    Producto,
    ProductoCreate,
    Inventario,
    EstadoInventario,
    estado_para_cantidad,
)
from .common import PaginatedResponse, HealthCheckResponse

__all__ = [
    # Productos
    "Producto", "ProductoCreate", "Inventario", "EstadoInventario", "estado_para_cantidad",
    # Common responses
    "PaginatedResponse", "HealthCheckResponse",
]
