"""
Capa de servicio para los casos de uso del catálogo.
Este paquete contiene las clases de servicio que validan la entrada
y delegan en el repositorio de productos.
"""

from .producto_service import ProductoService

__all__ = [
    "ProductoService",
]
