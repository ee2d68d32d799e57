"""
Capa de repositorio.
El repositorio de productos centraliza el ensamblado de la entidad Producto a
partir de sus fuentes de datos y desacopla a los llamadores de sus detalles.
"""

from .producto_repository import ProductoRepository

__all__ = [
    "ProductoRepository",
]
