"""
Fuentes de datos del catálogo.

Cada fuente de datos cubre un único tipo de acceso: persistencia de productos,
consulta de inventario o cálculo de precios. El repositorio de productos las
compone; ninguna contiene lógica de ensamblado.
"""

from .base import ProductoDatasource, InventarioDatasource, PrecioDatasource
from .sql_datasource import BaseSqlDatasource
from .producto_datasource import SqlProductoDatasource
from .inventario_datasource import (
    HttpInventarioDatasource,
    SqlInventarioDatasource,
    create_inventory_client,
)
from .precio_datasource import ReglasPrecioDatasource

__all__ = [
    "ProductoDatasource",
    "InventarioDatasource",
    "PrecioDatasource",
    "BaseSqlDatasource",
    "SqlProductoDatasource",
    "HttpInventarioDatasource",
    "SqlInventarioDatasource",
    "create_inventory_client",
    "ReglasPrecioDatasource",
]
