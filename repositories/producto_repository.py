"""
Repositorio de productos.

Compone las tres fuentes de datos del catálogo (almacén de productos, motor
de precios e inventario) y entrega a sus llamadores un producto completo.
El repositorio no guarda estado propio más allá de sus colaboradores: precio
e inventario se recalculan en cada operación.
"""

from typing import List
import logging

from datasources.base import ProductoDatasource, PrecioDatasource, InventarioDatasource
from database.models import ProductoORM
from models.productos import Producto, ProductoCreate

logger = logging.getLogger(__name__)


class ProductoRepository:
    """Ensambla productos a partir del almacén, las reglas de precio y el inventario."""

    def __init__(
        self,
        producto_datasource: ProductoDatasource,
        precio_datasource: PrecioDatasource,
        inventario_datasource: InventarioDatasource,
    ):
        """
        Inicializa el repositorio de productos.

        Args:
            producto_datasource: Persistencia de los datos descriptivos
            precio_datasource: Cálculo del precio vigente
            inventario_datasource: Consulta del estado de existencias
        """
        self.producto_datasource = producto_datasource
        self.precio_datasource = precio_datasource
        self.inventario_datasource = inventario_datasource

    def create(self, data: ProductoCreate) -> Producto:
        """
        Crea un producto y lo devuelve con precio e inventario.

        El almacén se invoca primero para obtener el identificador; precio e
        inventario se consultan después con ese identificador.

        Raises:
            ServiceUnavailableException: Si precio o inventario no responden
        """
        producto = self.producto_datasource.create(data)
        logger.debug(f"Producto {producto.id} creado en el almacén, enriqueciendo")
        return self._enrich(producto)

    def get_details(self, producto_id: str) -> Producto:
        """
        Obtiene un producto con su precio e inventario vigentes.

        Raises:
            NotFoundException: Si el producto no existe en el almacén
            ServiceUnavailableException: Si precio o inventario no responden
        """
        producto = self.producto_datasource.find_by_id(producto_id)
        return self._enrich(producto)

    def list_details(self, skip: int = 0, limit: int = 100) -> List[Producto]:
        """
        Lista productos, cada uno con precio e inventario vigentes.

        El enriquecimiento es por fila: una página de N productos cuesta N
        llamadas a precios (dos consultas cada una) y N a inventario. Se
        acota con `max_page_size`.
        """
        productos = self.producto_datasource.list(skip=skip, limit=limit)
        return [self._enrich(producto) for producto in productos]

    def count(self) -> int:
        return self.producto_datasource.count()

    def _enrich(self, producto: ProductoORM) -> Producto:
        # cualquier fallo aborta la operación: nunca se devuelve un producto a medias
        precio = self.precio_datasource.price_for(producto.id)
        inventario = self.inventario_datasource.status_for(producto.id)

        return Producto(
            id_producto=producto.id,
            nombre=producto.nombre,
            descripcion=producto.descripcion,
            categoria=producto.categoria,
            precio_base=producto.precio_base,
            precio=precio,
            inventario=inventario,
        )
