"""
Fuente de datos de precios basada en reglas de negocio.

El precio final parte del precio base del producto, aplica el mayor
descuento activo de su categoría y luego el IVA configurado.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from datasources.base import PrecioDatasource
from database.models import ProductoORM, ReglaPrecioORM
from core.exceptions import NotFoundException, ServiceUnavailableException

logger = logging.getLogger(__name__)

SERVICE_NAME = "precios"


class ReglasPrecioDatasource(PrecioDatasource):
    """Motor de precios que evalúa las reglas almacenadas en ``reglas_precio``."""

    def __init__(self, db: Session, iva_rate: float = 0.19):
        """
        Args:
            db: SQLAlchemy session
            iva_rate: Tasa de IVA como fracción (0.19 = 19%)
        """
        self.db = db
        self.iva_rate = iva_rate

    def price_for(self, producto_id: str) -> float:
        try:
            producto = self.db.get(ProductoORM, str(producto_id))
            if producto is None:
                raise NotFoundException(resource="Producto", identifier=str(producto_id))
            descuento = self._descuento_para_categoria(producto.categoria)
        except SQLAlchemyError as e:
            logger.error(f"Error evaluando reglas de precio para producto {producto_id}: {e}")
            raise ServiceUnavailableException(SERVICE_NAME)

        precio = self.calculate_price(producto.precio_base, descuento, self.iva_rate)
        logger.debug(
            f"Precio de producto {producto_id}: base={producto.precio_base} "
            f"descuento={descuento}% iva={self.iva_rate} -> {precio}"
        )
        return precio

    def _descuento_para_categoria(self, categoria: str) -> float:
        """Mayor porcentaje de descuento activo para la categoría (0 si no hay reglas)."""
        descuento = (
            self.db.query(func.max(ReglaPrecioORM.porcentaje_descuento))
            .filter(
                ReglaPrecioORM.categoria == categoria,
                ReglaPrecioORM.activa == True,  # noqa: E712
            )
            .scalar()
        )
        if descuento is None:
            return 0.0
        return min(max(float(descuento), 0.0), 100.0)

    @staticmethod
    def calculate_price(precio_base: float, descuento: float, iva_rate: float) -> float:
        """Calcula el precio final: (base - descuento) + IVA, redondeado a centavos."""
        return round(precio_base * (1 - descuento / 100) * (1 + iva_rate), 2)
