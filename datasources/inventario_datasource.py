"""
Fuentes de datos de inventario.

Dos variantes intercambiables del mismo contrato:

- ``HttpInventarioDatasource`` consulta el servicio externo de inventario.
- ``SqlInventarioDatasource`` lee la tabla local ``existencias``.

Ambas derivan el estado (disponible, pocas unidades, agotado) de la
cantidad reportada con el mismo umbral.
"""

from typing import Any
import logging

import httpx
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from datasources.base import InventarioDatasource
from database.models import ExistenciaORM
from models.productos import Inventario, estado_para_cantidad
from core.exceptions import ServiceUnavailableException

logger = logging.getLogger(__name__)

SERVICE_NAME = "inventario"


def create_inventory_client(base_url: str, timeout: float) -> httpx.Client:
    """
    Crea el cliente HTTP para el servicio de inventario.

    Args:
        base_url: URL base del servicio
        timeout: Timeout total de cada consulta en segundos

    Returns:
        Cliente httpx configurado (el llamador debe cerrarlo)
    """
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
    )


class HttpInventarioDatasource(InventarioDatasource):
    """Inventario consultado a un servicio REST externo."""

    def __init__(self, client: httpx.Client, low_stock_threshold: int = 5):
        """
        Args:
            client: Cliente httpx con ``base_url`` apuntando al servicio
            low_stock_threshold: Cantidad máxima reportada como pocas unidades
        """
        self.client = client
        self.low_stock_threshold = low_stock_threshold

    def status_for(self, producto_id: str) -> Inventario:
        try:
            response = self.client.get(f"/inventario/{producto_id}")
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Servicio de inventario respondió {e.response.status_code} "
                f"para producto {producto_id}"
            )
            raise ServiceUnavailableException(
                SERVICE_NAME,
                details={"status_code": e.response.status_code},
            )
        except httpx.HTTPError as e:
            logger.error(f"Error consultando inventario de producto {producto_id}: {e}")
            raise ServiceUnavailableException(SERVICE_NAME)
        except ValueError as e:
            logger.error(f"Respuesta de inventario no es JSON para producto {producto_id}: {e}")
            raise ServiceUnavailableException(
                SERVICE_NAME, message="Respuesta inválida del servicio de inventario"
            )

        cantidad = self._parse_cantidad(body, producto_id)
        return Inventario(
            estado=estado_para_cantidad(cantidad, self.low_stock_threshold),
            cantidad=cantidad,
        )

    def _parse_cantidad(self, body: Any, producto_id: str) -> int:
        """Extrae la cantidad del cuerpo de la respuesta."""
        cantidad = body.get("cantidad") if isinstance(body, dict) else None
        if isinstance(cantidad, bool) or not isinstance(cantidad, int):
            logger.error(f"Respuesta de inventario sin 'cantidad' válida para producto {producto_id}: {body!r}")
            raise ServiceUnavailableException(
                SERVICE_NAME, message="Respuesta inválida del servicio de inventario"
            )
        # existencias negativas (pedidos pendientes) se reportan como agotado
        return max(cantidad, 0)


class SqlInventarioDatasource(InventarioDatasource):
    """Inventario leído de la tabla local de existencias."""

    def __init__(self, db: Session, low_stock_threshold: int = 5):
        self.db = db
        self.low_stock_threshold = low_stock_threshold

    def status_for(self, producto_id: str) -> Inventario:
        try:
            existencia = self.db.get(ExistenciaORM, str(producto_id))
        except SQLAlchemyError as e:
            logger.error(f"Error leyendo existencias de producto {producto_id}: {e}")
            raise ServiceUnavailableException(SERVICE_NAME)

        # sin registro de existencias: el producto no tiene unidades
        cantidad = max(existencia.cantidad, 0) if existencia is not None else 0
        return Inventario(
            estado=estado_para_cantidad(cantidad, self.low_stock_threshold),
            cantidad=cantidad,
        )
