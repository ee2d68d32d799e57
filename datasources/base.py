"""
Contratos de las fuentes de datos que compone el repositorio de productos.

Cada fuente de datos tiene una única responsabilidad (persistencia, consulta
externa o evaluación de reglas). Las variantes concretas son intercambiables
y se eligen al arrancar la aplicación (ver ``dependencies.py``).
"""

from abc import ABC, abstractmethod
from typing import List

from database.models import ProductoORM
from models.productos import ProductoCreate, Inventario


class ProductoDatasource(ABC):
    """Persistencia de los datos descriptivos de un producto."""

    @abstractmethod
    def create(self, data: ProductoCreate) -> ProductoORM:
        """Persiste un producto nuevo y lo devuelve con su identificador asignado."""

    @abstractmethod
    def find_by_id(self, producto_id: str) -> ProductoORM:
        """
        Obtiene un producto por su ID.

        Raises:
            NotFoundException: Si el producto no existe
        """

    @abstractmethod
    def list(self, skip: int = 0, limit: int = 100) -> List[ProductoORM]:
        """Lista productos ordenados por nombre."""

    @abstractmethod
    def count(self) -> int:
        """Cuenta los productos almacenados."""


class InventarioDatasource(ABC):
    """Consulta del estado de existencias de un producto."""

    @abstractmethod
    def status_for(self, producto_id: str) -> Inventario:
        """
        Obtiene el estado de inventario vigente de un producto.

        Raises:
            ServiceUnavailableException: Si el sistema de inventario no responde
        """


class PrecioDatasource(ABC):
    """Cálculo del precio vigente de un producto."""

    @abstractmethod
    def price_for(self, producto_id: str) -> float:
        """
        Calcula el precio final de un producto.

        Raises:
            NotFoundException: Si el producto no existe
            ServiceUnavailableException: Si las reglas de precio no están disponibles
        """
