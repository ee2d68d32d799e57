from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum
from uuid import UUID


class EstadoInventario(str, Enum):
    disponible = "disponible"
    pocas_unidades = "pocas_unidades"
    agotado = "agotado"


class Inventario(BaseModel):
    """Estado de existencias de un producto según la fuente de inventario."""
    estado: EstadoInventario
    cantidad: int = Field(..., ge=0)


class ProductoBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    descripcion: Optional[str] = Field(None, max_length=500)
    categoria: str = Field(..., min_length=1, max_length=50)
    precio_base: float = Field(..., gt=0, le=1_000_000_000, allow_inf_nan=False)


class ProductoCreate(ProductoBase):
    """Modelo de entrada para crear producto. No incluye precio ni inventario
    porque ambos se calculan en cada lectura."""
    pass


class Producto(ProductoBase):
    """Producto completo: datos persistidos más precio e inventario vigentes."""
    id_producto: UUID
    precio: float
    inventario: Inventario


def estado_para_cantidad(cantidad: int, umbral_pocas_unidades: int) -> EstadoInventario:
    """Deriva el estado de inventario a partir de la cantidad disponible."""
    if cantidad <= 0:
        return EstadoInventario.agotado
    if cantidad <= umbral_pocas_unidades:
        return EstadoInventario.pocas_unidades
    return EstadoInventario.disponible
