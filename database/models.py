from datetime import datetime, timezone
from uuid import uuid4
from zoneinfo import ZoneInfoNotFoundError

from sqlalchemy import Column, String, Integer, DateTime, Float, ForeignKey, Boolean
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def gen_uuid_str():
    return str(uuid4())


def get_current_time():
    """Obtiene la hora actual en la zona horaria local configurada."""
    try:
        from utils.datetime_utils import get_local_now
        return get_local_now().replace(tzinfo=None)
    except (ImportError, ZoneInfoNotFoundError):
        #Fallback a UTC si no está disponible la utilidad o la zona horaria
        return datetime.now(timezone.utc).replace(tzinfo=None)


#ORM: Productos
#precio e inventario no se persisten aquí: se calculan en cada lectura
class ProductoORM(Base):
    __tablename__ = "productos"
    #columna en DB: id_producto, atributo python: id
    id = Column("id_producto", String(36), primary_key=True, default=gen_uuid_str)
    nombre = Column(String(100), nullable=False)
    descripcion = Column(String(500), nullable=True)
    categoria = Column(String(50), nullable=False)
    precio_base = Column(Float, nullable=False)
    #auditoría
    fecha_creacion = Column(DateTime, default=get_current_time)
    fecha_actualizacion = Column(DateTime, default=get_current_time, onupdate=get_current_time)


#ORM: Reglas de precio (descuentos por categoría)
class ReglaPrecioORM(Base):
    __tablename__ = "reglas_precio"
    id = Column("id_regla", String(36), primary_key=True, default=gen_uuid_str)
    categoria = Column(String(50), nullable=False, index=True)
    porcentaje_descuento = Column(Float, nullable=False, default=0.0)
    activa = Column(Boolean, nullable=False, default=True)
    descripcion = Column(String(200), nullable=True)


#ORM: Existencias (fuente de inventario local)
class ExistenciaORM(Base):
    __tablename__ = "existencias"
    id_producto = Column(String(36), ForeignKey("productos.id_producto"), primary_key=True)
    cantidad = Column(Integer, nullable=False, default=0)
    fecha_actualizacion = Column(DateTime, default=get_current_time, onupdate=get_current_time)
