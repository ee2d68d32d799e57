"""
Fecha y hora en la zona horaria configurada (`settings.timezone`), usada
por las columnas de auditoría de productos y existencias.
"""
from datetime import datetime
from zoneinfo import ZoneInfo
from config import settings


def get_local_now() -> datetime:
    return datetime.now(ZoneInfo(settings.timezone))
