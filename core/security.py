"""
Validación de identificadores de producto recibidos por la API.
"""

from uuid import UUID
from core.exceptions import ValidationException


def validate_uuid(value: str, field_name: str = "id") -> str:
    """
    Normaliza `value` a la forma canónica de UUID en minúsculas, que es como
    el almacén guarda los identificadores.

    Raises:
        ValidationException: Si `value` no es un UUID
    """
    try:
        return str(UUID(str(value)))
    except ValueError:
        raise ValidationException(
            message=f"{field_name} no es un identificador de producto válido",
            field=field_name,
            details={"value": str(value)}
        )
