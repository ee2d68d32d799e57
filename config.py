"""
Configuración centralizada de la aplicación usando pydantic-settings.

Este módulo maneja todas las variables de entorno y configuraciones
de la aplicación de manera tipada y validada, incluida la selección
de las fuentes de datos de inventario y precios.
"""
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Configuración de la aplicación cargada desde variables de entorno."""

    # Database
    database_url: str = Field(
        default="sqlite:///./productos.db",
        description="URL de conexión a la base de datos"
    )

    # CORS Configuration
    cors_allowed_origins: str = Field(
        default="http://localhost,http://localhost:3000,http://localhost:8000",
        description="Orígenes permitidos para CORS, separados por coma"
    )

    # Application
    app_name: str = Field(
        default="API Catálogo de Productos",
        description="Nombre de la aplicación"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Versión de la aplicación"
    )
    debug_mode: bool = Field(
        default=False,
        description="Modo debug (solo para desarrollo)"
    )

    # Paginación
    default_page_size: int = Field(
        default=50,
        ge=1,
        le=100,
        description="Tamaño de página por defecto para listados"
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=500,
        description="Tamaño máximo de página permitido"
    )

    # Inventario
    inventory_backend: str = Field(
        default="sql",
        description="Fuente de datos de inventario: 'sql' (tabla existencias) o 'http' (servicio externo)"
    )
    inventory_api_url: str = Field(
        default="http://localhost:9000",
        description="URL base del servicio externo de inventario"
    )
    inventory_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Timeout de las consultas al servicio de inventario"
    )
    inventory_low_stock_threshold: int = Field(
        default=5,
        ge=0,
        description="Cantidad a partir de la cual un producto se reporta con pocas unidades"
    )

    # Precios
    pricing_iva_rate: float = Field(
        default=0.19,
        ge=0,
        le=1,
        description="Tasa de IVA aplicada al precio final (0.19 = 19%)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Timezone
    timezone: str = Field(
        default="America/Bogota",
        description="Zona horaria de la aplicación (formato IANA)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida que el nivel de logging sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(
                f"Nivel de log '{v}' no válido. Usando 'INFO'. "
                f"Niveles válidos: {valid_levels}"
            )
            return "INFO"
        return v_upper

    @field_validator("inventory_backend")
    @classmethod
    def validate_inventory_backend(cls, v: str) -> str:
        """Valida la fuente de datos de inventario configurada."""
        valid_backends = ["sql", "http"]
        v_lower = v.lower()
        if v_lower not in valid_backends:
            raise ValueError(
                f"inventory_backend '{v}' no válido. Opciones: {valid_backends}"
            )
        return v_lower

    @property
    def cors_origins_list(self) -> list[str]:
        """Devuelve la lista de orígenes CORS permitidos."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Determina si la app está en modo producción."""
        return not self.debug_mode


# Instancia global de configuración
settings = Settings()


def configure_logging():
    """Configura el sistema de logging de la aplicación."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=log_format,
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info(f"Logging configurado en nivel {settings.log_level}")
    logger.info(f"Aplicación: {settings.app_name} v{settings.app_version}")
    logger.info(f"Inventario: backend '{settings.inventory_backend}'")
