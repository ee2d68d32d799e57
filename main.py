from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import math
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
import logging

from config import settings, configure_logging
from routes import productos_router
from database.db import create_tables, engine
from models.common import HealthCheckResponse

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    try:
        create_tables()
    except SQLAlchemyError as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="Catálogo de productos: cada producto se ensambla desde su almacén, las reglas de precio y el inventario.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _float_serializable(value: float):
    #JSON estricto no admite Infinity ni NaN
    return value if math.isfinite(value) else str(value)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Errores de validación como 422, aun cuando la entrada trae Infinity o NaN."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(), custom_encoder={float: _float_serializable})},
    )

@app.get("/")
async def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": f"{settings.app_name} - Catálogo de Productos",
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(productos_router)

@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Health check endpoint con verificación de base de datos."""
    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check: Error de conexión a BD: {e}")
        db_status = "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        inventory_backend=settings.inventory_backend,
        environment="production" if settings.is_production else "development",
    )

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
