from .productos import router as productos_router

__all__ = [
    "productos_router",
]
