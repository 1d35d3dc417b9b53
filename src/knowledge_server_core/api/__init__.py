from .app import create_app
from .endpoints import router

__all__ = ["create_app", "router"]
