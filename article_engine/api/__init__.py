# API: FastAPI service for batch keyword requests
from .app import create_app

__all__ = ["create_app"]
