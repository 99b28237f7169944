"""
HTTP layer.
"""
from .routes import ROUTES, register_routes

__all__ = ["ROUTES", "register_routes"]
