"""
HTTP adapter
"""

from .room_routes import STATUS_CODES, create_app

__all__ = ["STATUS_CODES", "create_app"]
