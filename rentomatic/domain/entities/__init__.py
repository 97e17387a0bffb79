"""
Domain entities package

Contains the core business entities of the Rentomatic application.
"""

from .room_entity import Room

__all__ = ["Room"]
