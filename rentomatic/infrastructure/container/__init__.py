"""
Dependency Injection
"""

from .dependency_injection import DependencyContainer, get_container, reset_container

__all__ = ["DependencyContainer", "get_container", "reset_container"]
