"""
Room repository interface

Defines the contract for room data access operations.

``list`` semantics are the same for every implementation:

- ``filters`` absent or empty returns every room in natural order
- ``code__eq`` keeps rooms whose code equals the value
- ``price__eq`` / ``price__lt`` / ``price__gt`` compare the price with the
  value coerced to int
- several keys are combined with AND
- a value that cannot be coerced raises ``FilterValueError``
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from rentomatic.domain.entities.room_entity import Room


class RoomRepository(ABC):
    """Repository interface for room operations"""

    @abstractmethod
    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Room]:
        """List rooms matching all filters"""

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Room]:
        """Find room by code"""
