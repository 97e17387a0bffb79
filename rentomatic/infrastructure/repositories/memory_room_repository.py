"""
In-memory implementation of RoomRepository
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from rentomatic.domain.entities.room_entity import Room
from rentomatic.domain.repositories.room_repository import RoomRepository
from rentomatic.domain.value_objects.filter_clause import (
    ROOM_FILTER_GRAMMAR,
    FilterGrammar,
)


class MemoryRoomRepository(RoomRepository):
    """Room repository backed by an immutable tuple of rooms"""

    def __init__(
        self,
        rooms: Iterable[Union[Room, Mapping[str, Any]]] = (),
        grammar: FilterGrammar = ROOM_FILTER_GRAMMAR,
    ):
        self._rooms = tuple(
            room if isinstance(room, Room) else Room.from_dict(room) for room in rooms
        )
        self._grammar = grammar
        self._logger = logging.getLogger(self.__class__.__name__)

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Room]:
        """List rooms matching all filters"""
        clauses = self._grammar.parse(filters)
        predicates = [self._grammar.predicate(clause) for clause in clauses]
        result = [
            room for room in self._rooms if all(test(room) for test in predicates)
        ]

        self._logger.debug(
            "Matched %d of %d room(s) with %d clause(s)",
            len(result),
            len(self._rooms),
            len(clauses),
        )
        return result

    def find_by_code(self, code: str) -> Optional[Room]:
        """Find room by code"""
        return next((room for room in self._rooms if room.code == code), None)
