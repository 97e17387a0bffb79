"""
SQLAlchemy implementation of RoomRepository
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from rentomatic.domain.entities.room_entity import Room
from rentomatic.domain.repositories.room_repository import RoomRepository
from rentomatic.domain.value_objects.filter_clause import (
    ROOM_FILTER_GRAMMAR,
    FilterGrammar,
)
from rentomatic.infrastructure.database.models import RoomModel
from rentomatic.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyRoomRepository(RoomRepository):
    """SQLAlchemy implementation of room repository"""

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]] = None,
        grammar: FilterGrammar = ROOM_FILTER_GRAMMAR,
    ):
        self._session_factory = session_factory
        self._grammar = grammar
        self._logger = logging.getLogger(self.__class__.__name__)

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Room]:
        """List rooms matching all filters, in insertion order"""
        statement = select(RoomModel).order_by(RoomModel.id)
        for clause in self._grammar.parse(filters):
            # operator.eq/lt/gt on a column build the SQL expression
            column = getattr(RoomModel, clause.attribute)
            statement = statement.where(
                clause.operator.compare(column, self._grammar.coerce(clause))
            )

        with managed_session(self._session_factory, "list rooms") as session:
            rows = session.scalars(statement).all()
            return [row.to_entity() for row in rows]

    def find_by_code(self, code: str) -> Optional[Room]:
        """Find room by code"""
        with managed_session(self._session_factory, "find room") as session:
            row = session.scalars(
                select(RoomModel).where(RoomModel.code == code)
            ).first()
            return row.to_entity() if row else None

    def add(self, room: Room) -> Room:
        """Store a room"""
        with managed_session(self._session_factory, "add room") as session:
            session.add(RoomModel.from_entity(room))
        return room

    def add_all(self, rooms: Iterable[Room]) -> int:
        """Store several rooms in one transaction"""
        models = [RoomModel.from_entity(room) for room in rooms]
        with managed_session(self._session_factory, "add rooms") as session:
            session.add_all(models)
        self._logger.info("Stored %d room(s)", len(models))
        return len(models)
