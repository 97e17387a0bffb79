"""
Dependency Injection Container

Manages the instantiation and lifecycle of dependencies for Clean Architecture.
"""

import logging
import threading
from functools import partial
from typing import Any, Callable, Dict, Iterable, Optional

from rentomatic.application.requests.room_detail_request import build_room_detail_request
from rentomatic.application.requests.room_list_request import build_room_list_request
from rentomatic.application.use_cases.room_detail_use_case import RoomDetailUseCase
from rentomatic.application.use_cases.room_list_use_case import RoomListUseCase
from rentomatic.domain.entities.room_entity import Room
from rentomatic.domain.repositories.room_repository import RoomRepository
from rentomatic.domain.value_objects.filter_clause import (
    ROOM_FILTER_GRAMMAR,
    FilterGrammar,
)
from rentomatic.infrastructure.configuration.config import Settings, get_config
from rentomatic.infrastructure.database.operations import DatabaseManager
from rentomatic.infrastructure.repositories.memory_room_repository import (
    MemoryRoomRepository,
)
from rentomatic.infrastructure.repositories.sqlalchemy_room_repository import (
    SQLAlchemyRoomRepository,
)

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency injection container for Clean Architecture

    Manages the instantiation and lifecycle of:
    - Repositories (Infrastructure layer)
    - Request builders bound to the room filter grammar
    - Use Cases (Application layer)
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        room_repository: Optional[RoomRepository] = None,
        rooms: Iterable[Room] = (),
        grammar: FilterGrammar = ROOM_FILTER_GRAMMAR,
    ):
        self.config = config or get_config()
        self._grammar = grammar
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        self._setup_dependencies(room_repository, rooms)

    def _setup_dependencies(
        self, room_repository: Optional[RoomRepository], rooms: Iterable[Room]
    ):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        self._instances["room_repository"] = room_repository or self._create_repository(rooms)
        self._register_request_builders()
        self._register_use_cases()

        self._logger.info("Dependency injection container setup complete")

    def _create_repository(self, rooms: Iterable[Room]) -> RoomRepository:
        """Create the repository selected by configuration"""
        backend = self.config.repository_backend
        if backend == "sqlalchemy":
            database = DatabaseManager(self.config)
            database.init_db()
            self._instances["database_manager"] = database
            repository = SQLAlchemyRoomRepository(database.get_session, self._grammar)
            rooms = list(rooms)
            if rooms:
                repository.add_all(rooms)
            return repository

        self._logger.debug("Using in-memory room repository")
        return MemoryRoomRepository(rooms, self._grammar)

    def _register_request_builders(self):
        """Bind request builders to the configured grammar and strictness"""
        self._instances["room_list_request_builder"] = partial(
            build_room_list_request,
            grammar=self._grammar,
            strict_values=self.config.strict_filter_values,
        )
        self._instances["room_detail_request_builder"] = build_room_detail_request

    def _register_use_cases(self):
        """Register use case implementations"""
        repository = self.get_room_repository()
        self._instances["room_list_use_case"] = RoomListUseCase(repository)
        self._instances["room_detail_use_case"] = RoomDetailUseCase(repository)

    # Repository getters
    def get_room_repository(self) -> RoomRepository:
        """Get room repository instance"""
        return self._instances["room_repository"]

    # Request builder getters
    def get_room_list_request_builder(self) -> Callable[..., Any]:
        """Get the room list request builder"""
        return self._instances["room_list_request_builder"]

    def get_room_detail_request_builder(self) -> Callable[..., Any]:
        """Get the room detail request builder"""
        return self._instances["room_detail_request_builder"]

    # Use case getters
    def get_room_list_use_case(self) -> RoomListUseCase:
        """Get room list use case"""
        return self._instances["room_list_use_case"]

    def get_room_detail_use_case(self) -> RoomDetailUseCase:
        """Get room detail use case"""
        return self._instances["room_detail_use_case"]


_container: Optional[DependencyContainer] = None
_container_lock = threading.Lock()


def get_container() -> DependencyContainer:
    """Get the process-wide container instance, ensuring thread safety."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DependencyContainer()
    return _container


def reset_container() -> None:
    """Drop the process-wide container"""
    global _container
    with _container_lock:
        _container = None
