"""
Configuration and Container Tests
"""

import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rentomatic.application.use_cases.room_list_use_case import RoomListUseCase
from rentomatic.infrastructure.configuration.config import (
    Settings,
    get_config,
    reset_config,
)
from rentomatic.infrastructure.container.dependency_injection import (
    DependencyContainer,
    get_container,
)
from rentomatic.infrastructure.repositories.memory_room_repository import (
    MemoryRoomRepository,
)
from rentomatic.infrastructure.repositories.sqlalchemy_room_repository import (
    SQLAlchemyRoomRepository,
)


class TestSettings:
    """Test settings loading"""

    def test_settings_from_environment(self):
        """Settings are read from environment variables"""
        settings = Settings()

        assert settings.database_url == "sqlite://"
        assert settings.environment == "test"
        assert settings.log_level == "DEBUG"
        assert settings.repository_backend == "memory"
        assert settings.strict_filter_values is False

    def test_log_level_is_normalized(self):
        """Log levels are upper-cased"""
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            assert Settings().log_level == "WARNING"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected"""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_invalid_backend(self):
        """Only known repository backends are accepted"""
        with patch.dict(os.environ, {"REPOSITORY_BACKEND": "mongo"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_get_config_is_cached(self):
        """get_config returns the same instance until reset"""
        first = get_config()

        assert get_config() is first
        reset_config()
        assert get_config() is not first


class TestDependencyContainer:
    """Test dependency wiring"""

    def test_memory_backend(self, rooms):
        """The memory backend is used by default"""
        container = DependencyContainer(rooms=rooms)

        assert isinstance(container.get_room_repository(), MemoryRoomRepository)
        assert isinstance(container.get_room_list_use_case(), RoomListUseCase)
        assert container.get_room_repository().list() == rooms

    def test_sqlalchemy_backend(self, rooms):
        """The SQLAlchemy backend creates tables and stores initial rooms"""
        with patch.dict(os.environ, {"REPOSITORY_BACKEND": "sqlalchemy"}):
            container = DependencyContainer(config=Settings(), rooms=rooms)

        repository = container.get_room_repository()
        assert isinstance(repository, SQLAlchemyRoomRepository)
        assert repository.list(filters={"price__lt": 50}) == [rooms[0], rooms[3]]

    def test_strict_filter_values_reaches_request_builder(self):
        """The strictness flag is bound into the list request builder"""
        with patch.dict(os.environ, {"STRICT_FILTER_VALUES": "true"}):
            container = DependencyContainer(config=Settings())

        request = container.get_room_list_request_builder()({"price__lt": "cheap"})
        assert request.is_valid() is False

    def test_injected_repository(self):
        """An explicit repository overrides configuration"""
        repository = MemoryRoomRepository()

        assert DependencyContainer(room_repository=repository).get_room_repository() is repository

    def test_get_container_is_cached(self):
        """get_container returns the process-wide instance"""
        assert get_container() is get_container()

    def test_get_container_builds_once_across_threads(self):
        """Concurrent first calls share a single container"""
        barrier = threading.Barrier(8)

        def slow_container():
            time.sleep(0.05)
            return object()

        with patch(
            "rentomatic.infrastructure.container.dependency_injection.DependencyContainer",
            side_effect=slow_container,
        ) as factory:

            def first_call():
                barrier.wait()
                return get_container()

            with ThreadPoolExecutor(max_workers=8) as executor:
                containers = list(executor.map(lambda _: first_call(), range(8)))

        assert factory.call_count == 1
        assert all(container is containers[0] for container in containers)
