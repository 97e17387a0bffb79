"""
Test configuration and fixtures for Rentomatic
"""

import os
from unittest.mock import patch

import pytest

from rentomatic.domain.entities.room_entity import Room
from rentomatic.infrastructure.configuration.config import reset_config
from rentomatic.infrastructure.container.dependency_injection import reset_container


@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        'DATABASE_URL': 'sqlite://',
        'REPOSITORY_BACKEND': 'memory',
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'DEBUG',
    }

    reset_config()
    reset_container()
    with patch.dict(os.environ, test_env):
        yield test_env
    reset_config()
    reset_container()


@pytest.fixture
def room_dicts():
    """Four rooms priced 39, 66, 60 and 48"""
    return [
        {
            'code': 'f853578c-fc0f-4e65-81b8-566c5dffa35a',
            'size': 215,
            'price': 39,
            'longitude': -0.09998975,
            'latitude': 51.75436293,
        },
        {
            'code': 'fe2c3195-aeff-487a-a08f-e0bdc0ec6e9a',
            'size': 405,
            'price': 66,
            'longitude': 0.18228006,
            'latitude': 51.74640997,
        },
        {
            'code': '913694c6-435a-4366-ba0d-da5334a611b2',
            'size': 56,
            'price': 60,
            'longitude': 0.27891577,
            'latitude': 51.45994069,
        },
        {
            'code': 'eed76e77-55c1-41ce-985d-ca49bf6c0585',
            'size': 93,
            'price': 48,
            'longitude': 0.33894476,
            'latitude': 51.39916678,
        },
    ]


@pytest.fixture
def rooms(room_dicts):
    """Room entities built from room_dicts"""
    return [Room.from_dict(data) for data in room_dicts]
