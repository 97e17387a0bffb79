"""
Room list use case

Lists the rooms matching a validated set of filters.
"""

from typing import List

from rentomatic.application.requests.room_list_request import RoomListValidRequest
from rentomatic.application.use_cases.base_use_case import UseCase
from rentomatic.domain.entities.room_entity import Room
from rentomatic.domain.repositories.room_repository import RoomRepository


class RoomListUseCase(UseCase):
    """
    Use case for listing rooms

    Handles:
    1. Rejecting requests whose filters failed validation
    2. Delegating filtering to the repository
    3. Reporting repository faults as system errors
    """

    def __init__(self, room_repository: RoomRepository):
        super().__init__()
        self._room_repository = room_repository

    def process_request(self, request: RoomListValidRequest) -> List[Room]:
        """Fetch rooms from the repository"""
        self._logger.debug("Listing rooms with filters %s", request.filters)
        return self._room_repository.list(filters=request.filters)
