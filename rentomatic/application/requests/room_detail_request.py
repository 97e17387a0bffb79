"""
Room detail request
"""

from dataclasses import dataclass
from typing import Any, Union

from rentomatic.application.requests.request import (
    InvalidRequest,
    RequestError,
    ValidRequest,
)

CODE_PARAMETER = "code"


@dataclass(frozen=True)
class RoomDetailValidRequest(ValidRequest):
    """Valid request for a single room"""

    code: str


RoomDetailRequest = Union[RoomDetailValidRequest, InvalidRequest]


def build_room_detail_request(code: Any = None) -> RoomDetailRequest:
    """Build a room detail request from a raw room code"""
    if code is None or code == "":
        return InvalidRequest.from_errors([RequestError(CODE_PARAMETER, "Is required")])

    if not isinstance(code, str):
        return InvalidRequest.from_errors(
            [RequestError(CODE_PARAMETER, "Must be a string")]
        )

    return RoomDetailValidRequest(code=code)
