"""
Room list request

Turns raw filter input into a ``RoomListValidRequest`` or an
``InvalidRequest``. Every offending key is reported, not just the first.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from rentomatic.application.requests.request import (
    InvalidRequest,
    RequestError,
    ValidRequest,
)
from rentomatic.domain.exceptions import FilterValueError
from rentomatic.domain.value_objects.filter_clause import (
    ROOM_FILTER_GRAMMAR,
    FilterGrammar,
)

logger = logging.getLogger(__name__)

FILTERS_PARAMETER = "filters"


@dataclass(frozen=True)
class RoomListValidRequest(ValidRequest):
    """Valid request to list rooms; ``filters`` is the caller's mapping as given"""

    filters: Optional[Mapping] = None


RoomListRequest = Union[RoomListValidRequest, InvalidRequest]


def build_room_list_request(
    filters: Any = None,
    grammar: FilterGrammar = ROOM_FILTER_GRAMMAR,
    strict_values: bool = False,
) -> RoomListRequest:
    """
    Build a room list request from raw filters

    Args:
        filters: mapping of ``attribute__operator`` keys to raw values, or None
        grammar: allow-list of filterable attributes and operators
        strict_values: also reject values that cannot be coerced to the
            attribute's type instead of leaving that to the repository

    Returns:
        RoomListValidRequest or InvalidRequest
    """
    if filters is None:
        return RoomListValidRequest(filters=None)

    if not isinstance(filters, Mapping):
        logger.debug("Rejected non-mapping filters of type %s", type(filters).__name__)
        return InvalidRequest.from_errors(
            [RequestError(FILTERS_PARAMETER, "Is not iterable")]
        )

    errors: List[RequestError] = []
    for key, value in filters.items():
        if not grammar.is_allowed(key):
            errors.append(RequestError(FILTERS_PARAMETER, f"Key {key} cannot be used"))
            continue

        if strict_values:
            try:
                grammar.coerce(grammar.parse_key(key, value))
            except FilterValueError as e:
                errors.append(RequestError(FILTERS_PARAMETER, e.message))

    if errors:
        logger.debug("Rejected room list filters: %s", errors)
        return InvalidRequest.from_errors(errors)

    return RoomListValidRequest(filters=filters)
