"""
Use case responses

Every use case invocation produces exactly one response: a
``ResponseSuccess`` carrying the payload, or a ``ResponseFailure`` carrying
an error kind and a message. Transports map ``response.type`` to their own
status codes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from rentomatic.application.requests.request import InvalidRequest


class ResponseType(str, Enum):
    """Outcome kinds of a use case"""

    SUCCESS = "Success"
    PARAMETERS_ERROR = "ParametersError"
    RESOURCE_ERROR = "ResourceError"
    SYSTEM_ERROR = "SystemError"


@dataclass(frozen=True)
class ResponseSuccess:
    """Successful use case outcome"""

    value: Any = None

    @property
    def type(self) -> ResponseType:
        return ResponseType.SUCCESS

    def is_success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class ResponseFailure:
    """Failed use case outcome"""

    type: ResponseType
    message: str

    def __post_init__(self):
        if self.type is ResponseType.SUCCESS:
            raise ValueError("A failure response cannot have the Success type")

    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> Dict[str, str]:
        return {"type": self.type.value, "message": self.message}

    def to_dict(self) -> Dict[str, str]:
        return self.value

    @classmethod
    def build_parameters_error(cls, message: str) -> "ResponseFailure":
        return cls(ResponseType.PARAMETERS_ERROR, message)

    @classmethod
    def build_resource_error(cls, message: Union[str, Exception]) -> "ResponseFailure":
        return cls(ResponseType.RESOURCE_ERROR, _format_message(message))

    @classmethod
    def build_system_error(cls, message: Union[str, Exception]) -> "ResponseFailure":
        return cls(ResponseType.SYSTEM_ERROR, _format_message(message))

    @classmethod
    def build_from_invalid_request(
        cls, invalid_request: InvalidRequest
    ) -> "ResponseFailure":
        """Join every request error, in the order they were recorded"""
        message = "\n".join(str(error) for error in invalid_request.errors)
        return cls.build_parameters_error(message)


Response = Union[ResponseSuccess, ResponseFailure]


def _format_message(message: Union[str, Exception]) -> str:
    """Prefix exceptions with their class name so the fault stays diagnosable"""
    if isinstance(message, Exception):
        return f"{message.__class__.__name__}: {message}"
    return message
