"""
Request base types shared by every use case
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class RequestError:
    """A single field-level validation error"""

    parameter: str
    message: str

    def __str__(self) -> str:
        return f"{self.parameter}: {self.message}"


@dataclass(frozen=True)
class ValidRequest:
    """Base class for requests that passed validation"""

    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidRequest:
    """Request rejected during validation, with every error found"""

    errors: Tuple[RequestError, ...]

    def __post_init__(self):
        if not self.errors:
            raise ValueError("An invalid request needs at least one error")

    @classmethod
    def from_errors(cls, errors: Iterable[RequestError]) -> "InvalidRequest":
        return cls(tuple(errors))

    def is_valid(self) -> bool:
        return False
