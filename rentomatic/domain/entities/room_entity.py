"""
Room Entity - a rentable unit listed by the service
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Room:
    """Room domain entity"""

    code: str
    size: int
    price: int
    longitude: float
    latitude: float

    def __post_init__(self):
        """Validate the room after initialization"""
        if not self.code:
            raise ValueError("Room code cannot be empty")

        if self.size < 0:
            raise ValueError("Room size cannot be negative")

        if self.price < 0:
            raise ValueError("Room price cannot be negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Room":
        """Create a room from its dictionary representation"""
        return cls(
            code=str(data["code"]),
            size=int(data["size"]),
            price=int(data["price"]),
            longitude=float(data["longitude"]),
            latitude=float(data["latitude"]),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return asdict(self)
