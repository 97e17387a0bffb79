# pylint: disable=too-few-public-methods
"""
SQLAlchemy database models for Rentomatic
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from rentomatic.domain.entities.room_entity import Room


class Base(DeclarativeBase):
    """Declarative base for all models"""


class RoomModel(Base):
    """Room model"""
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, index=True)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)

    def to_entity(self) -> Room:
        """Map the row to a domain room"""
        return Room(
            code=self.code,
            size=self.size,
            price=self.price,
            longitude=self.longitude,
            latitude=self.latitude,
        )

    @classmethod
    def from_entity(cls, room: Room) -> "RoomModel":
        """Build a row from a domain room"""
        return cls(
            code=room.code,
            size=room.size,
            price=room.price,
            longitude=room.longitude,
            latitude=room.latitude,
        )
