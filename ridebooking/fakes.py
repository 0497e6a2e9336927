"""In-memory implementations of the booking gateways."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .models import Ride, Rider
from .value_objects import Address


class RiderNotFoundError(LookupError):
    """Raised when a rider cannot be found."""

    def __init__(self, rider_id: uuid.UUID) -> None:
        super().__init__(f"rider {rider_id} not found")
        self.rider_id = rider_id


@dataclass
class FakeDeterministicTime:
    """Clock that always returns ``expected_time``."""

    expected_time: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.expected_time


@dataclass
class FakeTripScanner:
    """Trip scanner that always reports ``distance``."""

    distance: float = 0.0

    def get_total_distance(self, start_addr: Address, end_addr: Address) -> float:
        return self.distance


@dataclass
class FakeUuidGenerator:
    """Generator that always returns ``expected_uuid``."""

    expected_uuid: uuid.UUID = uuid.UUID(int=0)

    def generate(self) -> uuid.UUID:
        return self.expected_uuid


@dataclass
class FakeRideRepo:
    """Ride repository keeping rides in a list."""

    rides: list[Ride] = field(default_factory=list)

    def save(self, ride: Ride) -> None:
        self.rides.append(ride)


@dataclass
class FakeRiderRepo:
    """Rider repository returning ``expected_rider`` or failing on demand."""

    expected_rider: Rider | None = None
    should_raise: bool = False

    def get_rider(self, rider_id: uuid.UUID) -> Rider:
        if self.should_raise or self.expected_rider is None:
            raise RiderNotFoundError(rider_id)
        return self.expected_rider