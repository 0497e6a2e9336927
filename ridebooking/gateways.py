"""Ports through which the booking use case reaches the outside world."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Protocol

from .models import Ride, Rider
from .value_objects import Address


class DeterministicTime(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


class RideRepo(Protocol):
    """Storage for booked rides."""

    def save(self, ride: Ride) -> None:
        ...


class RiderRepo(Protocol):
    """Lookup of riders; raises when a rider cannot be found."""

    def get_rider(self, rider_id: uuid.UUID) -> Rider:
        ...


class TripScanner(Protocol):
    """Measures the distance between two addresses."""

    def get_total_distance(self, start_addr: Address, end_addr: Address) -> float:
        ...


class UuidGenerator(Protocol):
    """Produces identifiers for new rides."""

    def generate(self) -> uuid.UUID:
        ...