"""Entities of the ride booking domain: riders and rides."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime

from .value_objects import Forfait, Trip

ONE_YEAR_IN_SECONDS = 31622400


@dataclass(frozen=True)
class Rider:
    """A registered rider."""

    id: uuid.UUID
    name: str
    forfait: Forfait
    birthday: datetime
    inscription: datetime

    def is_birthday(self, now: datetime) -> bool:
        """Whether ``now`` falls on the rider's birthday."""
        return self.birthday.day == now.day and self.birthday.month == now.month

    def is_new_rider(self, now: datetime) -> bool:
        """Whether the rider signed up less than a year before ``now``."""
        return (now - self.inscription).total_seconds() < ONE_YEAR_IN_SECONDS


@dataclass(frozen=True)
class Ride:
    """A booked ride with its priced trip."""

    id: uuid.UUID
    rider: Rider
    trip: Trip
    is_uber_x: bool

    @property
    def total_price(self) -> float:
        return self.trip.total_price


def book_new_ride(
    ride_id: uuid.UUID,
    rider: Rider,
    trip: Trip,
    is_uber_x: bool,
    now: datetime,
) -> Ride:
    """Price a copy of ``trip`` for ``rider`` and return the booked ride."""
    priced = replace(trip)
    priced.set_total_cost(
        rider.forfait, is_uber_x, rider.is_birthday(now), rider.is_new_rider(now)
    )
    return Ride(id=ride_id, rider=rider, trip=priced, is_uber_x=is_uber_x)