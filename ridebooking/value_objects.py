"""Value objects of the ride booking domain: addresses, plans and trips."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

PRICE_PER_KILOMETER = 0.5
NEW_RIDER_RATE = 0.95
PREMIUM_MIN_DISTANCE = 3
PREMIUM_FREE_KILOMETERS = 5


def _f32(value: float) -> float:
    """Round a float to single precision, as prices are kept."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Forfait(str, Enum):
    """Subscription plan of a rider."""

    BASIC = "BASIC"
    PREMIUM = "PREMIUM"


@dataclass(frozen=True)
class Address:
    """A postal address."""

    number: int
    street: str
    code: int
    city: str

    def is_in_paris(self) -> bool:
        """Whether the city name mentions Paris, ignoring case."""
        return "paris" in self.city.lower()


class InvalidTripError(ValueError):
    """Raised when a trip breaks the booking rules."""


@dataclass
class Trip:
    """A journey between two addresses and its computed price."""

    start_addr: Address
    end_addr: Address
    distance: float
    total_price: float = 0.0

    def _base_price(self, is_uber_x: bool, is_birthday: bool) -> float:
        base = 10.0 if is_uber_x and not is_birthday else 0.0
        if self.start_addr.is_in_paris():
            return base + (30 if self.end_addr.is_in_paris() else 20)
        if self.end_addr.is_in_paris():
            return base + 10
        return base + 50

    def _distance_price(self, forfait: Forfait) -> float:
        distance = _f32(self.distance)
        if forfait == Forfait.PREMIUM:
            if distance < PREMIUM_FREE_KILOMETERS:
                return 0.0
            distance = _f32(distance - PREMIUM_FREE_KILOMETERS)
        return _f32(distance * PRICE_PER_KILOMETER)

    def set_total_cost(
        self,
        forfait: Forfait,
        is_uber_x: bool,
        is_birthday: bool,
        is_new_rider: bool,
    ) -> None:
        """Compute and store the total price of the trip."""
        total = _f32(self._base_price(is_uber_x, is_birthday) + self._distance_price(forfait))
        if is_new_rider:
            total = _f32(total * _f32(NEW_RIDER_RATE))
        self.total_price = total


def new_trip(
    start_addr: Address,
    end_addr: Address,
    distance: float,
    forfait: Forfait,
    is_uber_x: bool,
    is_birthday: bool,
) -> Trip:
    """Create an unpriced trip, enforcing the minimal premium distance."""
    if forfait == Forfait.PREMIUM and distance < PREMIUM_MIN_DISTANCE:
        raise InvalidTripError("distance cannot be < 3 when uberX")
    return Trip(start_addr=start_addr, end_addr=end_addr, distance=distance)