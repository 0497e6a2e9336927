"""The ride booking use case."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .gateways import DeterministicTime, RideRepo, RiderRepo, TripScanner, UuidGenerator
from .models import Ride, book_new_ride
from .value_objects import Address, new_trip


@dataclass(frozen=True)
class AddressInput:
    """Address as supplied by a booking request."""

    number: int = 0
    street: str = ""
    code: int = 0
    city: str = ""

    def to_address(self) -> Address:
        return Address(self.number, self.street, self.code, self.city)


@dataclass(frozen=True)
class BookRequest:
    """A request to book a ride."""

    rider_id: uuid.UUID
    start_addr: AddressInput
    end_addr: AddressInput
    is_uber_x: bool = False


@dataclass
class RideBookingUseCase:
    """Books rides for riders through the supplied gateways."""

    ride_repo: RideRepo
    rider_repo: RiderRepo
    trip_scanner: TripScanner
    uuid_generator: UuidGenerator
    clock: DeterministicTime

    def book(self, request: BookRequest) -> Ride:
        """Book and store a ride; errors from the gateways or trip rules propagate."""
        rider = self.rider_repo.get_rider(request.rider_id)
        is_birthday = rider.is_birthday(self.clock.now())

        start_addr = request.start_addr.to_address()
        end_addr = request.end_addr.to_address()
        distance = self.trip_scanner.get_total_distance(start_addr, end_addr)

        trip = new_trip(
            start_addr, end_addr, distance, rider.forfait, request.is_uber_x, is_birthday
        )
        ride = book_new_ride(
            self.uuid_generator.generate(), rider, trip, request.is_uber_x, self.clock.now()
        )
        self.ride_repo.save(ride)
        return ride