# ridebooking

A small ride booking domain. It prices trips between two addresses according
to the rider's plan (`Forfait`), whether the ride is an UberX, the rider's
birthday and how long the rider has been registered, then stores the booked
ride through a repository.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ridebooking.value_objects`: `Address` (with `is_in_paris()`), `Forfait`
  (`BASIC`, `PREMIUM`), `Trip` (with `set_total_cost()`), `new_trip()` and
  `InvalidTripError`.
- `ridebooking.models`: `Rider` (with `is_birthday()` and `is_new_rider()`),
  `Ride` (with a `total_price` property) and `book_new_ride()`.
- `ridebooking.gateways`: the protocols the use case depends on:
  `DeterministicTime`, `RideRepo`, `RiderRepo`, `TripScanner`, `UuidGenerator`.
- `ridebooking.fakes`: in-memory implementations of those protocols and
  `RiderNotFoundError`.
- `ridebooking.booking`: `AddressInput`, `BookRequest` and
  `RideBookingUseCase` with its `book()` method.

## Pricing rules

- Base price: 30 within Paris, 20 from Paris to elsewhere, 10 from elsewhere
  into Paris, 50 otherwise. An UberX adds 10, except on the rider's birthday.
  An address is in Paris when its city name contains "paris", ignoring case.
- Distance price: 0.5 per kilometre on the basic plan; on the premium plan the
  first 5 kilometres are free.
- Riders registered for less than a year (31,622,400 seconds) get 5% off.
- Premium riders cannot book trips shorter than 3 km: `new_trip()` raises
  `InvalidTripError`.
- Prices are kept at single precision.

## Usage

`RideBookingUseCase` depends only on the protocols in `ridebooking.gateways`.
The in-memory implementations in `ridebooking.fakes` are handy for tests and
experiments.

```python
import uuid
from datetime import datetime, timezone

from ridebooking.booking import AddressInput, BookRequest, RideBookingUseCase
from ridebooking.fakes import (
    FakeDeterministicTime,
    FakeRideRepo,
    FakeRiderRepo,
    FakeTripScanner,
    FakeUuidGenerator,
)
from ridebooking.models import Rider
from ridebooking.value_objects import Forfait

rider_id = uuid.uuid4()
rider = Rider(
    id=rider_id,
    name="Alice",
    forfait=Forfait.BASIC,
    birthday=datetime(1980, 1, 10, tzinfo=timezone.utc),
    inscription=datetime(2023, 12, 10, tzinfo=timezone.utc),
)

rides = FakeRideRepo()
use_case = RideBookingUseCase(
    ride_repo=rides,
    rider_repo=FakeRiderRepo(expected_rider=rider),
    trip_scanner=FakeTripScanner(distance=3.0),
    uuid_generator=FakeUuidGenerator(expected_uuid=uuid.uuid4()),
    clock=FakeDeterministicTime(expected_time=datetime(2025, 1, 1, tzinfo=timezone.utc)),
)

ride = use_case.book(
    BookRequest(
        rider_id=rider_id,
        start_addr=AddressInput(11, "boulevard Poissonnière", 75002, "Paris"),
        end_addr=AddressInput(7, "rue de la Gare", 91300, "Massy"),
        is_uber_x=False,
    )
)
print(ride.total_price)  # 21.5
print(len(rides.rides))  # 1
```

`FakeRiderRepo` raises `RiderNotFoundError` when `should_raise` is set or no
`expected_rider` is given; a premium trip under 3 km raises `InvalidTripError`.
Nothing is saved in either case.

## What it does not do

The package holds the domain rules and the booking use case only. It has no
command-line tool, no server, no persistent storage and no real distance
lookup: the only implementations of the gateways are the in-memory ones in
`ridebooking.fakes`. To use it against a database or a mapping service, write
classes that satisfy the protocols in `ridebooking.gateways`.