"""Ride booking domain: trip pricing, riders, rides, gateways, in-memory fakes and the booking use case."""

__version__ = "0.1.0"
__all__ = ["booking", "fakes", "gateways", "models", "value_objects"]