"""
Normalized result models for Flight Search.

Provider-agnostic records built from third-party JSON. None of them are
persisted; each lives only for the request that produced it.
"""

from backend.models.flight import Flight, FlightLeg, FlightStatus, LiveTelemetry
from backend.models.price import PriceLeg, PriceResult, format_duration
from backend.models.route import FlightRoute, RouteLeg

__all__ = [
    'Flight',
    'FlightLeg',
    'FlightStatus',
    'LiveTelemetry',
    'PriceLeg',
    'PriceResult',
    'format_duration',
    'FlightRoute',
    'RouteLeg',
]
