"""
Flight model - normalized flight status record.

Produced from one AviationStack ``/flights`` entry. Request scoped:
created per search, serialized, then discarded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FlightStatus(str, Enum):
    """
    Simplified flight status shown in the UI.

    BOARDING and DEPARTED are part of the display vocabulary but the
    status provider never reports them directly.
    """
    SCHEDULED = 'scheduled'
    BOARDING = 'boarding'
    DEPARTED = 'departed'
    IN_FLIGHT = 'in-flight'
    LANDED = 'landed'
    DELAYED = 'delayed'
    CANCELLED = 'cancelled'


@dataclass
class FlightLeg:
    """Departure or arrival side of a flight."""
    airport: str
    city: str
    time: str
    timezone: str

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'city': self.city,
            'time': self.time,
            'timezone': self.timezone,
        }


@dataclass
class LiveTelemetry:
    """Live position reported for an airborne flight."""
    latitude: Optional[float]
    longitude: Optional[float]
    altitude: Optional[float]
    speed: Optional[float]
    updated: Optional[str]

    def to_dict(self) -> dict:
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude': self.altitude,
            'speed': self.speed,
            'updated': self.updated,
        }


@dataclass
class Flight:
    """
    A single flight as returned by the search endpoint.

    ``id`` is built from the flight designator and the position in the
    provider's result list, so it is only unique within one response.
    """
    id: str
    flight_number: str
    airline: str
    departure: FlightLeg
    arrival: FlightLeg
    status: FlightStatus
    live: Optional[LiveTelemetry] = None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        result = {
            'id': self.id,
            'flightNumber': self.flight_number,
            'airline': self.airline,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
            'status': self.status.value,
        }
        # Only present when the provider sent live data
        if self.live is not None:
            result['live'] = self.live.to_dict()
        return result
