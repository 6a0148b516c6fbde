"""
FlightRoute model - a scheduled service between two airports.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RouteLeg:
    airport: str
    airport_name: str
    time: str
    timezone: str
    terminal: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'airportName': self.airport_name,
            'time': self.time,
            'timezone': self.timezone,
            'terminal': self.terminal,
        }


@dataclass
class FlightRoute:
    """Route entry returned by the routes endpoint."""
    id: str
    flight_number: str
    airline: str
    airline_code: str
    departure: RouteLeg
    arrival: RouteLeg

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'flightNumber': self.flight_number,
            'airline': self.airline,
            'airlineCode': self.airline_code,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
        }
