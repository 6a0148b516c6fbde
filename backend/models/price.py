"""
PriceResult model - one fare offer for a one-way trip.
"""

from dataclasses import dataclass


@dataclass
class PriceLeg:
    """Departure or arrival point of a priced itinerary."""
    airport: str
    airport_name: str
    time: str

    def to_dict(self) -> dict:
        return {
            'airport': self.airport,
            'airportName': self.airport_name,
            'time': self.time,
        }


def format_duration(minutes: int) -> str:
    """Format a duration in minutes as e.g. '7h 5m'."""
    minutes = int(minutes or 0)
    return f'{minutes // 60}h {minutes % 60}m'


@dataclass
class PriceResult:
    """
    A priced itinerary from the fare provider.

    Only the first pricing option and first leg of the provider's
    itinerary are represented.
    """
    id: str
    price: float
    currency: str
    airline: str
    airline_code: str
    departure: PriceLeg
    arrival: PriceLeg
    duration: int
    stops: int
    booking_url: str
    itinerary_id: str = ''

    @property
    def duration_text(self) -> str:
        return format_duration(self.duration)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'id': self.id,
            'price': self.price,
            'currency': self.currency,
            'airline': self.airline,
            'airlineCode': self.airline_code,
            'departure': self.departure.to_dict(),
            'arrival': self.arrival.to_dict(),
            'duration': self.duration,
            'durationText': self.duration_text,
            'stops': self.stops,
            'bookingUrl': self.booking_url,
            'itineraryId': self.itinerary_id,
        }
