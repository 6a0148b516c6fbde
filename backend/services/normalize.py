"""
Response normalization - maps provider JSON onto the internal models.

Each transform takes one decoded provider document (or one entry of its
result array) and returns plain model objects. Missing or malformed
fields degrade to empty values instead of failing the whole response.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from backend.models import (
    Flight,
    FlightLeg,
    FlightRoute,
    FlightStatus,
    LiveTelemetry,
    PriceLeg,
    PriceResult,
    RouteLeg,
)

logger = logging.getLogger(__name__)

# Delays above this many minutes on either leg mark a flight as delayed
DELAY_THRESHOLD_MINUTES = 15

# AviationStack flight_status vocabulary -> display status
PROVIDER_STATUS_MAP = {
    'scheduled': FlightStatus.SCHEDULED,
    'active': FlightStatus.IN_FLIGHT,
    'landed': FlightStatus.LANDED,
    'cancelled': FlightStatus.CANCELLED,
    'incident': FlightStatus.DELAYED,
    'diverted': FlightStatus.DELAYED,
}

DEFAULT_BOOKING_BASE_URL = 'https://www.skyscanner.com'


def _section(data: Any, key: str) -> dict:
    """Return a nested object, or an empty dict if absent or not an object."""
    if not isinstance(data, dict):
        return {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _first(items: Any) -> Optional[Any]:
    if isinstance(items, list) and items:
        return items[0]
    return None


def map_status(
    provider_status: Optional[str],
    departure_delay: Optional[float] = None,
    arrival_delay: Optional[float] = None,
) -> FlightStatus:
    """
    Map a provider status and delay information onto FlightStatus.

    A delay over the threshold on either leg wins over whatever the
    provider reports. Unknown provider values fall back to SCHEDULED.
    """
    for delay in (departure_delay, arrival_delay):
        if delay and delay > DELAY_THRESHOLD_MINUTES:
            return FlightStatus.DELAYED

    status = (provider_status or 'scheduled').strip().lower()
    mapped = PROVIDER_STATUS_MAP.get(status)
    if mapped is None:
        logger.warning(f'Unrecognized provider flight status {provider_status!r}, using scheduled')
        return FlightStatus.SCHEDULED
    return mapped


def format_timezone(tz_name: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Label an IANA zone with its current abbreviation.

    Examples:
    - America/Los_Angeles -> 'America/Los_Angeles (PST)' in winter
    - Europe/Paris -> 'Europe/Paris (CEST)' in summer

    Returns the name unchanged if the zone cannot be resolved.
    """
    if not tz_name:
        return ''
    try:
        zone = ZoneInfo(tz_name)
        abbreviation = (now or datetime.now(zone)).astimezone(zone).tzname() or ''
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        logger.debug(f'Cannot resolve timezone {tz_name!r}: {e}')
        return tz_name
    return f'{tz_name} ({abbreviation})'


def transform_flight(raw: dict, index: int) -> Flight:
    """Convert one AviationStack /flights entry into a Flight."""
    flight = _section(raw, 'flight')
    airline = _section(raw, 'airline')
    departure = _section(raw, 'departure')
    arrival = _section(raw, 'arrival')
    live = _section(raw, 'live')

    flight_iata = flight.get('iata') or ''
    flight_number = flight_iata or f"{airline.get('iata') or ''}{flight.get('number') or ''}"

    return Flight(
        id=f'{flight_iata or flight_number}-{index}',
        flight_number=flight_number,
        airline=airline.get('name') or '',
        departure=FlightLeg(
            airport=departure.get('iata') or '',
            city=departure.get('airport') or '',
            time=departure.get('scheduled') or '',
            timezone=format_timezone(departure.get('timezone')),
        ),
        arrival=FlightLeg(
            airport=arrival.get('iata') or '',
            city=arrival.get('airport') or '',
            time=arrival.get('scheduled') or '',
            timezone=format_timezone(arrival.get('timezone')),
        ),
        status=map_status(
            raw.get('flight_status') if isinstance(raw, dict) else None,
            departure.get('delay'),
            arrival.get('delay'),
        ),
        live=LiveTelemetry(
            latitude=live.get('latitude'),
            longitude=live.get('longitude'),
            altitude=live.get('altitude'),
            speed=live.get('speed_horizontal'),
            updated=live.get('updated'),
        ) if live else None,
    )


def transform_flights(data: dict) -> List[Flight]:
    return [transform_flight(raw, i) for i, raw in enumerate(data.get('data') or [])]


def transform_route(raw: dict, index: int) -> FlightRoute:
    """Convert one AviationStack /routes entry into a FlightRoute."""
    flight = _section(raw, 'flight')
    airline = _section(raw, 'airline')
    departure = _section(raw, 'departure')
    arrival = _section(raw, 'arrival')

    airline_code = airline.get('iata') or ''
    flight_number = f"{airline_code}{flight.get('number') or ''}"

    return FlightRoute(
        id=f'{flight_number}-{index}',
        flight_number=flight_number,
        airline=airline.get('name') or '',
        airline_code=airline_code,
        departure=RouteLeg(
            airport=departure.get('iata') or '',
            airport_name=departure.get('airport') or '',
            time=departure.get('time') or '',
            timezone=departure.get('timezone') or '',
            terminal=departure.get('terminal'),
        ),
        arrival=RouteLeg(
            airport=arrival.get('iata') or '',
            airport_name=arrival.get('airport') or '',
            time=arrival.get('time') or '',
            timezone=arrival.get('timezone') or '',
            terminal=arrival.get('terminal'),
        ),
    )


def transform_routes(data: dict) -> List[FlightRoute]:
    return [transform_route(raw, i) for i, raw in enumerate(data.get('data') or [])]


def _index_by_id(entries: Any) -> Dict[str, dict]:
    """
    Build an id -> entry lookup.

    The fare provider sends places and carriers either as an object keyed
    by id or as a list of objects carrying an ``id`` field. Keys are
    normalized to strings because JSON object keys always are.
    """
    if isinstance(entries, dict):
        return {str(k): v for k, v in entries.items() if isinstance(v, dict)}
    if isinstance(entries, list):
        return {
            str(entry['id']): entry
            for entry in entries
            if isinstance(entry, dict) and entry.get('id') is not None
        }
    return {}


def resolve_booking_url(url: Optional[str], base_url: str = DEFAULT_BOOKING_BASE_URL) -> str:
    """Pass absolute URLs through; prefix relative ones with the booking site."""
    if not url:
        return ''
    if url.startswith('http'):
        return url
    return f"{base_url.rstrip('/')}{url if url.startswith('/') else '/' + url}"


def transform_pricing(data: dict, booking_base_url: str = DEFAULT_BOOKING_BASE_URL) -> List[PriceResult]:
    """
    Convert a FlightAPI.io one-way trip response into price-sorted results.

    Only the first pricing option and first leg of every itinerary are
    used; itineraries lacking either are skipped. The final sort is
    stable, so equal prices keep the provider's order.
    """
    places = _index_by_id(data.get('places'))
    carriers = _index_by_id(data.get('carriers'))
    currency = data.get('currency') or 'USD'

    results = []
    for index, itinerary in enumerate(data.get('itineraries') or []):
        if not isinstance(itinerary, dict):
            continue
        pricing_option = _first(itinerary.get('pricing_options'))
        leg = _first(itinerary.get('legs'))
        if not isinstance(pricing_option, dict) or not isinstance(leg, dict):
            continue

        origin = places.get(str(leg.get('origin_place_id')), {})
        destination = places.get(str(leg.get('destination_place_id')), {})
        carrier = carriers.get(str(_first(leg.get('marketing_carrier_ids'))), {})

        booking_item = _first(pricing_option.get('items'))
        booking_url = resolve_booking_url(
            booking_item.get('url') if isinstance(booking_item, dict) else None,
            booking_base_url,
        )

        airline_code = carrier.get('iata') or ''
        results.append(PriceResult(
            id=f'{airline_code}-{index}',
            price=_section(pricing_option, 'price').get('amount') or 0,
            currency=currency,
            airline=carrier.get('name') or 'Unknown Airline',
            airline_code=airline_code,
            departure=PriceLeg(
                airport=origin.get('iata') or '',
                airport_name=origin.get('name') or '',
                time=leg.get('departure') or '',
            ),
            arrival=PriceLeg(
                airport=destination.get('iata') or '',
                airport_name=destination.get('name') or '',
                time=leg.get('arrival') or '',
            ),
            duration=leg.get('duration') or 0,
            stops=leg.get('stop_count') or 0,
            booking_url=booking_url,
            itinerary_id=str(itinerary.get('id') or ''),
        ))

    # list.sort is stable
    results.sort(key=lambda r: r.price)
    return results
