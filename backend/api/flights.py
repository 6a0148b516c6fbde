"""
Flight search API endpoint.

Provides:
- GET /api/flights?q=<query>&date=<YYYY-MM-DD>

The query is classified as a flight number, airport or airline code and
forwarded to AviationStack; results come back as normalized flights.
"""

import logging
import time

import requests
from flask import Blueprint, jsonify, request

from backend.api.validation import validate_date
from backend.config import load_config
from backend.services.aviationstack import AviationStackClient
from backend.services.normalize import transform_flights

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api/flights')


@flights_bp.route('', methods=['GET'])
def search_flights():
    """
    Search flights by flight number, airline code or airport code.

    Query parameters:
    - q: free text, e.g. AA100, UA or JFK (required; empty returns no flights)
    - date: optional flight date, YYYY-MM-DD
    """
    start_time = time.perf_counter()
    settings = load_config()
    client = AviationStackClient.from_config(settings.aviationstack, timeout=settings.request_timeout)

    query = (request.args.get('q') or '').upper().strip()
    flight_date = (request.args.get('date') or '').strip()

    if not query:
        return jsonify({'flights': []})

    validate_date(flight_date)

    try:
        data = client.search_flights(query, flight_date or None)
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Failed to fetch from Aviation Stack: {type(e).__name__}')
        return jsonify({'error': 'Failed to fetch flight data. Please try again.'}), 500

    flights = transform_flights(data)

    query_time_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f'Flight search {query!r} returned {len(flights)} flights in {query_time_ms:.0f}ms')

    return jsonify({'flights': [f.to_dict() for f in flights]})
