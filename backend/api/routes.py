"""
Route lookup API endpoint.

Provides:
- GET /api/search?origin=JFK&destination=LHR&departureDate=...&returnDate=...

Looks up scheduled services for the outbound direction and, when a
return date is given, for the reverse direction as well.
"""

import logging
from typing import List

import requests
from flask import Blueprint, jsonify, request

from backend.api.validation import get_code, validate_airport_codes, validate_date
from backend.config import load_config
from backend.errors import ProviderError, ValidationError
from backend.models import FlightRoute
from backend.services.aviationstack import AviationStackClient
from backend.services.normalize import transform_routes

logger = logging.getLogger(__name__)

routes_bp = Blueprint('routes', __name__, url_prefix='/api/search')


def _direction(routes: List[FlightRoute], origin: str, destination: str, date: str) -> dict:
    return {
        'routes': [r.to_dict() for r in routes],
        'origin': origin,
        'destination': destination,
        'date': date,
    }


@routes_bp.route('', methods=['GET'])
def search_routes():
    """
    Find routes between two airports.

    Query parameters:
    - origin, destination: 3-letter IATA airport codes (required)
    - departureDate: optional, YYYY-MM-DD, echoed back with the outbound routes
    - returnDate: optional, YYYY-MM-DD; triggers the return lookup
    """
    settings = load_config()
    client = AviationStackClient.from_config(settings.aviationstack, timeout=settings.request_timeout)

    origin = get_code('origin')
    destination = get_code('destination')
    departure_date = (request.args.get('departureDate') or '').strip()
    return_date = (request.args.get('returnDate') or '').strip()

    if not origin or not destination:
        raise ValidationError('Both origin and destination are required')
    validate_airport_codes(origin, destination)
    validate_date(departure_date, 'departureDate')
    validate_date(return_date, 'returnDate')

    try:
        outbound = transform_routes(client.get_routes(origin, destination))

        inbound = []
        if return_date:
            try:
                inbound = transform_routes(client.get_routes(destination, origin))
            except ProviderError as e:
                # The outbound result is still useful on its own
                logger.warning(f'Return route lookup failed: {e.message}')
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Failed to fetch from Aviation Stack: {type(e).__name__}')
        return jsonify({'error': 'Failed to fetch flight routes. Please try again.'}), 500

    return jsonify({
        'outbound': _direction(outbound, origin, destination, departure_date),
        'return': _direction(inbound, destination, origin, return_date) if return_date else None,
    })
