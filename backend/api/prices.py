"""
Fare comparison API endpoint.

Provides:
- GET /api/prices?from=JFK&to=LAX&date=2026-03-01&adults=1&currency=USD

Returns one-way fares from FlightAPI.io sorted by price, cheapest first.
"""

import logging

import requests
from flask import Blueprint, jsonify, request

from backend.api.validation import (
    get_code,
    parse_adults,
    parse_currency,
    require_params,
    validate_airport_codes,
    validate_date,
)
from backend.config import load_config
from backend.services.flightapi import FlightApiClient, GENERIC_FAILURE
from backend.services.normalize import transform_pricing

logger = logging.getLogger(__name__)

prices_bp = Blueprint('prices', __name__, url_prefix='/api/prices')


@prices_bp.route('', methods=['GET'])
def get_prices():
    """
    Compare one-way fares for a route and date.

    Query parameters:
    - from, to: 3-letter IATA airport codes (required)
    - date: departure date, YYYY-MM-DD (required)
    - adults: passenger count (default 1)
    - currency: ISO currency code (default USD)
    """
    settings = load_config()
    client = FlightApiClient.from_config(settings.flightapi, timeout=settings.request_timeout)

    params = {
        'from': get_code('from'),
        'to': get_code('to'),
        'date': (request.args.get('date') or '').strip(),
    }
    require_params(params, ['from', 'to', 'date'])
    validate_airport_codes(params['from'], params['to'])
    validate_date(params['date'])
    adults = parse_adults(request.args.get('adults'))
    currency = parse_currency(request.args.get('currency'))

    try:
        data = client.one_way_trip(params['from'], params['to'], params['date'], adults, currency)
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Failed to fetch from FlightAPI.io: {type(e).__name__}')
        return jsonify({'error': GENERIC_FAILURE}), 500

    prices = transform_pricing(data, client.booking_base_url)

    return jsonify({
        'prices': [p.to_dict() for p in prices],
        'meta': {
            'from': params['from'],
            'to': params['to'],
            'date': params['date'],
            'adults': adults,
            'currency': currency,
            'resultsCount': len(prices),
        },
    })
