"""
AviationStack client - flight status and route lookups.

Endpoints used:
- /flights  real-time and scheduled flight status
- /routes   scheduled services between two airports

AviationStack reports most failures inside a 200 response body:
    {"error": {"code": "usage_limit_reached", "message": "..."}}
"""

import logging
import re
from enum import Enum
from typing import Optional

import requests

from backend.config import AviationStackConfig
from backend.errors import ProviderError
from backend.services.base import ProviderClient, RATE_LIMIT_MESSAGE

logger = logging.getLogger(__name__)

FLIGHT_NUMBER_PATTERN = re.compile(r'[A-Z]{2}[0-9]+')
AIRPORT_PATTERN = re.compile(r'[A-Z]{3}')

FLIGHTS_LIMIT = 20
ROUTES_LIMIT = 25

# Body error codes -> HTTP status we answer with
ERROR_CODE_STATUS = {
    'missing_access_key': 401,
    'invalid_access_key': 401,
    'inactive_user': 401,
    'usage_limit_reached': 429,
    'rate_limit_reached': 429,
}


class QueryKind(str, Enum):
    """How a free-text search query is sent to /flights."""
    FLIGHT_NUMBER = 'flight_iata'
    AIRPORT = 'dep_iata'
    AIRLINE = 'airline_iata'


def classify_query(query: str) -> QueryKind:
    """
    Decide which /flights filter a search query maps to.

    Rules, first match wins:
    - AA100 (two letters then digits) -> flight number
    - JFK (three letters)             -> departure airport
    - UA (any two characters)         -> airline
    - anything else                   -> flight number

    The query is expected upper-cased and trimmed.
    """
    if FLIGHT_NUMBER_PATTERN.fullmatch(query):
        return QueryKind.FLIGHT_NUMBER
    if AIRPORT_PATTERN.fullmatch(query):
        return QueryKind.AIRPORT
    if len(query) == 2:
        return QueryKind.AIRLINE
    return QueryKind.FLIGHT_NUMBER


class AviationStackClient(ProviderClient):
    """Thin client for the AviationStack REST API."""

    name = 'Aviation Stack'
    key_setting = 'AVIATIONSTACK_API_KEY'

    @classmethod
    def from_config(
        cls,
        settings: AviationStackConfig,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> 'AviationStackClient':
        """Create client from application configuration."""
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=timeout,
            session=session,
        )

    def search_flights(self, query: str, flight_date: Optional[str] = None) -> dict:
        """
        Look up flights matching a search query.

        Returns the decoded response body.
        """
        kind = classify_query(query)
        params = {kind.value: query, 'limit': FLIGHTS_LIMIT}
        if flight_date:
            params['flight_date'] = flight_date

        logger.info(f'Searching AviationStack flights by {kind.value}={query}')
        data = self._fetch('flights', params, 'Failed to fetch flight data')
        return data

    def get_routes(self, dep_iata: str, arr_iata: str) -> dict:
        """Look up scheduled routes from one airport to another."""
        logger.info(f'Fetching AviationStack routes {dep_iata} -> {arr_iata}')
        return self._fetch(
            'routes',
            {'dep_iata': dep_iata, 'arr_iata': arr_iata, 'limit': ROUTES_LIMIT},
            'Failed to fetch flight routes',
        )

    def _fetch(self, endpoint: str, params: dict, failure_message: str) -> dict:
        """
        GET an endpoint and return the decoded body.

        Raises:
            ProviderError if AviationStack reports an error
            requests.RequestException / ValueError on transport or decoding failure
        """
        response = self._get(
            f'{self.base_url}/{endpoint}',
            params={'access_key': self.api_key, **params},
        )
        try:
            data = response.json()
        except ValueError:
            # Error pages are not always JSON; report the HTTP status instead
            if response.ok:
                raise
            data = None

        error = data.get('error') if isinstance(data, dict) else None
        if error:
            code = error.get('code') if isinstance(error, dict) else None
            message = error.get('message') if isinstance(error, dict) else None
            logger.error(f'Aviation Stack API error: {code or error}')
            status = ERROR_CODE_STATUS.get(code, 400)
            if status == 429 and not message:
                message = RATE_LIMIT_MESSAGE
            raise ProviderError(message or failure_message, status)

        if not response.ok:
            logger.error(f'Aviation Stack HTTP error: {response.status_code}')
            if response.status_code == 429:
                raise ProviderError(RATE_LIMIT_MESSAGE, 429)
            if response.status_code in (401, 403):
                raise ProviderError(
                    f'Invalid API key. Please check your {self.key_setting}.', 401
                )
            raise ProviderError(f'{failure_message}. Please try again.', response.status_code)

        if not isinstance(data, dict):
            raise ValueError('Unexpected response body from Aviation Stack')
        return data
