"""
FlightAPI.io client - one-way fare search.

The key is part of the URL path rather than a query parameter:
    /onewaytrip/{key}/{from}/{to}/{date}/{adults}/{children}/{infants}/{cabin}/{currency}
"""

import logging
from typing import Optional

import requests

from backend.config import FlightApiConfig
from backend.errors import ProviderError
from backend.services.base import ProviderClient, RATE_LIMIT_MESSAGE

logger = logging.getLogger(__name__)

GENERIC_FAILURE = 'Failed to fetch pricing data. Please try again.'


class FlightApiClient(ProviderClient):
    """Thin client for the FlightAPI.io pricing API."""

    name = 'FlightAPI.io'
    key_setting = 'FLIGHTAPI_KEY'

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
        booking_base_url: str = 'https://www.skyscanner.com',
    ):
        super().__init__(api_key, base_url, timeout=timeout, session=session)
        self.booking_base_url = booking_base_url

    @classmethod
    def from_config(
        cls,
        settings: FlightApiConfig,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> 'FlightApiClient':
        """Create client from application configuration."""
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=timeout,
            session=session,
            booking_base_url=settings.booking_base_url,
        )

    def one_way_trip(
        self,
        origin: str,
        destination: str,
        date: str,
        adults: int = 1,
        currency: str = 'USD',
        cabin_class: str = 'Economy',
    ) -> dict:
        """
        Fetch economy fares for a one-way trip.

        Children and infants are always zero.

        Raises:
            ProviderError on HTTP failures or an error reported in the body
            requests.RequestException / ValueError on transport or decoding failure
        """
        url = (
            f'{self.base_url}/onewaytrip/{self.api_key}/{origin}/{destination}/'
            f'{date}/{adults}/0/0/{cabin_class}/{currency}'
        )
        logger.info(f'Fetching FlightAPI.io fares {origin} -> {destination} on {date}')

        response = self._get(url, headers={'Accept': 'application/json'})

        if not response.ok:
            logger.error(f'FlightAPI.io error: {response.status_code} {response.text[:200]}')
            if response.status_code == 401:
                raise ProviderError(f'Invalid API key. Please check your {self.key_setting}.', 401)
            if response.status_code == 429:
                raise ProviderError(RATE_LIMIT_MESSAGE, 429)
            raise ProviderError(GENERIC_FAILURE, response.status_code)

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError('Unexpected response body from FlightAPI.io')

        # Errors can also come back with a 200
        if data.get('error') or data.get('message'):
            message = data.get('message') or data.get('error')
            logger.error(f'FlightAPI.io reported an error: {message}')
            raise ProviderError(str(message) if message else 'Unknown API error', 400)

        return data
