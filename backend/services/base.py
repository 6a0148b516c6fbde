"""
Shared plumbing for third-party provider clients.
"""

import logging
from typing import Optional

import requests

from backend.errors import ConfigurationError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = 'API rate limit exceeded. Please try again later.'


class ProviderClient:
    """
    Base class for provider clients.

    Holds the API key, base URL, timeout and a requests session. The key
    is checked eagerly so a missing key surfaces as a configuration error
    before any input is looked at.
    """

    name = 'provider'
    key_setting = ''

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ConfigurationError(
                f'{self.name} API key not configured. '
                f'Please set {self.key_setting} environment variable.'
            )
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, url: str, params: Optional[dict] = None, **kwargs) -> requests.Response:
        """
        Issue a GET request.

        Transport errors are logged by type only (request URLs may carry
        the API key) and re-raised for the API layer to handle.
        """
        try:
            response = self.session.get(url, params=params, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout:
            logger.error(f'{self.name} request timed out after {self.timeout}s')
            raise
        except requests.RequestException as e:
            logger.error(f'{self.name} request failed: {type(e).__name__}')
            raise

        logger.debug(f'{self.name} responded with HTTP {response.status_code}')
        return response
