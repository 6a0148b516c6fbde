"""
Query parameter validation shared by the API blueprints.

All helpers raise ValidationError (HTTP 400) with a message naming the
violated constraint, so nothing is sent upstream on bad input.
"""

import re
from typing import Iterable, Optional

from flask import request

from backend.errors import ValidationError

AIRPORT_CODE_PATTERN = re.compile(r'[A-Z]{3}')
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
CURRENCY_PATTERN = re.compile(r'[A-Z]{3}')


def get_code(name: str) -> str:
    """Read a query parameter as an upper-cased, trimmed code ('' if absent)."""
    return (request.args.get(name) or '').upper().strip()


def require_params(values: dict, names: Iterable[str]) -> None:
    """Raise if any of the named values is empty, listing all that are."""
    missing = [name for name in names if not values.get(name)]
    if missing:
        raise ValidationError(f"Missing required parameters: {', '.join(missing)}")


def validate_airport_codes(*codes: str) -> None:
    if not all(AIRPORT_CODE_PATTERN.fullmatch(code) for code in codes):
        raise ValidationError('Invalid airport code. Use 3-letter IATA codes (e.g., JFK, LAX)')


def validate_date(value: Optional[str], name: str = 'date') -> None:
    """Check a YYYY-MM-DD date; empty values are accepted."""
    if value and not DATE_PATTERN.fullmatch(value):
        raise ValidationError(f'Invalid {name} format. Use YYYY-MM-DD')


def parse_adults(value: Optional[str]) -> int:
    """Parse the passenger count, defaulting to 1."""
    if not value:
        return 1
    try:
        adults = int(value)
    except ValueError:
        raise ValidationError('Invalid adults value. Use a whole number of at least 1')
    if adults < 1:
        raise ValidationError('Invalid adults value. Use a whole number of at least 1')
    return adults


def parse_currency(value: Optional[str]) -> str:
    currency = (value or 'USD').upper().strip()
    if not CURRENCY_PATTERN.fullmatch(currency):
        raise ValidationError('Invalid currency. Use a 3-letter ISO code (e.g., USD, EUR)')
    return currency
