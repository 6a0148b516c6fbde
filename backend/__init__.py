"""
Flight Search Backend Package.

Web front end for flight status search, route lookup and fare comparison,
built with Flask and requests.

Modules:
    api/         REST endpoints for flight search, fares and routes
    models/      Normalized result records (Flight, PriceResult, FlightRoute)
    services/    Provider clients (AviationStack, FlightAPI.io) and normalization
    errors.py    Error types mapped onto HTTP responses
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
