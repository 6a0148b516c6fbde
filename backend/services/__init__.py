"""
External integration services.

Provider clients for flight status, routes and fares, plus the
normalization layer that reshapes their JSON into internal models.
"""

from backend.services.aviationstack import AviationStackClient, QueryKind, classify_query
from backend.services.flightapi import FlightApiClient

__all__ = ['AviationStackClient', 'FlightApiClient', 'QueryKind', 'classify_query']
