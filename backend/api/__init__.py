"""
API module for Flight Search.

Provides REST endpoints for:
- Flight status search
- Fare comparison
- Route lookup
"""

from backend.api.flights import flights_bp
from backend.api.prices import prices_bp
from backend.api.routes import routes_bp

__all__ = ['flights_bp', 'prices_bp', 'routes_bp']
