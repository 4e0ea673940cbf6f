"""Rate limiting configuration using slowapi.

Provides a module-level Limiter instance wired into the FastAPI app in
main.py.  ``SlowAPIMiddleware`` only resolves routes registered directly on
the app, so routes on included routers carry ``@api_limit`` (and a
``request: Request`` parameter) to be counted.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from employee_api.config import settings

# Default per client IP for app-level routes.
# Individual routes can override with @limiter.limit("N/period").
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
)

api_limit = limiter.limit(settings.RATE_LIMIT)
