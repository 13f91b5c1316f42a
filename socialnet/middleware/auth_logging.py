from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("socialnet")

# Paths reachable without a bearer token
PUBLIC_PATHS = ("/", "/register", "/login", "/docs", "/redoc", "/openapi.json")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, api_prefix: str = ""):
        super().__init__(app)
        self.public_paths = {f"{api_prefix}{path}" for path in PUBLIC_PATHS} | set(PUBLIC_PATHS)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if not request.headers.get("Authorization") and path not in self.public_paths:
            logger.warning(f"Protected endpoint {path} accessed without auth header")

        response = await call_next(request)

        # Log auth-related status codes
        if response.status_code in [401, 403]:
            logger.warning(f"Auth error: {response.status_code} on {request.method} {path}")

        return response
