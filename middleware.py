import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data: https:;"
        "object-src 'none';script-src 'self' https://cdn.jsdelivr.net 'unsafe-inline';"
        "style-src 'self' https: 'unsafe-inline'"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)


class StoreGateMiddleware(BaseHTTPMiddleware):
    """Rejects API calls until the document store is connected."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith("/api/") and not request.app.state.store.is_connected:
            logger.error(f"Rejected {request.method} {request.url.path}: database not connected")
            return JSONResponse(
                status_code=500,
                content={"status": "error", "message": "Database connection not established"},
            )
        return await call_next(request)


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Turns unexpected errors into the JSON error envelope inside the middleware stack."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"status": "error", "message": "An unexpected error occurred"},
            )
