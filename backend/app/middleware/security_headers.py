"""
Users API Backend — Security Headers Middleware
=================================================

What:  Adds a fixed set of HTTP hardening headers to every response.
How:   Sets each header unless the route already set it.
Who:   Applied to every request when settings.security_headers is true.

Headers:
    X-Content-Type-Options: nosniff           → no MIME sniffing
    X-Frame-Options: SAMEORIGIN               → no framing by other sites
    Strict-Transport-Security                 → HTTPS for 180 days
    Referrer-Policy: no-referrer
    X-DNS-Prefetch-Control: off
    X-Download-Options: noopen
    X-Permitted-Cross-Domain-Policies: none
    Cross-Origin-Opener-Policy: same-origin
    Cross-Origin-Resource-Policy: same-origin
    Origin-Agent-Cluster: ?1
    X-XSS-Protection: 0                       → legacy auditor disabled

Content-Security-Policy is left out: the Swagger UI at /docs loads its
assets from a CDN.
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURITY_HEADERS to every response without overriding route-set values."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            if name not in response.headers:
                response.headers[name] = value
        return response
