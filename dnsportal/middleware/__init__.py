"""HTTP middleware: access log with request id, security headers, uncaught-error 500.

Applied in main app; order matters (last added = outermost).
"""

from dnsportal.middleware.access_log import AccessLogMiddleware
from dnsportal.middleware.security_headers import SecurityHeadersMiddleware
from dnsportal.middleware.unhandled_errors import UnhandledErrorMiddleware

__all__ = [
    "AccessLogMiddleware",
    "SecurityHeadersMiddleware",
    "UnhandledErrorMiddleware",
]
