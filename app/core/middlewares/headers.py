from fastapi import Request
from typing import Callable

# JSON only; nothing here should ever be framed or cached by intermediaries
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none';",
    "Cache-Control": "no-store",
}


async def security_headers_middleware(request: Request, call_next: Callable):
    """Add security headers to all responses"""
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    return response
