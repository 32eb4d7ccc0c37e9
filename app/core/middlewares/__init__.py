from .headers import SECURITY_HEADERS, security_headers_middleware
from .logging import request_logging_middleware
