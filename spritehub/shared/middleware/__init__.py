from .error_handler import configure_error_handling
from .rate_limit import InMemoryRateLimiter, rate_limit
from .request_logger import configure_request_logging, get_client_ip

__all__ = [
    "InMemoryRateLimiter",
    "configure_error_handling",
    "configure_request_logging",
    "get_client_ip",
    "rate_limit",
]
