from expiro._core._headers import (
    Headers as Headers,
    HeaderSource as HeaderSource,
    to_header_source as to_header_source,
)
from expiro._core._spec import (
    ExpiryResolver as ExpiryResolver,
    get_cache_expiry as get_cache_expiry,
    parse_cache_control as parse_cache_control,
    parse_expires as parse_expires,
    resolve_expiry as resolve_expiry,
    sanitize_expiry as sanitize_expiry,
)
from expiro._core.models import (
    ExpiryResult as ExpiryResult,
    NonCacheable as NonCacheable,
    Timestamp as Timestamp,
    Unknown as Unknown,
)
from expiro._exceptions import ExpiroError as ExpiroError, UnsupportedHeaderSourceError as UnsupportedHeaderSourceError
from expiro._utils import (
    BaseClock as BaseClock,
    Clock as Clock,
    add_seconds as add_seconds,
    now_plus_seconds as now_plus_seconds,
    parse_date as parse_date,
)

__version__ = "0.1.0"

__all__ = (
    ## Resolver
    "ExpiryResolver",
    "resolve_expiry",
    "get_cache_expiry",
    "parse_cache_control",
    "parse_expires",
    "sanitize_expiry",
    ## Results
    "ExpiryResult",
    "Timestamp",
    "NonCacheable",
    "Unknown",
    ## Headers
    "Headers",
    "HeaderSource",
    "to_header_source",
    ## Time
    "BaseClock",
    "Clock",
    "add_seconds",
    "now_plus_seconds",
    "parse_date",
    ## Exceptions
    "ExpiroError",
    "UnsupportedHeaderSourceError",
)
