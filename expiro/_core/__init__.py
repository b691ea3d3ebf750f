from expiro._core._headers import (
    Headers as Headers,
    HeaderSource as HeaderSource,
    split_directives as split_directives,
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

__all__ = (
    ## Resolver
    "ExpiryResolver",
    "resolve_expiry",
    "get_cache_expiry",
    "parse_cache_control",
    "parse_expires",
    "sanitize_expiry",
    ## Models
    "ExpiryResult",
    "Timestamp",
    "NonCacheable",
    "Unknown",
    ## Headers
    "Headers",
    "HeaderSource",
    "split_directives",
    "to_header_source",
)
