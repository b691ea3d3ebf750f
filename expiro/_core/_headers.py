from __future__ import annotations

from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

from expiro._exceptions import UnsupportedHeaderSourceError
from expiro._utils import HEADERS_ENCODING

__all__ = (
    "HeaderSource",
    "Headers",
    "split_directives",
    "to_header_source",
)

RawHeaders = Sequence[Tuple[Union[bytes, str], Union[bytes, str]]]
HeaderSourceTypes = Union["HeaderSource", Mapping[str, Any], RawHeaders, Callable[[str], Optional[str]]]


@runtime_checkable
class HeaderSource(Protocol):
    def lookup(self, name: str) -> Optional[str]: ...


def _decode(value: Union[bytes, str]) -> str:
    if isinstance(value, bytes):
        return value.decode(HEADERS_ENCODING)
    return value


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive header mapping.

    Repeated headers are kept as separate values and joined with ", "
    when read, which is how a comma-separated field like Cache-Control
    is meant to be combined.
    """

    def __init__(self, headers: Mapping[str, Union[str, List[str], None]]) -> None:
        self._headers: dict[str, List[str]] = {}
        for key, value in headers.items():
            if value is None:
                # absent header
                continue
            values = [value] if isinstance(value, str) else list(value)
            self._headers.setdefault(key.lower(), []).extend(values)

    @classmethod
    def from_raw(cls, raw_headers: Iterable[Tuple[Union[bytes, str], Union[bytes, str]]]) -> "Headers":
        headers = cls({})
        for key, value in raw_headers:
            headers[_decode(key)] = _decode(value)
        return headers

    def lookup(self, name: str) -> Optional[str]:
        if name.lower() not in self._headers:
            return None
        return self[name]

    def get_list(self, key: str) -> Optional[List[str]]:
        return self._headers.get(key.lower(), None)

    def __getitem__(self, key: str) -> str:
        return ", ".join(self._headers[key.lower()])

    def __setitem__(self, key: str, value: str) -> None:
        self._headers.setdefault(key.lower(), []).append(value)

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return repr(self._headers)

    def __eq__(self, other_headers: Any) -> bool:
        return isinstance(other_headers, Headers) and self._headers == other_headers._headers


class _CallableHeaderSource:
    def __init__(self, func: Callable[[str], Optional[str]]) -> None:
        self._func = func

    def lookup(self, name: str) -> Optional[str]:
        return self._func(name)


def _is_raw_headers(value: Any) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, tuple) and len(item) == 2 for item in value)


def to_header_source(headers: HeaderSourceTypes) -> HeaderSource:
    """
    Adapt the supported header containers to a `HeaderSource`.

    Accepted values, checked in this order:
    - an object that already has a `lookup(name)` method
    - a mapping of header names to a value or a list of values
      (httpx.Headers and requests' CaseInsensitiveDict included)
    - a list of `(name, value)` pairs, bytes or str, as httpcore exposes them
    - a callable taking a header name and returning its value or None

    Examples:
        >>> to_header_source({"Cache-Control": "no-cache"}).lookup("cache-control")
        'no-cache'
        >>> to_header_source([(b"Expires", b"0")]).lookup("expires")
        '0'
    """
    if isinstance(headers, HeaderSource):
        return headers

    if isinstance(headers, Mapping):
        if hasattr(headers, "multi_items"):
            # httpx.Headers keeps repeated fields apart here.
            return Headers.from_raw(headers.multi_items())  # type: ignore[attr-defined]
        return Headers(headers)

    if _is_raw_headers(headers):
        return Headers.from_raw(headers)  # type: ignore[arg-type]

    if callable(headers):
        return _CallableHeaderSource(headers)

    raise UnsupportedHeaderSourceError(
        f"Cannot read headers from an object of type {type(headers).__name__!r}. "
        "Pass a mapping, a list of (name, value) pairs, a callable or an object with a `lookup` method."
    )


def split_directives(value: str) -> List[str]:
    """
    Split a Cache-Control value into trimmed directives.

    Empty items are kept as empty strings; no other normalization is
    done, so the case of each directive is preserved.
    """
    return [directive.strip() for directive in value.split(",")]
