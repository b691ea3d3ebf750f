__all__ = ("ExpiroError", "UnsupportedHeaderSourceError")


class ExpiroError(Exception): ...


class UnsupportedHeaderSourceError(ExpiroError, TypeError): ...
