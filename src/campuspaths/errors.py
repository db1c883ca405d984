__all__ = [
    "NotFound",
    "PreconditionViolation",
]


class PreconditionViolation(ValueError):
    """Raised when a call is malformed, e.g. a missing label or an unknown node."""


class NotFound(LookupError):
    """Raised when a well-formed domain key (like a building short name) is not registered."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown key: {key}")
        self.key = key
