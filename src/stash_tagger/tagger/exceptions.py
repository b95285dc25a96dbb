"""Custom exceptions for tagger operations.

Both failure modes are reported distinctly from a successful empty result so
callers can present "unable to import this record" without losing the rest
of the view.
"""


class TaggerError(Exception):
    """Base exception for tagger errors.

    Catch this to handle every record-level failure with a single clause.
    """

    def log_context(self) -> dict[str, str]:
        """Fields identifying the failing record, for logging extra=."""
        return {}


class MissingIdentifierError(TaggerError):
    """Raised when a provider record lacks its remote identifier.

    Attributes:
        record_type: Kind of record ("scene", "studio", "performer").
        record_name: Name or title of the record, if known.
    """

    def __init__(self, record_type: str, record_name: str | None = None) -> None:
        """Initialize the exception.

        Args:
            record_type: Kind of record missing its identifier.
            record_name: Name or title of the record, if known.
        """
        self.record_type = record_type
        self.record_name = record_name
        if record_name:
            message = f"Provider {record_type} '{record_name}' has no remote identifier"
        else:
            message = f"Provider {record_type} has no remote identifier"
        super().__init__(message)

    def log_context(self) -> dict[str, str]:
        context = {"record_type": self.record_type}
        if self.record_name:
            context["record_name"] = self.record_name
        return context


class EmptyPathError(TaggerError, ValueError):
    """Raised when a path contains no usable segments.

    Attributes:
        path: The path string that was rejected.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot parse empty path: {path!r}")

    def log_context(self) -> dict[str, str]:
        return {"path": self.path}
