"""Exception classes for citation rendering."""


class CitationError(Exception):
    """Base exception for citation-related errors."""

    pass


class CitationRenderError(CitationError):
    """Raised when a citation cannot be rendered in the requested format."""

    def __init__(self, format: str, cause: BaseException):
        """Initialize with format name and underlying cause."""
        self.format = format
        self.cause = cause
        super().__init__(f"Citation rendering failed ({format}): {cause}")


class LabelNotFoundError(CitationError, LookupError):
    """Raised when a label cannot be resolved for a locale."""

    def __init__(self, constant: str, locale: str):
        """Initialize with label constant and locale."""
        self.constant = constant
        self.locale = locale
        super().__init__(f"No label '{constant}' for locale '{locale}'")


class InvalidIdentifierError(CitationError, ValueError):
    """Raised when a persistent identifier string cannot be parsed."""

    def __init__(self, value: str, message: str = "malformed identifier"):
        """Initialize with offending value."""
        self.value = value
        super().__init__(f"Invalid persistent identifier {value!r}: {message}")


class RecordFormatError(CitationError, ValueError):
    """Raised when a citation record document cannot be decoded."""

    pass


class UnsupportedFormatError(CitationError, ValueError):
    """Raised when an unknown citation format is requested."""

    def __init__(self, format: str):
        """Initialize with format name."""
        self.format = format
        super().__init__(f"Unsupported citation format: {format}")


class XmlWriterError(CitationError):
    """Raised on structural misuse of the XML tag writer."""

    pass
