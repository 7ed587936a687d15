"""Exception hierarchy for cadfeatures."""


class CadFeaturesError(Exception):
    """Base exception for all cadfeatures errors."""

    pass


class DrawingError(CadFeaturesError):
    """Errors related to loading a drawing."""

    pass


class DrawingLoadError(DrawingError):
    """Error loading a drawing file or payload."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load drawing '{source}': {reason}")


class DrawingFormatError(DrawingLoadError):
    """The payload is not a readable DXF document."""

    def __init__(self, source: str, details: str) -> None:
        self.details = details
        super().__init__(source, f"invalid DXF format: {details}")

