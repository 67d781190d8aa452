"""Domain errors that must not be swallowed."""


class CatalogLoadError(Exception):
    """The course catalog could not be read or validated. Fatal at startup."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load course catalog {path!r}: {reason}")
