class CatalogError(Exception):
    """Base class for errors raised by catalog lookups and loading."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(CatalogError):
    status_code = 404

    MESSAGES = {
        "state": "State not found",
        "district": "District not found",
        "sub-district": "Sub-district not found",
    }

    def __init__(self, level: str):
        super().__init__(self.MESSAGES[level])
        self.level = level


class InvalidInput(CatalogError):
    status_code = 400

    def __init__(self, message: str = "Search query is required"):
        super().__init__(message)


class LoadFailure(CatalogError):
    """A single state's document could not be read or validated."""

    def __init__(self, state: str, reason: str):
        super().__init__(f"Failed to load state '{state}': {reason}")
        self.state = state
        self.reason = reason
