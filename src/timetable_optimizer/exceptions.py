"""Custom exceptions for the timetable optimizer."""


class OptimizerError(Exception):
    """Base exception for optimizer errors."""

    pass


class RequestFileError(OptimizerError):
    """Request or result file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read '{path}': {reason}")


class InvalidRequestError(OptimizerError):
    """A record in the request document could not be parsed."""

    def __init__(self, message: str, section: str | None = None, index: int | None = None):
        self.section = section
        self.index = index
        location = ""
        if section:
            location += f" in '{section}'"
        if index is not None:
            location += f" at item {index}"
        super().__init__(f"Invalid request{location}: {message}")


class UnknownConstraintError(OptimizerError):
    """Constraint key is not in the registry."""

    def __init__(self, key: str, available: list[str] | None = None):
        self.key = key
        self.available = available or []
        message = f"Unknown constraint '{key}'"
        if self.available:
            message += f". Available constraints: {', '.join(self.available)}"
        super().__init__(message)
