"""Exceptions raised by the food server."""


class DatasetLoadError(Exception):
    """Raised when the food dataset cannot be loaded."""


class OperationRejectedError(Exception):
    """Base class for requests rejected before reaching the query service."""


class UnknownOperationError(OperationRejectedError):
    """Raised when a request names an operation that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown operation: {name}")
        self.name = name


class InvalidArgumentsError(OperationRejectedError):
    """Raised when operation arguments fail validation."""

    def __init__(self, name: str, errors: list[dict[str, object]]) -> None:
        super().__init__(f"Invalid arguments for {name}")
        self.name = name
        self.errors = errors
