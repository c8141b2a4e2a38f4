"""Graph file exceptions."""


class GraphLoadError(Exception):
    """Raised when a graph file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class GraphSchemaError(Exception):
    """Raised when graph data fails schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
