"""Engine-level exceptions."""


class ChromagraphError(Exception):
    """Base class for recoverable engine errors."""


class NodeNotFoundError(ChromagraphError):
    """Raised when a node identifier is not present in a graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class InvalidParametersError(ChromagraphError):
    """Raised when a generator is asked for a degenerate graph."""

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        super().__init__(message)
