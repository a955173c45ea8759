"""Exception types shared across the buddy package."""


class BuddyError(Exception):
    """Base class for all buddy errors."""


class ProviderError(BuddyError):
    """A remote embedding or LLM call failed or returned a malformed payload."""


class DimensionMismatch(BuddyError, ValueError):
    """Two vectors (or a vector and the index) have different lengths."""


class UnknownTool(BuddyError):
    """The model asked for a tool that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolExecutionError(BuddyError):
    """A registered tool failed while validating its input or running."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class IndexCorrupt(BuddyError):
    """The persisted knowledge index could not be read."""
