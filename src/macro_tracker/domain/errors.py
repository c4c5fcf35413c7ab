"""Domain errors."""


class MissingCatalogEntryError(KeyError):
    """Raised when a food name is not present in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Food not in catalog: {self.name!r}"


class LogIndexError(IndexError):
    """Raised when a food log position does not exist."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"No food log entry at index {index} (log has {size})")
        self.index = index
        self.size = size
