"""Diary error taxonomy."""


class DiaryError(Exception):
    """Base class for every diary command or query failure."""

    pass


class AlreadyInitialized(DiaryError):
    """Raised when Initialize runs against an initialized diary."""

    def __init__(self, message: str = "Diary already initialized"):
        super().__init__(message)


class NotInitialized(DiaryError):
    """Raised when a mutating command runs before Initialize."""

    def __init__(self, message: str = "Diary not initialized"):
        super().__init__(message)


class InvalidSecret(DiaryError):
    """Raised when the submitted secret does not match the stored digest."""

    def __init__(self, message: str = "Invalid secret phrase"):
        super().__init__(message)


class NotOwner(DiaryError):
    """Raised when the caller is not the diary owner."""

    def __init__(self, message: str = "Only the owner can modify entries"):
        super().__init__(message)


class EntryNotFound(DiaryError):
    """Raised when a command targets an entry that does not exist."""

    def __init__(self, entry_id: int):
        super().__init__(f"Entry {entry_id} not found")
        self.entry_id = entry_id


class InvalidArgument(DiaryError):
    """Raised for malformed query parameters."""

    pass


class ShapeValidationFailed(DiaryError):
    """Raised by the front end when a request is missing or has empty fields."""

    pass
