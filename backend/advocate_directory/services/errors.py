class AdvocateDirectoryError(Exception):
    """Base class for errors raised by the advocate directory services."""


class RetrievalFailure(AdvocateDirectoryError):
    """The store could not produce a consistent page and count.

    Covers connectivity problems, malformed match expressions, counts that are
    negative or not integers, and rows that cannot be turned into records. An
    empty result set is not a failure.
    """

    def __init__(self, message: str = "Failed to search advocates"):
        super().__init__(message)
        self.message = message
