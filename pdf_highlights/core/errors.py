from pathlib import Path
from typing import Union

USER_FACING_MESSAGE = "Failed to parse PDF. Ensure the file contains a text layer."


class HighlightExtractionError(Exception):
    """Base class for fatal extraction failures.

    Callers only need the kind of failure; `user_message` is the one message
    shown to end users regardless of the underlying cause.
    """
    user_message = USER_FACING_MESSAGE


class DocumentDecodeError(HighlightExtractionError):
    """The document could not be opened or decoded at all."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not decode document {self.path}: {reason}")


class PageRetrievalError(HighlightExtractionError):
    """Annotations or text content of a single page could not be retrieved."""

    def __init__(self, page_number: int, reason: str):
        self.page_number = page_number
        self.reason = reason
        super().__init__(f"Could not read page {page_number}: {reason}")
