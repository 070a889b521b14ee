"""Base exceptions for the tagging domain."""


class TaggingError(Exception):
    """Base exception for all tagging errors."""

    pass


class UnknownTagField(TaggingError, KeyError):  # noqa: N818
    """Raised when a tag field was never registered for a document type."""

    def __init__(self, field: str, document_type: str | None = None):
        self.field = field
        self.document_type = document_type
        super().__init__(field)

    def __str__(self) -> str:
        if self.document_type:
            return f"Tag field '{self.field}' is not registered for {self.document_type}"
        return f"Tag field '{self.field}' is not registered"
