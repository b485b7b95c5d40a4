"""Exceptions raised while normalizing a single entry."""

__all__ = ["EntryError", "MissingFieldError", "InvalidFieldError"]


class EntryError(ValueError):
    """Raised when an entry cannot be turned into a Paper.

    Attributes
    ----------
    field : str
        Name of the record field that failed.
    citekey : str | None
        Citation key of the entry, when known.
    """

    def __init__(self, message: str, field: str, citekey: str | None = None) -> None:
        """Initialize entry error.

        Parameters
        ----------
        message : str
            Error message.
        field : str
            Record field that failed.
        citekey : str | None, optional
            Citation key of the failing entry.
        """
        super().__init__(message)
        self.field = field
        self.citekey = citekey

    def with_citekey(self, citekey: str | None) -> "EntryError":
        """Return a copy of this error bound to ``citekey``."""
        return type(self)(self.args[0], self.field, citekey)

    def __str__(self) -> str:
        message = super().__str__()
        if self.citekey:
            return f"{self.citekey}: {message}"
        return message


class MissingFieldError(EntryError):
    """A mandatory tag is absent from the entry."""


class InvalidFieldError(EntryError):
    """A mandatory tag is present but cannot be parsed."""
