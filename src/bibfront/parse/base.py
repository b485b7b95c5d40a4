"""Base types and file-reading utilities for the bibliography reader."""

from pathlib import Path
from typing import NamedTuple

from bibfront.models import BibEntry


class ParseResult(NamedTuple):
    """Result of parsing a bibliography file.

    Supports tuple unpacking: ``entries, warnings, errors = parse_bibtex(...)``.

    Attributes
    ----------
    entries : list[BibEntry]
        Parsed entries in source order.
    warnings : list[str]
        Warning messages.
    errors : list[str]
        Error messages.
    """

    entries: list[BibEntry]
    warnings: list[str]
    errors: list[str]


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig, utf-8 or latin-1).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def read_bib_lines(file_path: Path, encoding: str | None = None) -> list[str]:
    """Read a bibliography file into lines.

    Parameters
    ----------
    file_path : Path
        File to read.
    encoding : str | None, optional
        Encoding to use; detected from content when None.

    Returns
    -------
    list[str]
        Lines without newline characters.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnicodeDecodeError
        If an explicit encoding does not match the content.
    """
    file_bytes = file_path.read_bytes()
    content = file_bytes.decode(encoding or detect_encoding(file_bytes))
    return normalize_line_endings(content).split("\n")


class ParseError(Exception):
    """Raised when a bibliography file cannot be parsed."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file
