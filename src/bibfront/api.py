"""Public API for converting BibTeX files to front matter.

This module provides the main public API for bibfront, enabling:
- Parsing BibTeX files into BibEntry objects
- Rendering entries as front-matter blocks
- Converting a file in one call
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from bibfront.engine.config import ConvertConfig
from bibfront.engine.runner import convert_entries, load_entries, run_conversion
from bibfront.models import BibEntry
from bibfront.parse import ParseError, parse_bibtex, read_bib_lines

if TYPE_CHECKING:
    from bibfront.engine.config import ConvertResult

__all__ = [
    "parse_file",
    "render_entries",
    "convert_file",
    "ParseError",
]


def parse_file(
    path: str | Path,
    *,
    strict: bool = True,
) -> list[BibEntry]:
    """Parse a single BibTeX file.

    Parameters
    ----------
    path : str | Path
        Path to file to parse.
    strict : bool, optional
        If True, raise exception on syntax errors. If False, return
        whatever entries could be parsed, by default True.

    Returns
    -------
    list[BibEntry]
        Parsed entries in source order.

    Raises
    ------
    ParseError
        If parsing fails and strict=True.
    FileNotFoundError
        If file does not exist.

    Examples
    --------
        >>> from bibfront import parse_file
        >>> entries = parse_file("papers.bib")
        >>> for entry in entries:
        ...     print(entry.citekey, entry.tags.get("title"))
    """
    file_path = Path(path)

    if strict:
        entries, _ = load_entries(file_path)
        return entries

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    entries, _, _ = parse_bibtex(file_path, read_bib_lines(file_path))
    return entries


def render_entries(
    entries: Iterable[BibEntry],
    sink: TextIO,
    *,
    skip_invalid: bool = False,
) -> ConvertResult:
    """Render already-parsed entries into ``sink``.

    Parameters
    ----------
    entries : Iterable[BibEntry]
        Entries to convert, in output order.
    sink : TextIO
        Output stream; not closed.
    skip_invalid : bool, optional
        Skip entries missing a mandatory field instead of stopping,
        by default False.

    Returns
    -------
    ConvertResult
        Conversion results.
    """
    return convert_entries(entries, sink, ConvertConfig(skip_invalid=skip_invalid))


def convert_file(
    path: str | Path,
    sink: TextIO,
    *,
    config: ConvertConfig | None = None,
) -> ConvertResult:
    """Convert a BibTeX file and write front-matter blocks to ``sink``.

    Parameters
    ----------
    path : str | Path
        BibTeX file.
    sink : TextIO
        Output stream; not closed.
    config : ConvertConfig | None, optional
        Run configuration. If None, uses defaults.

    Returns
    -------
    ConvertResult
        Conversion results.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    ParseError
        If the file cannot be parsed.

    Examples
    --------
        >>> import io
        >>> from bibfront import convert_file
        >>> out = io.StringIO()
        >>> result = convert_file("papers.bib", out)
        >>> print(out.getvalue())
    """
    return run_conversion(path, sink, config)
