"""BibTeX file reading.

Main entry points:
- parse_bibtex: Split BibTeX lines into BibEntry objects
- read_bib_lines: Read and decode a file into lines
"""

from bibfront.parse.base import ParseError, ParseResult, read_bib_lines
from bibfront.parse.bibtex import parse_bibtex

__all__ = [
    "ParseError",
    "ParseResult",
    "parse_bibtex",
    "read_bib_lines",
]
