"""Field normalization and record assembly.

Main entry points:
- build_paper: Normalize a tag mapping into a Paper
- normalize_entry: Normalize a parsed BibEntry
"""

from bibfront.normalize.errors import EntryError, InvalidFieldError, MissingFieldError
from bibfront.normalize.normalizer import build_paper, normalize_entry

__all__ = [
    "EntryError",
    "InvalidFieldError",
    "MissingFieldError",
    "build_paper",
    "normalize_entry",
]
