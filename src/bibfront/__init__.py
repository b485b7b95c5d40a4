"""Convert BibTeX bibliographies into front-matter documents.

This package provides:
- Data models (bibfront.models) — entry and paper types
- Parsing (bibfront.parse) — BibTeX reading
- Normalization (bibfront.normalize) — per-field normalizers and record assembly
- Rendering (bibfront.render) — front-matter layout
- Engine (bibfront.engine) — conversion orchestration
- Audit (bibfront.audit) — JSONL event logging
- CLI (bibfront.cli) — command-line interface
- Public API (bibfront.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from bibfront.api import (
    ParseError,
    convert_file,
    parse_file,
    render_entries,
)
from bibfront.models import Paper
from bibfront.normalize import EntryError, build_paper
from bibfront.render import render_paper

__all__ = [
    "__version__",
    "__license__",
    "EntryError",
    "Paper",
    "ParseError",
    "build_paper",
    "convert_file",
    "parse_file",
    "render_entries",
    "render_paper",
]
