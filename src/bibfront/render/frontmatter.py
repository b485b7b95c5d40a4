"""Front-matter writer for normalized papers.

Each paper becomes a ``---`` delimited block of YAML-style keys followed by
the abstract. The layout is hand-written rather than produced by a YAML
library: key order and quoting are fixed and values are emitted verbatim.
"""

from collections.abc import Callable
from typing import TextIO

from bibfront.models.records import Journal, Paper

__all__ = ["FIELD_ORDER", "DELIMITER", "render_paper", "write_paper"]

DELIMITER = "---"

FieldWriter = Callable[[Paper], list[str]]


def _optional(value: int | None) -> str:
    return "" if value is None else str(value)


def _authors(paper: Paper) -> list[str]:
    return ["authors:"] + [f'  - "{author}"' for author in paper.authors]


def _page(paper: Paper) -> list[str]:
    return [
        "page:",
        f"  from: {_optional(paper.pages.first)}",
        f"  to: {_optional(paper.pages.last)}",
    ]


def _volume(paper: Paper) -> list[str]:
    return [f"volume: {_optional(paper.volume)}"]


def _series(paper: Paper) -> list[str]:
    return [f"series: {_optional(paper.series)}"]


def _venue(paper: Paper) -> list[str]:
    key = "journal" if isinstance(paper.venue, Journal) else "conference"
    # shortname has no source tag; kept for downstream templates
    return [f"{key}:", f'  name: "{paper.venue.name}"', '  shortname: ""']


def _title(paper: Paper) -> list[str]:
    return [f'title: "{paper.title}"']


def _publisher(paper: Paper) -> list[str]:
    if paper.publisher is None:
        return ["publisher: "]
    return [f'publisher: "{paper.publisher}"']


def _year(paper: Paper) -> list[str]:
    return [f"year: {paper.year}"]


def _doi(paper: Paper) -> list[str]:
    return [f'doi: "{paper.doi}"']


def _www(paper: Paper) -> list[str]:
    # Not accepted by Hugo front matter, still emitted
    return [f'www: "{paper.url}"']


# Output order of the front-matter keys
FIELD_ORDER: tuple[tuple[str, FieldWriter], ...] = (
    ("authors", _authors),
    ("page", _page),
    ("volume", _volume),
    ("series", _series),
    ("venue", _venue),
    ("title", _title),
    ("publisher", _publisher),
    ("year", _year),
    ("doi", _doi),
    ("www", _www),
)


def render_paper(paper: Paper) -> str:
    """Render a paper as a front-matter block.

    Parameters
    ----------
    paper : Paper
        Normalized record.

    Returns
    -------
    str
        Front matter, closing delimiter, the abstract line and one blank
        line. Absent optional values render as empty, never omitted.
    """
    lines = [DELIMITER]
    for _, writer in FIELD_ORDER:
        lines.extend(writer(paper))
    lines.append(DELIMITER)
    lines.append(paper.abstract)
    lines.append("")
    return "\n".join(lines) + "\n"


def write_paper(paper: Paper, sink: TextIO) -> None:
    """Append one rendered paper to ``sink``.

    The sink is owned by the caller and is never flushed or closed here.
    """
    sink.write(render_paper(paper))
