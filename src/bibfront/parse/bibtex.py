"""BibTeX format reader.

Entries: @<entrytype>{citekey, field = {value}, ...} or @<entrytype>(...)
@STRING definitions are collected and expanded in later entries; @PREAMBLE
and @COMMENT are skipped. Text outside entries is ignored.
Reference: http://www.bibtex.org/Format/
"""

import re
from pathlib import Path

from bibfront.models import BibEntry
from bibfront.parse.base import ParseResult

ENTRY_START_PATTERN = re.compile(r"@(\w+)\s*([{(])")
FIELD_NAME_PATTERN = re.compile(r"([\w.:-]+)\s*=\s*")

_SKIPPED_ENTRIES = ("preamble", "comment")
_CLOSERS = {"{": "}", "(": ")"}


def parse_bibtex(file_path: Path, lines: list[str]) -> ParseResult:
    """Parse BibTeX lines into entries.

    Entries may share lines: scanning resumes right after the closing
    delimiter of the previous entry.

    Parameters
    ----------
    file_path : Path
        Path to the BibTeX file, used in messages only.
    lines : list[str]
        File content as decoded lines.

    Returns
    -------
    ParseResult
        Entries, warnings, and errors.
    """
    warnings: list[str] = []
    errors: list[str] = []
    entries: list[BibEntry] = []
    macros: dict[str, str] = {}

    content = "\n".join(lines)

    pos = content.find("@")
    while pos != -1:
        line_no = content.count("\n", 0, pos)
        where = f"{file_path.name}:{line_no}"

        match = ENTRY_START_PATTERN.match(content, pos)
        if not match:
            # Stray '@' outside an entry is comment text
            line_end = content.find("\n", pos)
            snippet = content[pos:] if line_end == -1 else content[pos:line_end]
            warnings.append(f"{where}: Malformed entry start: {snippet[:50]}")
            pos = content.find("@", pos + 1)
            continue

        entry_type = match.group(1).lower()
        open_pos = match.end() - 1
        close_pos = _find_closing_delimiter(
            content, open_pos, track_quotes=entry_type != "comment"
        )

        if close_pos == -1:
            errors.append(f"{where}: Unclosed entry @{entry_type}")
            pos = content.find("@", match.end())
            continue

        body = content[open_pos + 1 : close_pos]
        pos = content.find("@", close_pos + 1)

        if entry_type in _SKIPPED_ENTRIES:
            continue

        if entry_type == "string":
            for name, value in _parse_fields(body, macros, warnings, where):
                macros[name] = value
            continue

        citekey, _, fields_text = body.partition(",")
        citekey = citekey.strip()

        tags: dict[str, str] = {}
        for name, value in _parse_fields(fields_text, macros, warnings, where):
            if name in tags:
                warnings.append(f"{where}: Duplicate tag '{name}' in {citekey}, keeping first")
                continue
            tags[name] = value

        entries.append(BibEntry(entry_type, citekey, tags, line_start=line_no))

    return ParseResult(entries, warnings, errors)


def _find_closing_delimiter(content: str, open_pos: int, *, track_quotes: bool = True) -> int:
    """Return the offset of the delimiter closing the one at ``open_pos``, or -1."""
    closer = _CLOSERS[content[open_pos]]
    brace_depth = 0
    in_quotes = False
    escape_next = False

    for i in range(open_pos + 1, len(content)):
        char = content[i]
        if escape_next:
            escape_next = False
            continue

        if char == "\\":
            escape_next = True
            continue

        if char == '"' and brace_depth == 0 and track_quotes:
            in_quotes = not in_quotes
        elif not in_quotes:
            if char == "{":
                brace_depth += 1
            elif char == "}":
                if brace_depth == 0 and closer == "}":
                    return i
                brace_depth -= 1
            elif char == ")" and brace_depth == 0 and closer == ")":
                return i

    return -1


def _parse_fields(
    content: str,
    macros: dict[str, str],
    warnings: list[str],
    where: str,
) -> list[tuple[str, str]]:
    fields: list[tuple[str, str]] = []

    i = 0
    while i < len(content):
        # Skip whitespace and separators
        while i < len(content) and (content[i].isspace() or content[i] == ","):
            i += 1
        if i >= len(content):
            break

        field_match = FIELD_NAME_PATTERN.match(content, i)
        if not field_match:
            i += 1
            continue

        field_name = field_match.group(1).lower()
        i = field_match.end()

        pieces: list[str] = []
        while i < len(content):
            while i < len(content) and content[i].isspace():
                i += 1
            if i >= len(content):
                break

            if content[i] == "{":
                piece, i = _parse_braced_value(content, i)
            elif content[i] == '"':
                piece, i = _parse_quoted_value(content, i)
            else:
                piece, i = _parse_bare_value(content, i)
                piece = _expand_macro(piece, macros, warnings, where)
            pieces.append(piece)

            # '#' concatenates the next piece
            while i < len(content) and content[i] in " \t\n":
                i += 1
            if i < len(content) and content[i] == "#":
                i += 1
                continue
            break

        fields.append((field_name, "".join(pieces).strip()))

    return fields


def _parse_braced_value(content: str, start: int) -> tuple[str, int]:
    brace_depth = 0
    value_chars: list[str] = []
    i = start

    while i < len(content):
        char = content[i]
        if char == "{":
            brace_depth += 1
            if brace_depth > 1:
                value_chars.append(char)
        elif char == "}":
            brace_depth -= 1
            if brace_depth == 0:
                return "".join(value_chars), i + 1
            value_chars.append(char)
        else:
            value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_quoted_value(content: str, start: int) -> tuple[str, int]:
    i = start + 1  # skip opening quote
    value_chars: list[str] = []
    brace_depth = 0

    while i < len(content):
        char = content[i]
        if char == "{":
            brace_depth += 1
        elif char == "}":
            brace_depth -= 1
        elif char == '"' and brace_depth == 0:
            return "".join(value_chars), i + 1
        value_chars.append(char)
        i += 1

    return "".join(value_chars), i


def _parse_bare_value(content: str, start: int) -> tuple[str, int]:
    value_chars: list[str] = []
    i = start

    while i < len(content) and content[i] not in ",\n}#":
        value_chars.append(content[i])
        i += 1

    return "".join(value_chars).strip(), i


def _expand_macro(
    token: str,
    macros: dict[str, str],
    warnings: list[str],
    where: str,
) -> str:
    if not token or token.isdigit():
        return token
    key = token.lower()
    if key in macros:
        return macros[key]
    warnings.append(f"{where}: Undefined @string macro '{token}', kept literally")
    return token
