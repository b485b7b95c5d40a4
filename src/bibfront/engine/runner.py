"""Conversion runner: read, normalize, render.

Entries are processed one at a time, in source order. Each entry is
normalized, rendered and written to the sink before the next one is read,
so blocks written before a failing entry stay written.
"""

import time
from collections.abc import Iterable
from contextlib import nullcontext
from pathlib import Path
from typing import TextIO

from bibfront.audit.logger import AuditLogger, new_run_id
from bibfront.engine.config import ConvertConfig, ConvertResult
from bibfront.models import BibEntry
from bibfront.normalize import EntryError, normalize_entry
from bibfront.parse import ParseError, parse_bibtex, read_bib_lines
from bibfront.render import write_paper


def load_entries(
    input_path: Path,
    encoding: str | None = None,
) -> tuple[list[BibEntry], list[str]]:
    """Read and parse a BibTeX file.

    Parameters
    ----------
    input_path : Path
        BibTeX file.
    encoding : str | None, optional
        Explicit encoding, detected when None.

    Returns
    -------
    tuple[list[BibEntry], list[str]]
        Parsed entries and reader warnings.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the file cannot be decoded or contains syntax errors.
    """
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")

    try:
        lines = read_bib_lines(input_path, encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"Failed to decode {input_path.name}: {e}", file=str(input_path)) from e

    entries, warnings, errors = parse_bibtex(input_path, lines)
    if errors:
        raise ParseError(
            f"Failed to parse {input_path.name}: {'; '.join(errors)}",
            file=str(input_path),
        )
    return entries, warnings


def convert_entries(
    entries: Iterable[BibEntry],
    sink: TextIO,
    config: ConvertConfig | None = None,
    logger: AuditLogger | None = None,
) -> ConvertResult:
    """Normalize and render entries into ``sink``.

    Parameters
    ----------
    entries : Iterable[BibEntry]
        Parsed entries.
    sink : TextIO
        Output stream owned by the caller.
    config : ConvertConfig | None, optional
        Run configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None, no events are written.

    Returns
    -------
    ConvertResult
        Counters and failures. ``success`` is False if any entry failed.
    """
    if config is None:
        config = ConvertConfig()

    total = 0
    rendered = 0
    failed: list[tuple[str, str]] = []

    for entry in entries:
        total += 1
        try:
            paper = normalize_entry(entry)
        except EntryError as e:
            failed.append((entry.citekey, str(e)))
            if logger:
                logger.entry_failed(entry.citekey, e.field, str(e))
            if config.skip_invalid:
                continue
            return ConvertResult(
                success=False,
                total_entries=total,
                rendered=rendered,
                failed=failed,
                error_message=str(e),
            )

        write_paper(paper, sink)
        rendered += 1
        if logger:
            logger.entry_rendered(entry.citekey, entry.entry_type)

    return ConvertResult(
        success=not failed,
        total_entries=total,
        rendered=rendered,
        failed=failed,
    )


def run_conversion(
    input_path: Path | str,
    sink: TextIO,
    config: ConvertConfig | None = None,
    logger: AuditLogger | None = None,
) -> ConvertResult:
    """Convert a BibTeX file to front-matter blocks.

    Parameters
    ----------
    input_path : Path | str
        BibTeX file.
    sink : TextIO
        Output stream owned by the caller.
    config : ConvertConfig | None, optional
        Run configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None and ``config.log_path`` is set, one is opened
        for the duration of the run.

    Returns
    -------
    ConvertResult
        Conversion results.

    Raises
    ------
    FileNotFoundError
        If the input file does not exist.
    ParseError
        If the input cannot be parsed; nothing is written in that case.

    Examples
    --------
        >>> import sys
        >>> from bibfront.engine import run_conversion
        >>> result = run_conversion("papers.bib", sys.stdout)
    """
    input_path = Path(input_path)

    if config is None:
        config = ConvertConfig()

    if logger is None and config.log_path is not None:
        context = AuditLogger(new_run_id(), config.log_path)
    else:
        context = nullcontext(logger)

    with context as audit:
        start_time = time.perf_counter()
        if audit:
            audit.run_started(str(input_path), config.to_dict())
            audit.set_stage("parse")

        try:
            entries, warnings = load_entries(input_path, config.encoding)
        except (OSError, ParseError) as e:
            if audit:
                audit.error(type(e).__name__, str(e))
            raise

        if audit:
            for message in warnings:
                audit.warning(message)
            audit.set_stage("convert")

        result = convert_entries(entries, sink, config, audit)
        result.warnings = warnings

        if audit:
            if result.success:
                status = "success"
            elif result.rendered:
                status = "partial"
            else:
                status = "failed"
            audit.run_finished(
                status,
                time.perf_counter() - start_time,
                entries=result.total_entries,
                failed=len(result.failed),
            )

    return result
