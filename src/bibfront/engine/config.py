"""Conversion configuration and result dataclasses."""

import codecs
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ConvertConfig:
    """Configuration for a conversion run.

    Attributes
    ----------
    skip_invalid : bool
        Skip entries with a missing mandatory field and keep going. When
        False (default) the run stops at the first such entry.
    log_path : Path | None
        JSONL audit log destination. If None, no audit log is written.
    encoding : str | None
        Input file encoding. If None, detected from content.
    """

    skip_invalid: bool = False
    log_path: Path | None = None
    encoding: str | None = None

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        if self.log_path is not None:
            self.log_path = Path(self.log_path)

        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError as e:
                raise ValueError(f"Unknown encoding: {self.encoding!r}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class ConvertResult:
    """Outcome of a conversion run.

    Attributes
    ----------
    success : bool
        True when every entry was rendered.
    total_entries : int
        Entries processed; stops at the failing entry unless skip_invalid.
    rendered : int
        Blocks written to the sink.
    failed : list[tuple[str, str]]
        (citekey, message) for each entry that was not rendered.
    warnings : list[str]
        Reader warnings.
    error_message : str | None
        Message of the error that stopped the run, if any.
    """

    success: bool
    total_entries: int
    rendered: int
    failed: list[tuple[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
