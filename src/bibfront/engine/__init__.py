"""Conversion orchestration for bibfront."""

from bibfront.engine.config import ConvertConfig, ConvertResult
from bibfront.engine.runner import convert_entries, load_entries, run_conversion

__all__ = [
    "ConvertConfig",
    "ConvertResult",
    "convert_entries",
    "load_entries",
    "run_conversion",
]
