"""Common utility functions for bibfront."""

from bibfront.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
