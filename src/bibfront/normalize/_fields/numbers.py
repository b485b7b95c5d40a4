"""Volume and series extraction."""

from bibfront.models.records import TagMap

from .._helpers import find_tag_value, parse_int


def normalize_volume(tags: TagMap) -> int | None:
    """Parse the ``volume`` tag; absent or non-integer values yield None."""
    volume_raw, _ = find_tag_value(tags, "volume")
    return parse_int(volume_raw)


def normalize_series(tags: TagMap) -> int | None:
    """Parse the ``series`` tag, falling back to ``number``.

    Only the first tag present is considered: a non-integer ``series``
    yields None even if ``number`` holds an integer.
    """
    series_raw, _ = find_tag_value(tags, "series")
    return parse_int(series_raw)
