"""Free-text fields copied verbatim (title, url, doi, abstract, publisher)."""

from bibfront.models.records import TagMap

from .._helpers import find_tag_value, require_tag_value


def extract_title(tags: TagMap) -> str:
    """Return the ``title`` tag; raises MissingFieldError when absent."""
    return require_tag_value(tags, "title")


def extract_url(tags: TagMap) -> str:
    """Return the ``url`` tag; raises MissingFieldError when absent."""
    return require_tag_value(tags, "url")


def extract_doi(tags: TagMap) -> str:
    value, _ = find_tag_value(tags, "doi")
    return value if value is not None else ""


def extract_abstract(tags: TagMap) -> str:
    value, _ = find_tag_value(tags, "abstract")
    return value if value is not None else ""


def extract_publisher(tags: TagMap) -> str | None:
    """Return the ``publisher`` tag, or None when absent.

    Absence is kept distinct from an empty value because the two render
    differently.
    """
    value, _ = find_tag_value(tags, "publisher")
    return value
