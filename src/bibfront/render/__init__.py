"""Front-matter rendering of normalized papers."""

from bibfront.render.frontmatter import FIELD_ORDER, render_paper, write_paper

__all__ = ["FIELD_ORDER", "render_paper", "write_paper"]
