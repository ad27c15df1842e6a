"""List renderers."""

from movie_shelf.adapters.rendering.markdown_renderer import MarkdownListRenderer, RenderedCard

__all__ = ["MarkdownListRenderer", "RenderedCard"]
