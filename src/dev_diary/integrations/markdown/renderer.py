"""Markdown to HTML rendering using marko."""

from marko import Markdown


class MarkdownRenderer:
    """Renders diary markdown with GitHub flavoured extensions (tables, fences)."""

    def __init__(self) -> None:
        self.markdown = Markdown(extensions=["gfm"])

    def render(self, markdown: str) -> str:
        return self.markdown.convert(markdown)
