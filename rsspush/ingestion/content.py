"""Entry body selection and markup-to-text conversion."""

from bs4 import BeautifulSoup

from ..models import FeedEntry

BLOCK_TAGS = [
    "p", "div", "li", "tr", "blockquote", "pre", "table",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol",
]


class ContentExtractor:
    """Pick the best body for an entry and render it as plain text."""

    def best_markup(self, entry: FeedEntry) -> str:
        """``content`` if present, else ``description``, else empty."""
        if entry.content:
            return entry.content
        if entry.description:
            return entry.description
        return ""

    def best_body(self, entry: FeedEntry) -> str:
        return self.to_text(self.best_markup(entry))

    def to_text(self, markup: str) -> str:
        """
        Convert markup to plain text.

        Conversion is best effort: on failure the raw markup is returned
        so the entry can still be delivered.
        """
        if not markup:
            return ""
        try:
            soup = BeautifulSoup(markup, "html.parser")
            for tag in soup(["script", "style"]):
                tag.decompose()
            for br in soup.find_all("br"):
                br.replace_with("\n")
            for block in soup.find_all(BLOCK_TAGS):
                block.insert_before("\n")
                block.append("\n")
            text = soup.get_text()
        except Exception:
            return markup
        return self._normalize_text(text)

    def _normalize_text(self, text: str) -> str:
        """Strip each line and drop blank ones."""
        lines = [" ".join(line.split()) for line in text.splitlines()]
        return "\n".join(line for line in lines if line)
