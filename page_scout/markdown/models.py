"""
Result model of the Markdown renderer.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class ContentExtractionResult:
    """Main content of a page as Markdown, with the page title and address."""

    title: str
    content: str
    url: str

    def as_document(self) -> str:
        """Markdown headed by the page title (content alone when there is no title)."""
        if self.title:
            return f"# {self.title}\n\n{self.content}"
        return self.content

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


__all__ = ["ContentExtractionResult"]
