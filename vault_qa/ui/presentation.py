"""View helpers that hold no request state.

Context snippet collapsing and the admin/default view branch.
"""

from dataclasses import dataclass
from enum import Enum

from vault_qa.models.schemas import ContextSnippet

PREVIEW_LENGTH = 222


def snippet_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Return the first ``limit`` characters, with an ellipsis if cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


@dataclass
class SnippetView:
    """Collapsed/expanded display state for one context snippet."""

    snippet: ContextSnippet
    index: int
    collapsed: bool = True

    def toggle(self) -> None:
        self.collapsed = not self.collapsed

    @property
    def header(self) -> str:
        return f"Context {self.index + 1}"

    @property
    def arrow(self) -> str:
        return "▼" if self.collapsed else "▲"

    @property
    def body(self) -> str:
        return snippet_preview(self.snippet.text) if self.collapsed else self.snippet.text


class ViewMode(str, Enum):
    """Presentation branch selected by the ``userType`` query parameter.

    Purely cosmetic; the backend enforces its own access rules.
    """

    ADMIN = "admin"
    DEFAULT = "default"

    @property
    def shows_dropzone(self) -> bool:
        return self is ViewMode.ADMIN

    @property
    def shows_faq(self) -> bool:
        return not self.shows_dropzone


def resolve_view_mode(user_type: str | None, admin_user_type: str = "admin") -> ViewMode:
    """Map a ``userType`` query value to a view mode."""
    if user_type is not None and user_type == admin_user_type:
        return ViewMode.ADMIN
    return ViewMode.DEFAULT
