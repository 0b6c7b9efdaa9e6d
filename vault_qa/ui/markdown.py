"""Markdown rendering for answers, with allow-list sanitization.

Answers come from the backend and are injected into the page as raw HTML,
so every answer goes through ``render_answer``: escape, convert, then
sanitize the result against a fixed set of tags and attributes.
"""

import html
import re
from html.parser import HTMLParser

ALLOWED_TAGS = frozenset({
    "a", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "ol", "p", "pre", "strong", "ul",
})
ALLOWED_ATTRIBUTES = {
    "a": frozenset({"href", "class", "target", "rel"}),
    "*": frozenset({"class"}),
}
ALLOWED_URL_SCHEMES = ("http", "https", "mailto")
VOID_TAGS = frozenset({"br"})
# Content of these tags is dropped along with the tag
DROP_CONTENT_TAGS = frozenset({"script", "style"})

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")


def is_safe_url(url: str) -> bool:
    """Allow http(s), mailto and scheme-less (relative) URLs."""
    # Browsers ignore control characters and whitespace inside schemes
    compact = re.sub(r"[\x00-\x20]", "", html.unescape(url))
    match = _SCHEME_RE.match(compact)
    if match is None:
        return True
    return match.group(1).lower() in ALLOWED_URL_SCHEMES


def _wrap_lists(text: str, pattern: str, tag: str, classes: str) -> str:
    """Group consecutive lines matching ``pattern`` into one list element."""
    item_re = re.compile(pattern)
    result: list[str] = []
    in_list = False
    for line in text.split("\n"):
        stripped = line.strip()
        if item_re.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{classes}">')
                in_list = True
            result.append(f"<li>{item_re.sub('', stripped, count=1)}</li>")
        else:
            if in_list:
                result.append(f"</{tag}>")
                in_list = False
            result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return "\n".join(result)


def markdown_to_html(text: str) -> str:
    """Convert answer markdown to HTML.

    Supports: headings, code blocks, inline code, bold, italic, links,
    ordered and unordered lists, line breaks. Input is HTML-escaped first,
    so raw HTML in the answer is shown as text.
    """
    # NUL delimits placeholders, so it cannot come from the answer itself
    text = html.escape(text.replace("\x00", ""), quote=True)

    stash: list[str] = []

    def keep(rendered: str) -> str:
        stash.append(rendered)
        return f"\x00{len(stash) - 1}\x00"

    def restore(markup: str) -> str:
        def lookup(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index >= len(stash):
                return match.group(0)
            # Entries only refer to earlier entries
            return restore(stash[index])

        return _PLACEHOLDER_RE.sub(lookup, markup)

    def replace_link(match: re.Match[str]) -> str:
        label, url = match.group(1), match.group(2)
        if not is_safe_url(url):
            return label
        return keep(
            f'<a href="{url}" class="text-blue-600 underline" target="_blank" '
            f'rel="noopener">{label}</a>'
        )

    # Code and links are kept out of the heading, emphasis and list rules
    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        lambda m: keep(
            '<pre class="bg-gray-800 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs">'
            f"<code>{m.group(2)}</code></pre>"
        ),
        text,
    )
    text = re.sub(
        r"`([^`\n]+)`",
        lambda m: keep(
            '<code class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">'
            f"{m.group(1)}</code>"
        ),
        text,
    )
    text = re.sub(r"\[([^\]]+)\]\(([^)\s]+)\)", replace_link, text)

    text = re.sub(
        r"^(#{1,6})\s+(.+)$",
        lambda m: f"<h{len(m.group(1))}>{m.group(2).strip()}</h{len(m.group(1))}>",
        text,
        flags=re.MULTILINE,
    )

    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)
    text = re.sub(r"(?<![\w*])\*([^*\n]+)\*(?![\w*])", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"<em>\1</em>", text)

    text = _wrap_lists(text, r"^[-*]\s+", "ul", "list-disc list-inside my-2 space-y-1")
    text = _wrap_lists(text, r"^\d+\.\s+", "ol", "list-decimal list-inside my-2 space-y-1")

    text = text.replace("\n", "<br>")
    # No <br> directly around block elements
    text = re.sub(r"<br>(?=</?(?:ul|ol|li|h\d)\b)", "", text)
    text = re.sub(r"(</?(?:ul|ol|h\d)[^>]*>)<br>", r"\1", text)

    return restore(text)


class _Sanitizer(HTMLParser):
    """Re-emits HTML keeping only allow-listed tags and attributes."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self._open: list[str] = []
        self._dropping = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in DROP_CONTENT_TAGS:
            self._dropping += 1
            return
        if self._dropping or tag not in ALLOWED_TAGS:
            return

        allowed = ALLOWED_ATTRIBUTES.get(tag, frozenset()) | ALLOWED_ATTRIBUTES["*"]
        rendered = []
        for name, value in attrs:
            if name not in allowed or value is None:
                continue
            if name == "href" and not is_safe_url(value):
                continue
            rendered.append(f' {name}="{html.escape(value, quote=True)}"')
        self.parts.append(f"<{tag}{''.join(rendered)}>")
        if tag not in VOID_TAGS:
            self._open.append(tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in DROP_CONTENT_TAGS:
            return
        self.handle_starttag(tag, attrs)
        if tag in self._open and tag not in VOID_TAGS:
            self.handle_endtag(tag)

    def handle_endtag(self, tag: str) -> None:
        if tag in DROP_CONTENT_TAGS:
            self._dropping = max(0, self._dropping - 1)
            return
        if self._dropping or tag not in self._open:
            return
        # Close anything left open inside this tag
        while self._open:
            open_tag = self._open.pop()
            self.parts.append(f"</{open_tag}>")
            if open_tag == tag:
                break

    def handle_data(self, data: str) -> None:
        if not self._dropping:
            self.parts.append(html.escape(data, quote=False))

    def result(self) -> str:
        self.close()
        closing = [f"</{tag}>" for tag in reversed(self._open)]
        return "".join(self.parts + closing)


def sanitize_html(markup: str) -> str:
    """Strip everything outside the tag/attribute allow-list.

    Disallowed tags are removed but their text is kept; script and style
    elements are removed with their content. ``href`` values must pass
    ``is_safe_url``.
    """
    sanitizer = _Sanitizer()
    sanitizer.feed(markup)
    return sanitizer.result()


def render_answer(text: str) -> str:
    """Markdown answer to HTML that is safe to inject into the page."""
    return sanitize_html(markdown_to_html(text))
