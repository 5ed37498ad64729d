"""HTML/text formatting helpers for the Content Generator views.

All user- and backend-supplied text is HTML-escaped before being embedded.
"""

from datetime import datetime
from html import escape

from contentgen.api.models import ImageGeneration, TextGeneration

from .models import NAV_LINKS

HISTORY_COLUMNS = ["ID", "Topic", "Type", "Tone", "Words", "Created", "Preview"]


def to_local(value: datetime) -> datetime:
    """Convert an aware timestamp to the local timezone; naive ones are kept."""
    if value.tzinfo is not None:
        return value.astimezone()
    return value


def format_date(value: datetime) -> str:
    """Short local date, e.g. ``3/7/2025``."""
    value = to_local(value)
    return f"{value.month}/{value.day}/{value.year}"


def format_datetime(value: datetime) -> str:
    """Local date and 12-hour time, e.g. ``3/7/2025, 2:05:09 PM``."""
    value = to_local(value)
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{format_date(value)}, {hour}:{value.minute:02d}:{value.second:02d} {meridiem}"


def split_paragraphs(text: str) -> list[str]:
    """Split a generated body into paragraphs on newline boundaries."""
    return text.split("\n")


def render_paragraphs(text: str) -> str:
    """Render a newline-delimited body as one ``<p>`` per segment, in order."""
    return "\n".join(f"<p>{escape(paragraph)}</p>" for paragraph in split_paragraphs(text))


def format_error_banner(message: str) -> str:
    """Inline error banner, or an empty string when there is no error."""
    if not message:
        return ""
    return f'<div class="error-banner">{escape(message)}</div>'


def format_loading(label: str = "Loading...") -> str:
    """Loading indicator shown while a fetch is in flight."""
    return f'<div class="loading-indicator"><div class="spinner"></div>{escape(label)}</div>'


def format_generated_content(content: str) -> str:
    """Result panel of the generator view."""
    if not content:
        return ""
    return (
        '<div class="generated-content">'
        "<h2>Generated Content:</h2>"
        f'<div class="prose">{render_paragraphs(content)}</div>'
        "</div>"
    )


def format_badges(record: TextGeneration) -> str:
    """Content type, tone and word count badges."""
    return (
        '<div class="badges">'
        f'<span class="badge badge-type">{escape(record.content_type)}</span>'
        f'<span class="badge badge-tone">{escape(record.tone)}</span>'
        f'<span class="badge badge-words">{record.word_count} words</span>'
        "</div>"
    )


def history_rows(items: list[TextGeneration]) -> list[list]:
    """Summary rows for the history list, one per generation.

    The preview column holds the first paragraph of the body.
    """
    return [
        [
            item.id,
            item.topic,
            item.content_type,
            item.tone,
            f"{item.word_count} words",
            format_date(item.created_at),
            split_paragraphs(item.generated_content)[0],
        ]
        for item in items
    ]


def format_history_summary(count: int) -> str:
    """Caption above the history list."""
    if count == 0:
        return '<p class="list-summary">No generations yet.</p>'
    noun = "generation" if count == 1 else "generations"
    return f'<p class="list-summary">{count} {noun}. Select one to view it in full.</p>'


def format_text_modal(record: TextGeneration) -> str:
    """Full-record body of the text history modal."""
    return (
        f"<h2>{escape(record.topic)}</h2>"
        f"{format_badges(record)}"
        f'<div class="prose">{render_paragraphs(record.generated_content)}</div>'
    )


def format_detail(record: TextGeneration) -> str:
    """Full page body of the detail view."""
    return (
        '<div class="detail-card">'
        '<div class="detail-header">'
        f"<h1>{escape(record.topic)}</h1>"
        f'<span class="detail-date">{format_date(record.created_at)}</span>'
        "</div>"
        f"{format_badges(record)}"
        f'<div class="prose">{render_paragraphs(record.generated_content)}</div>'
        "</div>"
    )


def format_image(url: str, alt: str = "") -> str:
    """``<img>`` tag pointing at ``url``; the browser fetches the image itself."""
    if not url:
        return ""
    return (
        f'<img class="rendered-image" src="{escape(url, quote=True)}" '
        f'alt="{escape(alt, quote=True)}" loading="eager">'
    )


def gallery_items(items: list[ImageGeneration]) -> list[tuple[str, str]]:
    """(image URL, caption) pairs for the image history gallery."""
    return [(item.image_url, format_image_caption(item)) for item in items]


def format_image_caption(record: ImageGeneration) -> str:
    """Card caption: prompt, dimensions and model when known, timestamp."""
    parts = [record.prompt]
    if record.dimensions:
        parts.append(record.dimensions)
    if record.model:
        parts.append(record.model)
    parts.append(format_datetime(record.created_at))
    return " · ".join(parts)


def format_image_details(record: ImageGeneration) -> str:
    """Metadata block of the image history modal."""
    lines = [f"### {record.prompt}", ""]
    meta = []
    if record.dimensions:
        meta.append(f"**Dimensions:** {record.dimensions}")
    if record.model:
        meta.append(f"**Model:** {record.model}")
    meta.append(f"**Created:** {format_datetime(record.created_at)}")
    lines.append(" | ".join(meta))
    return "\n".join(lines)


def sidebar_labels(sidebar_open: bool) -> tuple[str, list[str]]:
    """Toggle label and nav link labels for the sidebar state.

    Returns:
        Tuple of (toggle_button_label, nav_labels) with nav labels in
        NAV_LINKS order
    """
    toggle_label = "← Collapse" if sidebar_open else "→"
    labels = [label if sidebar_open else glyph for _, label, glyph in NAV_LINKS]
    return toggle_label, labels
