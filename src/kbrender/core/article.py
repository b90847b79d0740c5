"""Editor-side text helpers for article metadata and image insertion"""


def parse_tags(raw: str) -> list[str]:
    """Split a comma-separated tag string, dropping blanks."""
    return [t.strip() for t in raw.split(',') if t.strip()]


def image_markdown(alt: str, url: str) -> str:
    return f"![{alt}]({url})"


def append_image(body: str, alt: str, url: str) -> str:
    """Append an image line to body, separated by a blank line."""
    return f"{body}\n\n{image_markdown(alt, url)}"
