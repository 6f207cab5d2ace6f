"""Naming-convention formatting for folder paths and file names."""


def format_segment(text: str, *, lowercase: bool, hyphenate: bool) -> str:
    """Apply lowercasing and underscore-to-hyphen conversion to a path fragment."""
    if lowercase:
        text = text.lower()
    if hyphenate:
        # NUL bytes are dropped together with the underscore conversion
        text = text.replace("_", "-").replace("\0", "")
    return text
