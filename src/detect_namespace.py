"""Utility for reading the declared namespace of a PHP source file."""

import re
from pathlib import Path

NAMESPACE_DECL_RE = re.compile(r"^namespace\s+([A-Za-z0-9_\\]+)\s*[;{]")


def detect_namespace(path: Path | str) -> str | None:
    """Return the first ``namespace`` declaration of a file, or None.

    Both ``namespace Foo\\Bar;`` and the braced ``namespace Foo\\Bar {`` forms
    are recognised. Only lines starting with the keyword are considered.
    """
    p = Path(path)
    if not p.is_file():
        return None
    with p.open(encoding="utf-8", errors="replace") as f:
        for line in f:
            if not line.startswith("namespace"):
                continue
            match = NAMESPACE_DECL_RE.match(line)
            if match:
                return match.group(1).strip("\\")
    return None
