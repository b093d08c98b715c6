"""Light repair of judge response bodies before schema validation."""

import re

_FENCED_BLOCK = re.compile(r"^```[A-Za-z0-9_-]*\s*\n(?P<body>.*?)\n?```$", re.DOTALL)


def strip_code_fences(content: str) -> str:
    """Return *content* without a surrounding markdown code fence, if it has one.

    Judges occasionally wrap JSON-mode output in ```json fences; the JSON
    inside is left untouched.
    """
    stripped = content.strip()
    match = _FENCED_BLOCK.match(stripped)
    if match is None:
        return stripped
    return match.group("body").strip()
