_ENTITY_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}

_SUSPICIOUS_MARKERS = ("<script", "javascript:", "data:text/html")


def sanitize_input(value: str) -> str:
    """Escape characters that could break out of HTML text or attributes."""
    return "".join(_ENTITY_MAP.get(char, char) for char in value)


def has_script_marker(value: str) -> bool:
    """True when the raw value carries an obvious script-injection marker."""
    lowered = value.lower()
    return any(marker in lowered for marker in _SUSPICIOUS_MARKERS)
