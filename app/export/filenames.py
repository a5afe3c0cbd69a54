import re

_UNSAFE = re.compile(r'[^a-z0-9]')


def export_filename(display_name, fallback="cv"):
    """ASCII-safe lowercase token: every char outside [a-z0-9] becomes '_'."""
    token = _UNSAFE.sub("_", (display_name or "").lower())
    return token or fallback
