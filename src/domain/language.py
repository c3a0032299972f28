"""Template language selection."""


def has_non_ascii(text: str) -> bool:
    return any(ord(ch) > 127 for ch in text or "")


def detect_language(name: str, default: str = "en", local: str = "hi") -> str:
    """
    Guess the template language from a customer's display name.

    Any non-ASCII character selects the local-language variant. This is a
    best-effort guess, not locale detection.
    """
    if has_non_ascii(name):
        return local
    return default
