from src.shared.utils.sanitization import (InputSanitizer, escape_html,
                                           sanitize_text)

__all__ = [
    "InputSanitizer",
    "sanitize_text",
    "escape_html",
]
