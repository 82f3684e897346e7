"""Input sanitization utilities."""

import html
import re
import unicodedata


class InputSanitizer:
    """Sanitize user inputs to prevent XSS and injection attacks."""

    # Characters with meaning in HTML markup or attribute context
    HTML_SIGNIFICANT_CHARS = "<>\"'&=`"

    # Unicode whitespace and zero-width characters folded to a plain space
    CHARACTERS_TO_NORMALIZE = "".join(
        chr(code)
        for code in (
            0x00A0, 0x2000, 0x2001, 0x2002, 0x2003, 0x2004, 0x2005, 0x2006,
            0x2007, 0x2008, 0x2009, 0x200A, 0x200B, 0x200C, 0x200D, 0x2028,
            0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
        )
    )

    # Regex for validating identifiers such as algorithm names
    IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")

    # Injection signatures. A heuristic blocklist, not a complete defense.
    INJECTION_PATTERNS: tuple[re.Pattern[str], ...] = (
        re.compile(r"<\s*/?\s*script\b", re.IGNORECASE),
        re.compile(r"\b(?:javascript|vbscript)\s*:", re.IGNORECASE),
        re.compile(r"\bdata\s*:\s*text/html", re.IGNORECASE),
        re.compile(
            r"\bon(?:abort|animation\w*|before\w+|blur|change|click|contextmenu|dblclick"
            r"|drag\w*|drop|error|focus\w*|input|key(?:down|press|up)|load|message"
            r"|mouse\w+|pointer\w+|reset|resize|scroll|select|submit|toggle"
            r"|transition\w*|unload|wheel)\s*=",
            re.IGNORECASE,
        ),
        re.compile(r"\bunion\s+(?:all\s+)?select\b", re.IGNORECASE),
        re.compile(r"\b(?:drop|truncate|alter)\s+table\b", re.IGNORECASE),
        re.compile(r"\binsert\s+into\b", re.IGNORECASE),
        re.compile(r"\bdelete\s+from\b", re.IGNORECASE),
        re.compile(r"\bexec(?:ute)?\s+(?:xp_|sp_)", re.IGNORECASE),
        re.compile(r"'\s*(?:or|and)\s+'?\w+'?\s*=\s*'?\w+", re.IGNORECASE),
        re.compile(r";\s*(?:--|/\*)"),
    )

    _WHITESPACE_RUN = re.compile(r"\s+")
    _NORMALIZE_TABLE = str.maketrans({c: " " for c in CHARACTERS_TO_NORMALIZE})
    _STRIP_TABLE = str.maketrans({c: None for c in HTML_SIGNIFICANT_CHARS})

    @classmethod
    def sanitize_text(cls, value: str) -> str:
        """
        Normalize free text for hashing.

        Folds Unicode whitespace to spaces, removes HTML-significant
        characters, NFC-normalizes, collapses whitespace runs and trims.
        Applying it twice gives the same result as applying it once.
        """
        if not value:
            return value

        sanitized = value.translate(cls._NORMALIZE_TABLE)
        sanitized = sanitized.translate(cls._STRIP_TABLE)
        # NFC after removal so a stripped character cannot expose a new composition
        sanitized = unicodedata.normalize("NFC", sanitized)
        sanitized = cls._WHITESPACE_RUN.sub(" ", sanitized)
        return sanitized.strip()

    @classmethod
    def escape_html(cls, value: str | None) -> str:
        """Escape text for interpolation into HTML, including backticks."""
        if value is None:
            return ""
        return html.escape(str(value), quote=True).replace("`", "&#x60;")

    @classmethod
    def find_injection(cls, value: str) -> bool:
        """Check whether any injection signature matches."""
        if not value:
            return False
        normalized = unicodedata.normalize("NFKC", value)
        return any(pattern.search(normalized) for pattern in cls.INJECTION_PATTERNS)

    @classmethod
    def find_control_characters(cls, value: str) -> bool:
        """
        Check for control, format, private-use or unassigned characters.

        Ordinary whitespace and the characters folded by sanitize_text are
        allowed.
        """
        for char in value:
            if char.isspace() or char in cls.CHARACTERS_TO_NORMALIZE:
                continue
            if unicodedata.category(char).startswith("C"):
                return True
        return False

    @classmethod
    def is_identifier(cls, value: str) -> bool:
        return bool(value) and bool(cls.IDENTIFIER_PATTERN.match(value))

    @classmethod
    def needs_unicode_normalization(cls, value: str) -> bool:
        return unicodedata.normalize("NFC", value) != value


# Convenience functions
def sanitize_text(value: str) -> str:
    """Sanitize free text for hashing."""
    return InputSanitizer.sanitize_text(value)


def escape_html(value: str | None) -> str:
    """Escape a value for HTML output."""
    return InputSanitizer.escape_html(value)
