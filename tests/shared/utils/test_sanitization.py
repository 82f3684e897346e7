"""Tests for input sanitization utilities"""
import pytest

from src.shared.utils.sanitization import InputSanitizer, escape_html, sanitize_text


class TestSanitizeText:
    def test_strips_html_significant_characters(self):
        assert sanitize_text("<b>bold</b> & 'quoted' \"x\" a=b `tick`") == (
            "bbold/b quoted x ab tick"
        )

    def test_folds_unicode_whitespace(self):
        text = "a" + chr(0x00A0) + "b" + chr(0x2003) + "c" + chr(0x200B) + "d"

        assert sanitize_text(text) == "a b c d"

    def test_collapses_and_trims_whitespace(self):
        assert sanitize_text("  hello \t\n  world  ") == "hello world"

    def test_applies_nfc(self):
        decomposed = "e" + chr(0x0301)

        assert sanitize_text(decomposed) == chr(0x00E9)

    def test_removal_before_composition(self):
        # Dropping "<" leaves e + combining acute, which must end up composed
        assert sanitize_text("e<" + chr(0x0301)) == chr(0x00E9)

    @pytest.mark.parametrize(
        "value",
        [
            "  <p>hello</p>  world ",
            "e<" + chr(0x0301) + " x" + chr(0x3000) + "y",
            "plain text",
            "'\"&<>=`",
        ],
    )
    def test_idempotent(self, value):
        once = sanitize_text(value)

        assert sanitize_text(once) == once

    def test_empty_and_none_pass_through(self):
        assert sanitize_text("") == ""
        assert sanitize_text(None) is None


class TestEscapeHtml:
    def test_escapes_markup(self):
        assert escape_html("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;"
        )

    def test_escapes_quotes_ampersand_and_backtick(self):
        assert escape_html("\"&`") == "&quot;&amp;&#x60;"

    def test_none_is_empty(self):
        assert escape_html(None) == ""


class TestInjectionDetection:
    @pytest.mark.parametrize(
        "value",
        [
            "<script>alert(1)</script>",
            "< SCRIPT src=x>",
            "javascript:alert(1)",
            "data:text/html;base64,xyz",
            "<img src=x onerror=alert(1)>",
            "1 UNION SELECT password FROM users",
            "'; DROP TABLE users; --",
            "x' OR '1'='1",
            "admin' or 1=1",
            "exec xp_cmdshell 'dir'",
            "insert into accounts values (1)",
            "delete from accounts",
        ],
    )
    def test_flags_injection(self, value):
        assert InputSanitizer.find_injection(value)

    @pytest.mark.parametrize(
        "value",
        [
            "hello world",
            "one=1 two=2",
            "The union of two sets",
            "Please select an option",
            "don't drop the ball",
            "O'Reilly",
        ],
    )
    def test_accepts_ordinary_text(self, value):
        assert not InputSanitizer.find_injection(value)

    def test_fullwidth_forms_are_normalized_before_matching(self):
        fullwidth_script = "".join(chr(0xFF00 + ord(c) - 0x20) for c in "<script>")

        assert InputSanitizer.find_injection(fullwidth_script)


class TestCharacterChecks:
    def test_control_characters(self):
        assert InputSanitizer.find_control_characters("abc" + chr(0x07))
        assert InputSanitizer.find_control_characters("abc" + chr(0x202E))

    def test_whitespace_is_not_a_control_character(self):
        assert not InputSanitizer.find_control_characters("a\tb\nc\r")
        assert not InputSanitizer.find_control_characters("a" + chr(0x200B) + "b")

    @pytest.mark.parametrize("value", ["SHA-256", "sha3-512", "MD5"])
    def test_identifier(self, value):
        assert InputSanitizer.is_identifier(value)

    @pytest.mark.parametrize("value", ["", "SHA 256", "SHA_256", "SHA-256;", "<x>"])
    def test_not_identifier(self, value):
        assert not InputSanitizer.is_identifier(value)

    def test_needs_unicode_normalization(self):
        assert InputSanitizer.needs_unicode_normalization("e" + chr(0x0301))
        assert not InputSanitizer.needs_unicode_normalization("plain")
