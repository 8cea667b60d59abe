# =============================================================================
# Upload Text - Validation Tests
# =============================================================================
import pytest

from upload_text.errors import EmptyTextBody, TextBodyTooLong
from upload_text.validation import MAX_TEXT_BYTES, validate_text


class TestValidateText:

    def test_missing_text_is_rejected(self):
        with pytest.raises(EmptyTextBody) as exc:
            validate_text(None)
        assert str(exc.value) == "[400] Empty text body."

    def test_text_over_limit_is_rejected(self):
        with pytest.raises(TextBodyTooLong) as exc:
            validate_text("x" * 105)
        assert str(exc.value) == "[400] Text body is too long (max: 100)"

    def test_text_at_limit_is_accepted(self):
        text = "x" * MAX_TEXT_BYTES
        assert validate_text(text) == text

    def test_length_is_counted_in_utf8_bytes(self):
        """51 two-byte characters are 102 bytes."""
        with pytest.raises(TextBodyTooLong):
            validate_text("é" * 51)

    def test_empty_string_counts_as_present(self):
        assert validate_text("") == ""

    def test_text_is_returned_unchanged(self):
        assert validate_text("  Firstname  ") == "  Firstname  "


class TestErrors:

    def test_error_carries_code_and_message(self):
        err = TextBodyTooLong()
        assert err.code == 400
        assert err.message == "Text body is too long (max: 100)"

    def test_custom_message(self):
        assert str(EmptyTextBody("nothing here")) == "[400] nothing here"
