"""
Tests for form validation shared by the store and editor sessions.
"""

import pytest

from vinylstock.core.errors import ValidationError
from vinylstock.core.validation import parse_count, validate_fields


class TestValidateFields:

    def test_trims_text_fields(self, record_fields):
        record_fields["album_name"] = "  Final Countdown  "
        record_fields["supplier_email"] = " order@virgin.com\n"
        values = validate_fields(record_fields)
        assert values["album_name"] == "Final Countdown"
        assert values["supplier_email"] == "order@virgin.com"

    @pytest.mark.parametrize(
        "field",
        ["album_name", "band_name", "cover_image_path", "supplier_name", "supplier_email"],
    )
    def test_blank_required_text_rejected(self, record_fields, field):
        record_fields[field] = "   "
        with pytest.raises(ValidationError) as exc:
            validate_fields(record_fields)
        assert exc.value.field == field

    def test_missing_key_counts_as_blank(self, record_fields):
        del record_fields["cover_image_path"]
        with pytest.raises(ValidationError, match="Cover image is required"):
            validate_fields(record_fields)

    def test_blank_counts_default_to_zero(self, record_fields):
        record_fields["quantity"] = ""
        record_fields["price"] = None
        values = validate_fields(record_fields)
        assert values["quantity"] == 0
        assert values["price"] == 0

    def test_numeric_text_parsed(self, record_fields):
        record_fields["quantity"] = " 12 "
        record_fields["price"] = "7"
        values = validate_fields(record_fields)
        assert (values["quantity"], values["price"]) == (12, 7)

    def test_no_email_format_check(self, record_fields):
        record_fields["supplier_email"] = "call the rep"
        assert validate_fields(record_fields)["supplier_email"] == "call the rep"

    def test_unknown_field_rejected(self, record_fields):
        record_fields["colour"] = "red"
        with pytest.raises(ValidationError, match="Unknown field"):
            validate_fields(record_fields)

    def test_first_failure_in_form_order(self, record_fields):
        record_fields["album_name"] = ""
        record_fields["supplier_name"] = ""
        with pytest.raises(ValidationError) as exc:
            validate_fields(record_fields)
        assert exc.value.field == "album_name"


class TestParseCount:

    @pytest.mark.parametrize("value", ["ten", "1.5", "3x", "1_000", "0x10", "\u0663", 2.0, True, [1]])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError, match="whole number"):
            parse_count("quantity", value)

    @pytest.mark.parametrize("value", [-1, "-4"])
    def test_negative_rejected(self, value):
        with pytest.raises(ValidationError, match="negative"):
            parse_count("price", value)

    def test_zero_allowed(self):
        assert parse_count("quantity", 0) == 0
        assert parse_count("quantity", "0") == 0

    def test_explicit_plus_sign_allowed(self):
        assert parse_count("price", "+7") == 7
