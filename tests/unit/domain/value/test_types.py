"""Unit tests for identity value objects."""

import pytest
from pydantic import ValidationError

from jolt.domain.value import ExternalProviderRef, Handle, normalize_backup_code


class TestHandle:
    """Tests for Handle validation and case folding."""

    def test_strips_surrounding_whitespace(self):
        assert Handle("  SwiftTiger42 ").root == "SwiftTiger42"

    def test_preserves_case_for_display(self):
        handle = Handle("SwiftTiger42")

        assert handle.root == "SwiftTiger42"
        assert handle.key == "swifttiger42"

    def test_case_variants_share_a_key(self):
        assert Handle("SwiftTiger42").key == Handle("SWIFTTIGER42").key

    def test_accepts_twenty_characters(self):
        assert len(Handle("a" * 20).root) == 20

    @pytest.mark.parametrize("raw", ["", "   ", "a" * 21, "bad\x00name", "tab\there"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            Handle(raw)


class TestExternalProviderRef:
    """Tests for ExternalProviderRef."""

    def test_exposes_provider(self):
        ref = ExternalProviderRef("google:10769150350006150715113082367")

        assert ref.provider == "google"
        assert str(ref) == "google:10769150350006150715113082367"

    @pytest.mark.parametrize("raw", ["google", ":123", "google:", "g:" + "x" * 300])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            ExternalProviderRef(raw)


class TestNormalizeBackupCode:
    """Users type codes in any case, with spaces or hyphens."""

    @pytest.mark.parametrize(
        "raw", ["AB12CD34", "ab12cd34", "ab12-cd34", " AB12 CD34 ", "ab12\tcd34"]
    )
    def test_normalizes_to_uppercase_without_separators(self, raw):
        assert normalize_backup_code(raw) == "AB12CD34"
