"""Tests for dtab.path.label: label grammar and diagnostics."""

import pytest

from dtab.errors import InvalidCharacter, NonAscii
from dtab.path.label import LABEL_CHARS, Label, check_label, validate_label


class TestValidLabels:
    @pytest.mark.parametrize(
        "segment",
        [
            "iceCreamStore",
            "three-twins",
            "1.1",
            "a:b#c$d%e_f-g",
            "UPPER",
            "\\x2f",
            "a\\x2fb",
            "\\x00\\xff",
        ],
    )
    def test_accepted(self, segment: str) -> None:
        label = validate_label(segment)
        assert label.text == segment
        assert str(label) == segment

    def test_no_normalization(self) -> None:
        assert Label("SmItTeN").text == "SmItTeN"

    def test_validate_classmethod(self) -> None:
        assert Label.validate("foo") == Label("foo")

    def test_every_allowed_char(self) -> None:
        for ch in LABEL_CHARS:
            check_label(ch)

    def test_frozen(self) -> None:
        label = Label("foo")
        with pytest.raises(AttributeError):
            label.text = "bar"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Label("foo"), Label("foo"), Label("bar")}) == 2


class TestInvalidCharacter:
    def test_space(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            validate_label("ice cream")
        err = exc_info.value
        assert err.char == " "
        assert err.position == 3
        assert err.segment == "ice cream"

    def test_wildcard_is_not_a_label(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("*")
        assert exc_info.value.position == 0

    def test_slash(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("a/b")
        assert exc_info.value.char == "/"
        assert exc_info.value.position == 1

    def test_first_offender_wins(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("ab(c)d")
        assert exc_info.value.char == "("
        assert exc_info.value.position == 2

    def test_bad_escape(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("\\xzz")
        assert exc_info.value.char == "\\"
        assert exc_info.value.position == 0

    def test_uppercase_hex_escape_rejected(self) -> None:
        with pytest.raises(InvalidCharacter):
            Label("\\x2F")

    def test_truncated_escape(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("ab\\x2")
        assert exc_info.value.position == 2

    def test_valid_escape_skipped_before_offender(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            Label("a\\x2fb c")
        assert exc_info.value.char == " "
        assert exc_info.value.position == 6


class TestNonAscii:
    def test_accented(self) -> None:
        with pytest.raises(NonAscii) as exc_info:
            validate_label("café")
        assert exc_info.value.char == "é"
        assert exc_info.value.position == 3

    def test_position_is_character_index(self) -> None:
        with pytest.raises(NonAscii) as exc_info:
            Label("日本x")
        assert exc_info.value.char == "日"
        assert exc_info.value.position == 0

    def test_ascii_check_runs_first(self) -> None:
        # The space comes first, but non-ASCII input is always reported as such
        with pytest.raises(NonAscii) as exc_info:
            Label("a b é")
        assert exc_info.value.position == 4


class TestEmpty:
    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            Label("")
