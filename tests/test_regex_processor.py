"""Tests for RegexProcessor."""

import re

import pytest
import regex

from regex_engine.regex_processor import RegexProcessor, match_substrings


class TestParseFlags:

    def test_letters_combine(self) -> None:
        assert RegexProcessor().parse_flags("im") == regex.IGNORECASE | regex.MULTILINE

    def test_empty_is_zero(self) -> None:
        assert RegexProcessor().parse_flags("") == 0

    def test_uppercase_letters(self) -> None:
        assert RegexProcessor().parse_flags("S") == regex.DOTALL

    def test_unknown_letter(self) -> None:
        with pytest.raises(ValueError):
            RegexProcessor().parse_flags("q")

    def test_stdlib_flags(self) -> None:
        assert RegexProcessor(use_advanced_regex=False).parse_flags("i") == re.IGNORECASE


class TestFindInText:

    def test_all_matches(self) -> None:
        assert RegexProcessor().find_in_text("a1b22", r"\d+") == [(1, 2, "1"), (3, 5, "22")]

    def test_search_range(self) -> None:
        assert RegexProcessor().find_in_text("a1b22", r"\d+", search_range=(2, 5)) == [(3, 5, "22")]

    def test_anchor_at_range_start(self) -> None:
        assert RegexProcessor().find_in_text("a1b22", r"^\w", search_range=(2, 5)) == [(2, 3, "b")]

    def test_out_of_bounds_range(self) -> None:
        with pytest.raises(ValueError):
            RegexProcessor().find_in_text("abc", "a", search_range=(0, 9))

    def test_reversed_range(self) -> None:
        with pytest.raises(ValueError):
            RegexProcessor().find_in_text("abc", "a", search_range=(2, 1))

    def test_range_template_backreference(self) -> None:
        result = RegexProcessor().replace_in_text(
            "x1 y2", r"(\w)(\d)", r"\2\1", search_range=(3, 5))
        assert result.new_text == "x1 2y"

    def test_invalid_pattern(self, capsys) -> None:
        assert RegexProcessor().find_in_text("abc", "(") == []
        assert "Regex error" in capsys.readouterr().out


class TestReplaceInText:

    def test_dollar_backreferences(self) -> None:
        result = RegexProcessor().replace_in_text("John Smith", r"(\w+) (\w+)", "$2, $1")
        assert result.new_text == "Smith, John"
        assert result.replaced_count == 1

    def test_backslash_backreferences_splice(self) -> None:
        result = RegexProcessor().replace_in_text(
            "2024-01-05", r"-0(\d)", r"-\1", strategy="splice")
        assert result.new_text == "2024-1-5"

    def test_overwrite_keeps_tail_of_longer_match(self) -> None:
        result = RegexProcessor().replace_in_text("a  b", r"\s+", " ")
        assert result.new_text == "a  b"

    def test_max_replacements(self) -> None:
        result = RegexProcessor().replace_in_text("a.b.c", r"\.", "-", max_replacements=1)
        assert result.new_text == "a-b.c"
        assert result.matches_count == 2

    def test_invalid_pattern(self) -> None:
        assert RegexProcessor().replace_in_text("abc", "(", "x") is None


class TestValidatePattern:

    def test_valid(self) -> None:
        assert RegexProcessor().validate_pattern(r"\d+") == (True, "")

    def test_invalid(self) -> None:
        is_valid, error = RegexProcessor().validate_pattern("(ab")
        assert not is_valid
        assert error


class TestMatchSubstrings:

    def test_all_groups(self) -> None:
        match = regex.search(r"(\d+):(\d+)", "at 10:45")
        assert match_substrings(match) == ["10:45", "10", "45"]

    def test_selected_groups(self) -> None:
        match = regex.search(r"(\d+):(\d+)", "at 10:45")
        assert match_substrings(match, range(1, 3)) == ["10", "45"]

    def test_unmatched_group_is_empty(self) -> None:
        match = regex.search(r"(a)(b)?", "ac")
        assert match_substrings(match) == ["a", "a", ""]
