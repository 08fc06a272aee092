# SPDX-License-Identifier: MIT
"""Unit tests for the semantic version parser."""

import pytest

from semverkit import (
    AlphanumericIdentifier,
    Failure,
    Identifier,
    InvalidNumberError,
    MAX_CORE_NUMBER,
    MAX_NUMERIC_IDENTIFIER,
    NumericIdentifier,
    SemVerParseError,
    Success,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    Version,
    parse,
    parse_identifier,
    parse_identifier_sequence,
)


def _ids(*texts):
    return tuple(Identifier.of(text) for text in texts)


class TestParseVersion:
    """Tests for parsing valid version text."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        result = parse("1.2.3")
        assert isinstance(result, Success)
        assert result.is_success is True
        assert result.error is None
        assert result.value == Version(1, 2, 3)

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        assert parse("0.0.0").get_or_raise() == Version(0, 0, 0)

    def test_max_core_numbers(self):
        """Test parsing the largest allowed core numbers."""
        text = f"{MAX_CORE_NUMBER}.{MAX_CORE_NUMBER}.{MAX_CORE_NUMBER}"
        assert parse(text).get_or_raise() == Version(MAX_CORE_NUMBER, MAX_CORE_NUMBER, MAX_CORE_NUMBER)

    def test_core_leading_zeros(self):
        """Test that version cores accept leading zeros."""
        assert parse("01.002.0003").get_or_raise() == Version(1, 2, 3)
        assert parse("0000000000000000000001.0.0").get_or_raise() == Version(1, 0, 0)

    def test_prerelease(self):
        """Test parsing a pre-release."""
        version = parse("1.0.0-alpha.1").get_or_raise()
        assert version.prerelease == (AlphanumericIdentifier("alpha"), NumericIdentifier(1))
        assert version.build_metadata == ()

    def test_numeric_prerelease(self):
        """Test parsing numeric-only pre-release."""
        version = parse("1.0.0-0.3.7").get_or_raise()
        assert version.prerelease == (NumericIdentifier(0), NumericIdentifier(3), NumericIdentifier(7))

    def test_prerelease_with_hyphen(self):
        """Test that hyphens are allowed inside pre-release identifiers."""
        version = parse("1.0.0-beta-1").get_or_raise()
        assert version.prerelease == (AlphanumericIdentifier("beta-1"),)

    def test_prerelease_only_hyphens(self):
        """Test that an identifier made only of hyphens is valid."""
        assert parse("1.0.0--").get_or_raise().prerelease == (AlphanumericIdentifier("-"),)

    def test_prerelease_leading_zero_identifier(self):
        """Test that zero-padded identifiers parse as alphanumeric."""
        version = parse("1.0.0-01.00").get_or_raise()
        assert version.prerelease == (AlphanumericIdentifier("01"), AlphanumericIdentifier("00"))

    def test_build_metadata(self):
        """Test parsing build metadata."""
        version = parse("1.0.0+build.123").get_or_raise()
        assert version.build_metadata == _ids("build", "123")
        assert version.prerelease == ()

    def test_build_metadata_leading_zeros(self):
        """Test parsing build metadata with leading zeros."""
        assert parse("1.0.0+001").get_or_raise().build_metadata == (AlphanumericIdentifier("001"),)

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        version = parse("1.0.0-alpha.1+build.456").get_or_raise()
        assert version.prerelease == _ids("alpha", "1")
        assert version.build_metadata == _ids("build", "456")

    def test_hyphen_inside_build_metadata(self):
        """Test that a hyphen after '+' belongs to the build metadata."""
        version = parse("1.0.0+exp.sha-5114f85").get_or_raise()
        assert version.prerelease == ()
        assert version.build_metadata == _ids("exp", "sha-5114f85")

    def test_large_numeric_identifier(self):
        """Test parsing the largest numeric identifier."""
        version = parse(f"1.0.0-{MAX_NUMERIC_IDENTIFIER}").get_or_raise()
        assert version.prerelease == (NumericIdentifier(MAX_NUMERIC_IDENTIFIER),)

    def test_version_parse_classmethod(self):
        """Test that Version.parse matches parse."""
        assert Version.parse("1.2.3-rc.1") == parse("1.2.3-rc.1")


class TestParseErrors:
    """Tests for parse failures and their messages."""

    def test_missing_patch(self):
        """Test that missing patch version fails at end of input."""
        result = parse("1.0")
        assert isinstance(result, Failure)
        assert result.is_success is False
        assert result.value is None
        assert isinstance(result.error, UnexpectedEndOfInputError)
        assert result.error.message == "Expected '.' after minor version, got end of input."
        assert result.error.position == 3

    def test_empty_string(self):
        """Test that empty input fails at end of input."""
        error = parse("").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected major version, got end of input."

    def test_missing_minor_number(self):
        """Test that an empty minor version fails on the dot."""
        error = parse("1..0").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected minor version, got '.' at index 2."

    def test_leading_v(self):
        """Test that a 'v' prefix is rejected."""
        error = parse("v1.0.0").error
        assert isinstance(error, UnexpectedCharacterError)
        assert error.character == "v"
        assert error.position == 0

    def test_empty_prerelease(self):
        """Test that a trailing hyphen fails at end of input."""
        error = parse("1.0.0-").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected identifier after '-', got end of input."

    def test_empty_prerelease_before_build(self):
        """Test that '-' directly followed by '+' fails on the '+'."""
        error = parse("1.0.0-+build").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected identifier after '-', got '+' at index 6."

    def test_empty_build_metadata(self):
        """Test that a trailing plus fails at end of input."""
        error = parse("1.0.0+").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected identifier after '+', got end of input."

    def test_empty_identifier_between_dots(self):
        """Test that an empty identifier cites the offending character."""
        error = parse("1.0.0-alpha..beta").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected identifier after '.', got '.' at index 12."
        assert error.character == "."
        assert error.position == 12

    def test_trailing_dot_in_prerelease(self):
        """Test that a trailing dot in a pre-release fails at end of input."""
        assert isinstance(parse("1.0.0-alpha.").error, UnexpectedEndOfInputError)

    def test_extra_parts(self):
        """Test that extra version parts are rejected."""
        error = parse("1.2.3.4").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected end of input, got '.' at index 5."

    def test_second_plus(self):
        """Test that a second '+' is rejected."""
        error = parse("1.0.0+build+meta").error
        assert isinstance(error, UnexpectedCharacterError)
        assert error.position == 11

    @pytest.mark.parametrize(
        "text",
        ["1.0.0-alpha_1", "1.0.0 ", " 1.0.0", "1.0.0\n", "1.0.0-é", "a.b.c", "-1.0.0", "1.0.0-alpha+b@d"],
    )
    def test_unexpected_characters(self, text):
        """Test that characters outside the grammar are rejected."""
        assert isinstance(parse(text).error, UnexpectedCharacterError)

    def test_core_overflow(self):
        """Test that a core number above 32 bits is an invalid number."""
        error = parse(f"{MAX_CORE_NUMBER + 1}.0.0").error
        assert isinstance(error, InvalidNumberError)
        assert str(error) == f"'{MAX_CORE_NUMBER + 1}' is not a valid number."
        assert isinstance(error.__cause__, OverflowError)

    def test_huge_core_overflow(self):
        """Test that an extremely long digit run is an invalid number."""
        error = parse("1." + "9" * 5000 + ".0").error
        assert isinstance(error, InvalidNumberError)
        assert error.position == 2

    def test_identifier_overflow(self):
        """Test that a numeric identifier above 64 bits is an invalid number."""
        error = parse(f"1.0.0-{MAX_NUMERIC_IDENTIFIER + 1}").error
        assert isinstance(error, InvalidNumberError)
        assert error.position == 6

    def test_errors_share_base_class(self):
        """Test that all parse errors derive from SemVerParseError."""
        for text in ["1.0", "1.0.0-alpha..beta", "99999999999.0.0"]:
            assert isinstance(parse(text).error, SemVerParseError)

    def test_get_or_raise(self):
        """Test that get_or_raise re-raises the carried error."""
        with pytest.raises(UnexpectedEndOfInputError):
            parse("1.0").get_or_raise()

    def test_get_or_none(self):
        """Test get_or_none on both outcomes."""
        assert parse("1.0").get_or_none() is None
        assert parse("1.0.0").get_or_none() == Version(1, 0, 0)

    def test_non_string_input(self):
        """Test that non-string input is a programming error."""
        with pytest.raises(TypeError):
            parse(123)  # type: ignore
        with pytest.raises(TypeError):
            parse(None)  # type: ignore


class TestParseIdentifierSequence:
    """Tests for parse_identifier_sequence."""

    def test_sequence(self):
        """Test parsing a multi-element sequence."""
        result = parse_identifier_sequence("alpha.1.0a.069")
        assert result.get_or_raise() == _ids("alpha", "1", "0a", "069")

    def test_single_element(self):
        """Test parsing a one-element sequence."""
        assert parse_identifier_sequence("rc").get_or_raise() == _ids("rc")

    def test_empty_element(self):
        """Test that two consecutive dots fail at the second dot."""
        error = parse_identifier_sequence("alpha..69").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected identifier after '.', got '.' at index 6."

    def test_leading_dot(self):
        """Test that a leading dot fails at the start of the sequence."""
        error = parse_identifier_sequence(".alpha").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected identifier at start of sequence, got '.' at index 0."

    def test_trailing_dot(self):
        """Test that a trailing dot fails at end of input."""
        error = parse_identifier_sequence("alpha.").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected identifier after '.', got end of input."

    def test_empty_input(self):
        """Test that empty input is an error, not an empty sequence."""
        error = parse_identifier_sequence("").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected identifier at start of sequence, got end of input."

    def test_trailing_garbage(self):
        """Test that characters after the sequence are rejected."""
        assert isinstance(parse_identifier_sequence("alpha+1").error, UnexpectedCharacterError)

    def test_identifier_parse_sequence(self):
        """Test that Identifier.parse_sequence matches the module function."""
        assert Identifier.parse_sequence("a.1") == parse_identifier_sequence("a.1")


class TestParseIdentifier:
    """Tests for parse_identifier."""

    @pytest.mark.parametrize("text", ["0", "69", "069", "69leet", "leet", "beta-1", "-"])
    def test_agrees_with_of(self, text):
        """Test that parsing and Identifier.of classify identically."""
        assert parse_identifier(text).get_or_raise() == Identifier.of(text)

    def test_empty(self):
        """Test that an empty identifier fails at end of input."""
        error = Identifier.parse("").error
        assert isinstance(error, UnexpectedEndOfInputError)
        assert str(error) == "Expected identifier, got end of input."

    def test_whole_input_required(self):
        """Test that a second identifier is rejected."""
        error = parse_identifier("a.b").error
        assert isinstance(error, UnexpectedCharacterError)
        assert str(error) == "Expected end of input after identifier, got '.' at index 1."

    def test_illegal_character(self):
        """Test that an illegal first character is rejected."""
        assert isinstance(parse_identifier("_a").error, UnexpectedCharacterError)
