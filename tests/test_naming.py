"""Tests for name validation and normalization."""

import pytest

from megastore.domain.errors import InvalidFormatError, MissingNameError
from megastore.domain.naming import (
    NameRule,
    capitalize,
    is_present,
    matches_alphanumeric,
    matches_letters_and_spaces,
    normalize_spacing,
    validate_name,
)


class TestIsPresent:
    """Tests for is_present."""

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_missing_names(self, name):
        assert is_present(name) is False

    def test_present_name(self):
        assert is_present("Hogar") is True


class TestMatchesLettersAndSpaces:
    """Tests for the strict letters-and-spaces rule."""

    @pytest.mark.parametrize(
        "name", ["Juan Carlos", "Ropa", "electronica", "Línea Blanca", "Niño Pequeño"]
    )
    def test_valid_names(self, name):
        assert matches_letters_and_spaces(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            " Juan",
            "Juan ",
            "Juan  Carlos",
            "Juan2",
            "",
            " ",
            "Juan-Carlos",
            "Juan_Carlos",
            "Juan\tCarlos",
            "Ropa!",
            "Rojo²",
            "Rojo½",
            "Ⅻ",
            "Rojo٣",
        ],
    )
    def test_invalid_names(self, name):
        assert matches_letters_and_spaces(name) is False


class TestMatchesAlphanumeric:
    """Tests for the relaxed letters-digits-and-spaces rule."""

    @pytest.mark.parametrize("name", ["Sucursal 1", "Centro", "Local 12 Norte", "42"])
    def test_valid_names(self, name):
        assert matches_alphanumeric(name) is True

    @pytest.mark.parametrize(
        "name", ["Sucursal  1", " Sucursal 1", "Sucursal #1", "", "Sucursal ½", "Local ²", "Ⅻ"]
    )
    def test_invalid_names(self, name):
        assert matches_alphanumeric(name) is False


class TestNormalizeSpacing:
    """Tests for normalize_spacing."""

    def test_collapses_inner_runs(self):
        assert normalize_spacing("Sucursal   1 Centro") == "Sucursal 1 Centro"

    def test_trims_ends(self):
        assert normalize_spacing("  Sucursal 1  ") == "Sucursal 1"

    def test_tabs_and_newlines(self):
        assert normalize_spacing("Sucursal\t\n1") == "Sucursal 1"

    def test_blank_becomes_empty(self):
        assert normalize_spacing("   ") == ""


class TestCapitalize:
    """Tests for capitalize."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("electronica", "Electronica"),
            ("ropa de NIÑOS", "Ropa De Niños"),
            ("JUAN carlos", "Juan Carlos"),
            ("sucursal 1", "Sucursal 1"),
            ("línea blanca", "Línea Blanca"),
        ],
    )
    def test_capitalizes_each_word(self, name, expected):
        assert capitalize(name) == expected

    @pytest.mark.parametrize(
        "name", ["electronica", "ropa de NIÑOS", "Hogar", "sucursal 1 centro", "straße"]
    )
    def test_idempotent(self, name):
        once = capitalize(name)
        assert capitalize(once) == once


class TestValidateName:
    """Tests for validate_name with both rules."""

    def test_strict_returns_capitalized(self):
        assert validate_name("hogar", NameRule.STRICT, "category") == "Hogar"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name(self, name):
        with pytest.raises(MissingNameError, match="category must have a name"):
            validate_name(name, NameRule.STRICT, "category")

    def test_strict_does_not_repair_spacing(self):
        with pytest.raises(InvalidFormatError):
            validate_name("Ropa  Deportiva", NameRule.STRICT, "category")

    def test_strict_rejects_digits(self):
        with pytest.raises(InvalidFormatError):
            validate_name("Rojo2", NameRule.STRICT, "color")

    def test_relaxed_accepts_digits(self):
        assert validate_name("sucursal 1", NameRule.RELAXED, "branch") == "Sucursal 1"

    def test_relaxed_repairs_spacing(self):
        assert (
            validate_name("  sucursal   1 centro ", NameRule.RELAXED, "branch")
            == "Sucursal 1 Centro"
        )

    def test_relaxed_rejects_punctuation_after_repair(self):
        with pytest.raises(InvalidFormatError):
            validate_name("Sucursal  #1", NameRule.RELAXED, "branch")

    @pytest.mark.parametrize("name", ["Rojo²", "Rojo½", "Ⅻ"])
    def test_strict_rejects_numeric_symbols(self, name):
        with pytest.raises(InvalidFormatError):
            validate_name(name, NameRule.STRICT, "color")

    @pytest.mark.parametrize("rule", list(NameRule))
    def test_rejects_name_whose_capitalized_form_breaks_the_rule(self, rule):
        # "İ" lower-cases to "i" followed by a combining dot
        with pytest.raises(InvalidFormatError):
            validate_name("aİ", rule, "category")

    @pytest.mark.parametrize(
        "name,rule",
        [
            ("línea blanca", NameRule.STRICT),
            ("straße", NameRule.STRICT),
            ("ropa de NIÑOS", NameRule.STRICT),
            ("  sucursal   1 centro ", NameRule.RELAXED),
        ],
    )
    def test_saved_name_validates_again_unchanged(self, name, rule):
        saved = validate_name(name, rule, "category")
        assert validate_name(saved, rule, "category") == saved
