"""Tests for guess normalization and matching."""

import pytest

from sofka_aroma.models.base_model import CatalogRecord
from sofka_aroma.utils import matches, normalize


class TestNormalize:
    """Test text canonicalization."""

    @pytest.mark.parametrize("text", ["Café", "cafe", "CAFÉ ", "  café\t"])
    def test_accent_and_case_insensitive(self, text):
        """Should map accented and cased variants to the same value."""
        assert normalize(text) == "cafe"

    def test_collapses_inner_whitespace(self):
        assert normalize("limón \t y\n\nnaranja") == "limon y naranja"

    def test_trims(self):
        assert normalize("   vainilla   ") == "vainilla"

    def test_byte_order_mark_is_whitespace(self):
        """A pasted BOM should not prevent a match."""
        assert normalize("\ufeffcafe") == "cafe"
        assert normalize("caf\u00e9\ufeff \ufeffnoir") == "cafe noir"

    def test_empty_string(self):
        assert normalize("") == ""

    def test_none_is_empty(self):
        assert normalize(None) == ""

    def test_strips_tilde_and_cedilla(self):
        assert normalize("Piña Garçon") == "pina garcon"

    @pytest.mark.parametrize(
        "text",
        ["Café", "  Sándalo  Rojo ", "İstanbul", "ÅNGSTRÖM", "\ufeffLimón\ufeff", "", "á́", "Å"],
    )
    def test_idempotent(self, text):
        """normalize(normalize(s)) should equal normalize(s)."""
        once = normalize(text)
        assert normalize(once) == once


class TestMatches:
    """Test guess comparison against a record."""

    def test_matches_aroma(self):
        record = CatalogRecord(aroma="Vainilla")
        assert matches("VAINILLA ", record) is True

    def test_matches_synonym(self):
        record = CatalogRecord(aroma="Lavanda", synonyms=["Lavender", "lavanda francesa"])
        assert matches("lavender", record) is True
        assert matches("Lavanda   Francesa", record) is True

    def test_no_match(self):
        record = CatalogRecord(aroma="Vainilla", synonyms=["vanilla"])
        assert matches("Chocolate", record) is False

    def test_no_synonyms(self):
        record = CatalogRecord(aroma="Café")
        assert matches("coffee", record) is False
        assert matches("cafe", record) is True
