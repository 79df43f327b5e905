"""Tests for decoding raw PokeAPI bodies."""

import json

import pytest

from pokedex.errors import DecodeError
from pokedex.models.pokemon import CatalogItem
from pokedex.services.decoder import decode_catalog, decode_detail


class TestDecodeCatalog:
    """GET /pokemon body decoding."""

    def test_entries_in_order(self, catalog_body):
        entries = decode_catalog(json.dumps(catalog_body))
        items = [CatalogItem.from_entry(entry) for entry in entries]
        assert items == [CatalogItem(id=1, name="bulbasaur"), CatalogItem(id=2, name="ivysaur")]
        assert [item.name for item in items] == ["bulbasaur", "ivysaur"]

    def test_empty_results(self):
        assert decode_catalog(b'{"results": []}') == []

    def test_missing_results(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_catalog(b'{"count": 0}')
        assert "results" in exc_info.value.message

    def test_entry_missing_url(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_catalog(b'{"results": [{"name": "bulbasaur"}]}')
        assert "url" in exc_info.value.message

    def test_malformed_json(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_catalog(b"<html>oops</html>")
        assert exc_info.value.message.startswith("Invalid response:")


class TestDecodeDetail:
    """GET /pokemon/{identifier} body decoding."""

    def test_full_record(self, pikachu_body):
        record = decode_detail(json.dumps(pikachu_body))
        assert record.id == 25
        assert record.name == "pikachu"
        assert record.height == 4
        assert record.weight == 60
        assert record.base_experience == 112
        assert [t.type_name for t in record.types] == ["electric"]
        assert record.types[0].slot == 1
        assert record.image_url_primary.endswith("official-artwork/25.png")
        assert record.image_url_fallback.endswith("/pokemon/25.png")
        assert record.image_url == record.image_url_primary

    def test_stats_keep_source_order(self, pikachu_body):
        record = decode_detail(json.dumps(pikachu_body))
        assert [s.stat_name for s in record.stats] == [
            "hp", "attack", "defense", "special-attack", "special-defense", "speed",
        ]
        assert record.stats[-1].base_value == 90
        assert record.stats[-1].effort == 2

    def test_missing_base_experience_is_absent_not_zero(self, pikachu_body):
        del pikachu_body["base_experience"]
        record = decode_detail(json.dumps(pikachu_body))
        assert record.base_experience is None

    def test_null_base_experience(self, pikachu_body):
        pikachu_body["base_experience"] = None
        assert decode_detail(json.dumps(pikachu_body)).base_experience is None

    def test_only_fallback_sprite(self, pikachu_body):
        pikachu_body["sprites"]["other"] = None
        record = decode_detail(json.dumps(pikachu_body))
        assert record.image_url_primary is None
        assert record.image_url == pikachu_body["sprites"]["front_default"]

    def test_no_sprites(self, pikachu_body):
        del pikachu_body["sprites"]
        record = decode_detail(json.dumps(pikachu_body))
        assert record.image_url_primary is None
        assert record.image_url_fallback is None
        assert record.image_url is None

    def test_invalid_image_url_treated_as_absent(self, pikachu_body):
        pikachu_body["sprites"]["other"]["official-artwork"]["front_default"] = "not a url"
        record = decode_detail(json.dumps(pikachu_body))
        assert record.image_url_primary is None
        assert record.image_url == pikachu_body["sprites"]["front_default"]

    def test_missing_required_field(self, pikachu_body):
        del pikachu_body["height"]
        with pytest.raises(DecodeError) as exc_info:
            decode_detail(json.dumps(pikachu_body))
        assert "height" in exc_info.value.message

    def test_type_mismatch_is_not_coerced(self, pikachu_body):
        pikachu_body["weight"] = "60"
        with pytest.raises(DecodeError) as exc_info:
            decode_detail(json.dumps(pikachu_body))
        assert "weight" in exc_info.value.message

    def test_nested_missing_stat_name(self, pikachu_body):
        del pikachu_body["stats"][0]["stat"]
        with pytest.raises(DecodeError):
            decode_detail(json.dumps(pikachu_body))
