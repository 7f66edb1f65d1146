"""
Tests for address / city / postal code / country resolution.
"""

from cvextract.core.location_resolver import (
    Location,
    infer_country,
    is_postal_code_like,
    parse_location_parts,
    resolve_location,
    split_parts,
)


def _resolve(text, institutions=None):
    lines = [l.strip() for l in text.splitlines() if l.strip()]
    return resolve_location(lines, text, institutions or [])


# ===== ADDRESS LABEL =====

def test_duplicate_country_parts_collapse():
    loc = _resolve("Jane Doe\nAddress: Sri Lanka, Sri Lanka")
    assert loc.country == "Sri Lanka"
    assert loc.address == "Sri Lanka"
    assert loc.city == ""


def test_address_with_city_and_country():
    loc = _resolve("Address: 45 Galle Road, Colombo, Sri Lanka | +94 77 123 4567")
    assert loc == Location(
        address="45 Galle Road, Colombo, Sri Lanka",
        city="Colombo",
        postal_code="",
        country="Sri Lanka",
    )


def test_postal_code_in_city_part():
    loc = _resolve("Address: 45 Galle Road, Colombo 00300, Sri Lanka")
    assert loc.city == "Colombo"
    assert loc.postal_code == "00300"
    assert loc.country == "Sri Lanka"


def test_trailing_postal_code_leaves_country_empty():
    loc = _resolve("Address: 10 High Street, London, SW1A 2AA")
    assert loc.city == "London"
    assert loc.postal_code == "SW1A 2AA"
    assert loc.country == ""


def test_email_address_label_is_not_an_address():
    loc = _resolve("Email address: jane@gmail.com")
    assert loc == Location()


# ===== PLACE ENTITIES =====

def test_single_place_is_country(fake_ner):
    fake_ner(("Sri Lanka", "GPE"))
    assert _resolve("Jane Doe\nLiving in Sri Lanka").country == "Sri Lanka"


def test_several_places_first_city_last_country(fake_ner):
    fake_ner(("Kandy", "GPE"), ("Kandy", "GPE"), ("Sri Lanka", "GPE"))
    loc = _resolve("Jane Doe\nKandy, Sri Lanka")
    assert loc.city == "Kandy"
    assert loc.country == "Sri Lanka"


# ===== KEYWORD LINES =====

def test_based_in_line():
    loc = _resolve("Jane Doe\nBased in: Kandy, Sri Lanka")
    assert loc.city == "Kandy"
    assert loc.country == "Sri Lanka"


def test_city_line():
    assert _resolve("City: Galle").city == "Galle"


# ===== COUNTRY INFERENCE =====

def test_country_inferred_from_institution():
    loc = _resolve("Jane Doe", ["University of Colombo, Sri Lanka"])
    assert loc.country == "Sri Lanka"


def test_inference_fills_postal_only_country():
    loc = _resolve("Address: 10 High Street, London, SW1A 2AA", ["University College London, United Kingdom"])
    assert loc.country == "United Kingdom"
    assert loc.postal_code == "SW1A 2AA"


def test_infer_country_canonical_casing():
    assert infer_country(["SRI LANKA INSTITUTE OF INFORMATION TECHNOLOGY"]) == "Sri Lanka"
    assert infer_country(["Royal College"]) == ""


# ===== HELPERS =====

def test_split_parts_dedupes_case_insensitively():
    assert split_parts("Colombo, colombo , , Sri Lanka") == ["Colombo", "Sri Lanka"]


def test_is_postal_code_like():
    assert is_postal_code_like("SW1A 2AA")
    assert is_postal_code_like("10115")
    assert not is_postal_code_like("Colombo 00300")
    assert not is_postal_code_like("Sri Lanka")


def test_parse_location_parts_empty():
    assert parse_location_parts([]) == Location()
