"""
Tests for the star catalogs.
"""

from stellar_id.core.catalog import (
    DEFAULT_STAR_NAMES,
    REAL_STARS,
    StarRecord,
    get_real_star_data,
    get_star_info,
    list_default_star_names,
    list_real_star_names,
)


def test_default_names_order():
    """Order is part of the ID contract and must not change."""
    assert list_default_star_names() == [
        "SIRIUS",
        "VEGA",
        "ALTAIR",
        "RIGEL",
        "ANTARES",
        "ALDEBARAN",
        "BETELGEUSE",
        "ARCTURUS",
        "POLLUX",
        "DENEB",
    ]
    assert tuple(list_default_star_names()) == DEFAULT_STAR_NAMES


def test_listing_returns_copies():
    names = list_default_star_names()
    names.append("EXTRA")
    assert "EXTRA" not in list_default_star_names()


def test_real_catalog_contents():
    names = list_real_star_names()
    assert len(names) == len(REAL_STARS) >= 60
    assert names[0] == "SIRIUS"
    assert names[-1] == "OMEGA_CENTAURI"
    assert all(name == name.upper() for name in names)
    for default in DEFAULT_STAR_NAMES:
        assert default in names


def test_get_star_info_case_insensitive():
    vega = get_star_info("vega")
    assert isinstance(vega, StarRecord)
    assert vega.name == "VEGA"
    assert vega.constellation == "Lyra"
    assert vega.spectral_type == "A0V"
    assert get_star_info("  Sirius ").magnitude == -1.46


def test_get_star_info_missing():
    assert get_star_info("NOT_A_STAR") is None


def test_star_record_to_dict():
    record = get_star_info("MIAPLACIDUS")
    assert record.to_dict() == {
        "name": "MIAPLACIDUS",
        "distance": 111,
        "magnitude": 1.67,
        "spectral_type": "A2IV",
        "constellation": "Carina",
    }


def test_get_real_star_data():
    data = get_real_star_data()
    assert data == list(REAL_STARS)


def test_get_star_info_non_string():
    assert get_star_info(None) is None
    assert get_star_info(42) is None
