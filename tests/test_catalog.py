import json

import pytest

from regionpath.core.config import BASE_DIR
from regionpath.services import CatalogError, RegionCatalog
from regionpath.utils.text import normalize_for_search


def entry(name, name_en, x=0.0):
    return {"name": name, "name_en": name_en, "polygons": [[[x, 0], [x + 1, 0], [x + 1, 1], [x, 1]]]}


@pytest.fixture
def catalog():
    return RegionCatalog.from_entries([
        entry("Şəki", "Shaki", 0.0),
        entry("Qəbələ", "Gabala", 1.0),
        entry("Şamaxı", "Shamakhi", 2.0),
        entry("Bakı", "Baku", 10.0),
    ])


def test_ids_follow_file_order(catalog):
    assert [region.id for region in catalog] == [0, 1, 2, 3]
    assert catalog.get(1).name == "Qəbələ"
    assert catalog.get(9) is None
    assert 3 in catalog and 4 not in catalog


def test_catalog_builds_adjacency(catalog):
    assert catalog.adjacency[0] == (1,)
    assert set(catalog.adjacency[1]) == {0, 2}
    assert catalog.adjacency[3] == ()
    assert [region.name for region in catalog.neighbours(2)] == ["Qəbələ"]


def test_label(catalog):
    assert catalog.get(3).label == "Bakı (Baku)"


def test_resolve_exact_names(catalog):
    assert catalog.resolve("Bakı") == 3
    assert catalog.resolve("baku") == 3
    assert catalog.resolve("  bakı (BAKU) ") == 3


def test_resolve_without_diacritics(catalog):
    assert catalog.resolve("samax") == 2
    assert catalog.resolve("SEKI") is None  # ə is a letter of its own
    assert catalog.resolve("səki") == 0


def test_duplicate_exact_alias_resolves_to_last_region():
    catalog = RegionCatalog.from_entries([entry("Şəki", "Shaki", 0.0), entry("Şəki rayonu", "Shaki", 5.0)])
    assert catalog.resolve("Shaki") == 1
    assert catalog.resolve("Şəki") == 0


def test_resolve_unique_substring(catalog):
    assert catalog.resolve("gab") == 1


def test_resolve_ambiguous_or_unknown(catalog):
    # Shaki and Shamakhi
    assert catalog.find_matches("sha") == [0, 2]
    assert catalog.resolve("sha") is None
    assert catalog.resolve("Paris") is None
    assert catalog.resolve("") is None
    assert catalog.resolve("!!!") is None


def test_sorted_by_name(catalog):
    assert [region.name for region in catalog.sorted_by_name()] == ["Bakı", "Qəbələ", "Şamaxı", "Şəki"]


def test_missing_name_en_is_allowed():
    catalog = RegionCatalog.from_entries([{"name": "Lerik", "name_en": None, "polygons": []}])
    region = catalog.get(0)
    assert region.name_en == ""
    assert region.label == "Lerik"


def test_bad_polygons_become_isolated_region():
    catalog = RegionCatalog.from_entries([{"name": "Lerik", "polygons": "broken"}, entry("Astara", "Astara")])
    assert catalog.get(0).polygons == []
    assert catalog.adjacency[0] == ()


@pytest.mark.parametrize("entries", [
    [],
    {"name": "not a list"},
    [{"name_en": "No native name"}],
    [{"name": "   "}],
    ["just a string"],
])
def test_invalid_entries(entries):
    with pytest.raises(CatalogError):
        RegionCatalog.from_entries(entries)


def test_load_from_file(tmp_path):
    path = tmp_path / "regions.json"
    path.write_text(json.dumps([entry("Quba", "Guba"), entry("Qusar", "Gusar", 1.0)]), encoding="utf-8")

    catalog = RegionCatalog.load(path)

    assert len(catalog) == 2
    assert catalog.adjacency[0] == (1,)


def test_load_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        RegionCatalog.load(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "regions.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogError, match="not valid JSON"):
        RegionCatalog.load(path)


def test_bundled_demo_data_loads():
    catalog = RegionCatalog.load(BASE_DIR / "data" / "regions.json")
    assert len(catalog) == 9
    # centre square touches its four edge neighbours only
    centre = catalog.resolve("Centre")
    assert len(catalog.adjacency[centre]) == 4


@pytest.mark.parametrize("value, expected", [
    ("Şəki", "səki"),
    ("Qəbələ", "qəbələ"),
    ("  Naxçıvan  (Nakhchivan) ", "naxcıvan nakhchivan"),
    ("Ağdam-Şuşa", "agdam susa"),
    ("", ""),
])
def test_normalize_for_search(value, expected):
    assert normalize_for_search(value) == expected
