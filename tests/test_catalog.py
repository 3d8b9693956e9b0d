import pytest

from pallet_load import catalog
from pallet_load.catalog import (
    custom_pallet,
    get_pallet,
    load_pallets,
    load_pallets_file,
    pallet_choices,
)


def test_bundled_catalog_has_euro_and_iso():
    pallets = load_pallets()
    assert (pallets["euro"].width, pallets["euro"].length) == (80.0, 120.0)
    assert (pallets["iso"].width, pallets["iso"].length) == (100.0, 120.0)
    assert pallets["euro"].name == "Europalet (120x80)"


def test_pallet_choices_end_with_custom():
    assert pallet_choices() == ["euro", "iso", "custom"]


def test_get_pallet_unknown_key():
    with pytest.raises(ValueError, match="Unknown pallet"):
        get_pallet("half")


def test_custom_pallet_copies_dimensions():
    pallet = custom_pallet(110, 130)
    assert (pallet.width, pallet.length) == (110, 130)
    assert pallet.name == catalog.CUSTOM_NAME


def test_load_pallets_file_rejects_bad_entry(tmp_path):
    path = tmp_path / "pallets.yaml"
    path.write_text("euro:\n  width: wide\n  length: 120\n", encoding="utf-8")
    with pytest.raises(ValueError, match="euro"):
        load_pallets_file(str(path))


def test_load_pallets_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pallets_file(str(tmp_path / "nope.yaml"))


def test_load_pallets_file_accepts_comma_decimals(tmp_path):
    path = tmp_path / "pallets.yaml"
    path.write_text(
        "half:\n  name: Half\n  width: '60,5'\n  length: 80\n", encoding="utf-8"
    )
    pallets = load_pallets_file(str(path))
    assert pallets["half"].width == 60.5
    assert pallets["half"].name == "Half"
