import pytest

from hwreport.pcimapper import PCIDevice, PCIMapper, PCIVendor, default_mapper

PCI_IDS = (
    "# a comment line\n"
    "\n"
    "\t0001  Orphan Device\n"
    "1234  Example Vendor\n"
    "\t5678  Example Device\n"
    "\t\t1234 0001  Example Subsystem\n"
    "\t\tmalformed subsystem line\n"
    "\t5678  Duplicate Device\n"
    "line without separator\n"
    "abcd  Other Vendor\n"
    "\t00ff  Other Device\n"
    "1234  Duplicate Vendor\n"
)


@pytest.fixture
def mapper(tmp_path):
    path = tmp_path / "pci.ids"
    path.write_text(PCI_IDS)
    return PCIMapper(path)


def test_vendor_lookup(mapper):
    vendor = mapper["1234"]
    assert vendor.vendor_id == "1234"
    assert vendor.vendor_name == "Example Vendor"


def test_vendor_lookup_with_hex_prefix(mapper):
    assert mapper["0x1234"] is mapper.vendor_from_id("1234")


def test_device_lookup(mapper):
    device = mapper["0x1234"]["0x5678"]
    assert device.device_id == "5678"
    assert device.device_name == "Example Device"


def test_device_method_matches_indexing(mapper):
    vendor = mapper["abcd"]
    assert vendor.device("00ff") is vendor["0x00ff"]
    assert vendor["00ff"].device_name == "Other Device"


def test_subsystems(mapper):
    assert mapper["1234"]["5678"].subsystems == {"1234 0001": "Example Subsystem"}


def test_unknown_vendor_is_invalid(mapper):
    vendor = mapper["ffff"]
    assert (vendor.vendor_id, vendor.vendor_name) == ("0000", "invalid")
    assert vendor["5678"].device_name == "invalid"


def test_unknown_device_is_invalid(mapper):
    device = mapper["1234"]["9999"]
    assert (device.device_id, device.device_name) == ("0000", "invalid")


def test_malformed_and_orphan_lines_ignored(mapper):
    assert mapper["line without separator"].vendor_name == "invalid"
    assert all(v["0001"].device_name == "invalid" for v in (mapper["1234"], mapper["abcd"]))


def test_first_entry_wins(mapper):
    assert mapper["1234"].vendor_name == "Example Vendor"
    assert mapper["1234"]["5678"].device_name == "Example Device"


def test_vendor_devices(mapper):
    assert set(mapper["1234"].devices) == {"5678"}
    assert set(mapper["abcd"].devices) == {"00ff"}


def test_vendor_device_directly():
    vendor = PCIVendor("1234", "Example Vendor", {"5678": PCIDevice("5678", "Example Device")})
    assert vendor["0x5678"].device_name == "Example Device"


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        PCIMapper(tmp_path / "missing.ids")


def test_default_mapper_reads_home(tmp_path, monkeypatch):
    ids_dir = tmp_path / ".hwinfo"
    ids_dir.mkdir()
    (ids_dir / "pci.ids").write_text(PCI_IDS)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    default_mapper.cache_clear()
    try:
        first = default_mapper()
        assert first["1234"].vendor_name == "Example Vendor"
        assert default_mapper() is first
    finally:
        default_mapper.cache_clear()