import sys

from hwreport.osinfo import UNKNOWN, parse_os_release, read_os

SAMPLE = (
    'NAME="Example Linux"\n'
    'PRETTY_NAME="Example Linux 1.0"\n'
    'VERSION="1.0 (Sample)"\n'
    'VERSION_ID="1.0"\n'
    "ID=example\n"
)


def test_parse_pretty_name_and_last_version_key():
    name, version = parse_os_release(SAMPLE)
    assert name == "Example Linux 1.0"
    assert version == "1.0"


def test_parse_without_keys_is_empty():
    assert parse_os_release("ID=example\n") == ("", "")


def test_missing_os_release_defaults(tmp_path):
    info = read_os(tmp_path / "absent", tmp_path / "loader")
    assert info.name == "Linux"
    assert info.version == UNKNOWN


def test_read_os_uses_file(tmp_path):
    release = tmp_path / "os-release"
    release.write_text(SAMPLE)
    info = read_os(release, tmp_path / "loader")
    assert (info.name, info.version) == parse_os_release(SAMPLE)


def test_loader_decides_word_size(tmp_path):
    loader = tmp_path / "loader"
    loader.write_text("")
    with_loader = read_os(tmp_path / "absent", loader)
    without_loader = read_os(tmp_path / "absent", tmp_path / "missing")
    assert with_loader.is_64bit and not with_loader.is_32bit
    assert without_loader.is_32bit and not without_loader.is_64bit


def test_endianness_matches_interpreter(tmp_path):
    info = read_os(tmp_path / "absent", tmp_path / "loader")
    assert info.is_little_endian != info.is_big_endian
    assert info.is_little_endian == (sys.byteorder == "little")
    assert len(info.kernel) > 0