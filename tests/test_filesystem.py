import pytest

from hwreport.filesystem import (
    Jiffies,
    directory_entries,
    exists,
    read_int,
    read_jiffies,
)


def test_exists_for_file_and_directory(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert exists(target) is True
    assert exists(tmp_path) is True


def test_exists_missing(tmp_path):
    assert exists(tmp_path / "missing") is False


def test_directory_entries_lists_children(tmp_path):
    names = ["sda", "sda1", "nvme0n1"]
    for name in names:
        (tmp_path / name).mkdir()
    assert sorted(directory_entries(tmp_path)) == sorted(names)


def test_directory_entries_missing_directory(tmp_path):
    assert directory_entries(tmp_path / "nope") == []


def test_read_int_plain_value(tmp_path):
    target = tmp_path / "scaling_max_freq"
    target.write_text("2400000\n")
    assert read_int(target) == 2400000


def test_read_int_leading_space_and_trailing_text(tmp_path):
    target = tmp_path / "value"
    target.write_text("  42 kHz\nsecond line 7\n")
    assert read_int(target) == 42


def test_read_int_negative(tmp_path):
    target = tmp_path / "value"
    target.write_text("-7\n")
    assert read_int(target) == -7


def test_read_int_not_a_number(tmp_path):
    target = tmp_path / "value"
    target.write_text("abc\n")
    assert read_int(target) == -1


def test_read_int_missing_file(tmp_path):
    assert read_int(tmp_path / "missing") == -1


@pytest.fixture
def stat_file(tmp_path):
    path = tmp_path / "stat"
    path.write_text(
        "cpu  349585 0 30513 875546 0 935 0 0 0 0\n"
        "cpu0 1 1 1 1 1 1 1 1 1 1\n"
        "cpu1 0 0 0 0 0 0 0 0 0 0\n"
        "intr 1\n"
    )
    return path


def test_read_jiffies_selects_line(stat_file):
    assert read_jiffies(1, stat_file) == Jiffies(all=10, working=3)
    assert read_jiffies(2, stat_file) == Jiffies(all=0, working=0)


def test_read_jiffies_working_not_above_all(stat_file):
    result = read_jiffies(0, stat_file)
    assert 0 < result.working <= result.all


def test_read_jiffies_missing_file(tmp_path):
    assert read_jiffies(0, tmp_path / "missing") == Jiffies(all=-1, working=-1)


def test_read_jiffies_short_line_raises(stat_file):
    with pytest.raises(ValueError):
        read_jiffies(3, stat_file)


def test_read_jiffies_past_end_raises(stat_file):
    with pytest.raises(ValueError):
        read_jiffies(10, stat_file)