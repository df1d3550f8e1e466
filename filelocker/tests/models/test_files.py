from xml.etree.ElementTree import fromstring

import pytest

from filelocker.models.files import File, Group, format_size


def test_format_size_returns_human_readable_values() -> None:
    assert format_size(0) == "0 B"
    assert format_size(512) == "512 B"
    assert format_size(1536) == "1.5 KB"
    assert format_size(1024 * 1024) == "1.0 MB"
    assert format_size(1024**4) == "1.0 TB"


def test_file_from_element_reads_attributes() -> None:
    element = fromstring('<file id="3" name="a b.txt" size="10" passedAvScan="true"/>')

    assert File.from_element(element) == File(
        file_id="3", name="a b.txt", size=10, passed_av_scan=True
    )


def test_file_from_element_defaults_missing_attributes() -> None:
    file = File.from_element(fromstring('<file id="3" name="x" size=""/>'))

    assert file.size == 0
    assert file.passed_av_scan is False


@pytest.mark.parametrize("value,expected", [("True", True), ("1", True), ("false", False)])
def test_file_from_element_av_flag(value: str, expected: bool) -> None:
    file = File.from_element(fromstring(f'<file id="1" name="x" passedAvScan="{value}"/>'))

    assert file.passed_av_scan is expected


def test_file_to_dict() -> None:
    file = File(file_id="3", name="x", size=1, passed_av_scan=True)

    assert file.to_dict() == {"id": "3", "name": "x", "size": 1, "passed_av_scan": True}


def test_group_from_element() -> None:
    group = Group.from_element(fromstring('<group id="5" name="Research"/>'))

    assert group == Group(group_id="5", name="Research")
    assert group.to_dict() == {"id": "5", "name": "Research"}
