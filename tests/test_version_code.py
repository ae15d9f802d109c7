import logging

import pytest

from cap_sync_version.android import build_android_version_code, encode_version_code
from cap_sync_version.errors import InvalidVersionError, RangeExceededError, UnsupportedPrereleaseError


def test_example_version_code():
    assert encode_version_code(2, 4, 1) == 2004001
    assert build_android_version_code("2.4.1") == 2004001


@pytest.mark.parametrize(
    "major, minor, patch",
    [(0, 0, 0), (0, 0, 1), (1, 0, 0), (10, 99, 999), (2147, 483, 647)],
)
def test_version_code_decodes_back_to_components(major, minor, patch):
    code = encode_version_code(major, minor, patch)

    assert code == major * 1_000_000 + minor * 1_000 + patch
    assert (code // 1_000_000, code // 1_000 % 1_000, code % 1_000) == (major, minor, patch)


def test_prerelease_is_rejected():
    with pytest.raises(UnsupportedPrereleaseError):
        encode_version_code(1, 0, 0, "beta.1")
    with pytest.raises(UnsupportedPrereleaseError, match="1.2.3-beta.1"):
        build_android_version_code("1.2.3-beta.1")


def test_empty_prerelease_counts_as_absent():
    assert encode_version_code(1, 0, 0, "") == 1_000_000
    assert encode_version_code(1, 0, 0, None) == 1_000_000


@pytest.mark.parametrize(
    "major, minor, patch, component",
    [
        (2148, 0, 0, "major"),
        (2147, 1000, 0, "minor"),
        (2147, 0, 1000, "patch"),
        (1, 999, 1000, "patch"),
    ],
)
def test_range_errors_name_the_component(major, minor, patch, component):
    with pytest.raises(RangeExceededError) as excinfo:
        encode_version_code(major, minor, patch)
    assert excinfo.value.component == component


def test_major_is_reported_before_minor_and_patch():
    with pytest.raises(RangeExceededError) as excinfo:
        encode_version_code(3000, 5000, 5000)
    assert excinfo.value.component == "major"
    assert excinfo.value.limit == 2147

    with pytest.raises(RangeExceededError) as excinfo:
        encode_version_code(1, 5000, 5000)
    assert excinfo.value.component == "minor"


def test_prerelease_is_reported_before_ranges():
    with pytest.raises(UnsupportedPrereleaseError):
        encode_version_code(9999, 0, 0, "rc.1")


def test_negative_components_are_rejected():
    with pytest.raises(ValueError):
        encode_version_code(1, -1, 0)


def test_code_above_int32_logs_a_warning(caplog):
    caplog.set_level(logging.WARNING, logger="cap_sync_version")

    assert encode_version_code(2147, 999, 999) == 2_147_999_999
    assert "2147999999" in caplog.text


def test_invalid_version_string():
    with pytest.raises(InvalidVersionError):
        build_android_version_code("1.2")
