import pytest

from jvmtools.versions import is_before_java9, is_before_java17, is_before_java18


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [("8.0.0", True), ("9.0.0", False), ("11.0.0", False), ("", False)],
)
def test_is_before_java9(candidate, expected):
    assert is_before_java9(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [("17.0.0", True), ("18.0.0", False), ("19.0.0", False), ("", False)],
)
def test_is_before_java18(candidate, expected):
    assert is_before_java18(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [("16.0.0", True), ("17.0.0", False), ("18.0.0", False), ("", False)],
)
def test_is_before_java17(candidate, expected):
    assert is_before_java17(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("1.8.0", True),
        ("8", True),
        ("9", False),
        ("v8.0.1", True),
        ("9.0.0-ea", True),
        ("9.0.0+build", False),
        ("not-a-version", False),
    ],
)
def test_is_before_java9_loose_forms(candidate, expected):
    assert is_before_java9(candidate) is expected