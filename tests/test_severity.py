import pytest

from tfguard.severity import VALID_SEVERITY, Severity, string_to_severity


@pytest.mark.parametrize("severity", list(VALID_SEVERITY))
def test_string_round_trip_any_case(severity):
    assert string_to_severity(severity.value) is severity
    assert string_to_severity(severity.value.lower()) is severity
    assert string_to_severity(severity.value.title()) is severity


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ERROR", Severity.HIGH),
        ("warning", Severity.MEDIUM),
        ("Info", Severity.LOW),
        ("", Severity.NONE),
        ("bogus", Severity.NONE),
    ],
)
def test_aliases_and_unknowns(name, expected):
    assert string_to_severity(name) is expected


def test_is_valid():
    for severity in VALID_SEVERITY:
        assert severity.is_valid()
    assert not Severity.NONE.is_valid()


def test_valid_lists_all_but_none():
    listed = Severity.NONE.valid()
    assert listed == [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW]
    assert Severity.NONE not in listed


@pytest.mark.parametrize(
    "severity, ordinal",
    [
        (Severity.CRITICAL, 4),
        (Severity.HIGH, 3),
        (Severity.MEDIUM, 2),
        (Severity.LOW, 1),
        (Severity.NONE, 0),
    ],
)
def test_as_ordinal(severity, ordinal):
    assert severity.as_ordinal() == ordinal


def test_ordinals_descend_in_valid_order():
    names = ["critical", "high", "medium", "low"]
    ordinals = [string_to_severity(name).as_ordinal() for name in names]
    assert ordinals == [4, 3, 2, 1]
    assert ordinals == sorted(ordinals, reverse=True)
    assert len(set(ordinals)) == len(ordinals)