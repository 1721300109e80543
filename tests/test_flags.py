import pytest

from cmdparse.exceptions import InvalidDefinitionError
from cmdparse.flags import OptionFlag


@pytest.mark.parametrize(
    "value,expected",
    [
        ("unique", OptionFlag.UNIQUE),
        ("HIDDEN", OptionFlag.HIDDEN),
        ("arg", OptionFlag.TAKES_ARG),
        ("mandatory", OptionFlag.TAKES_ARG),
        ("optional", OptionFlag.TAKES_OPTIONAL_ARG),
        ("takes-optional-arg", OptionFlag.TAKES_OPTIONAL_ARG),
        ("defaults", OptionFlag.DEFAULTS),
        (None, OptionFlag.DEFAULTS),
        (0, OptionFlag.DEFAULTS),
        (5, OptionFlag.UNIQUE | OptionFlag.TAKES_ARG),
    ],
)
def test_coerce(value, expected):
    assert OptionFlag.coerce(value) == expected


def test_coerce_iterable():
    flags = OptionFlag.coerce(["arg", "unique", OptionFlag.HIDDEN])
    assert flags == OptionFlag.TAKES_ARG | OptionFlag.UNIQUE | OptionFlag.HIDDEN


def test_coerce_invalid_name():
    with pytest.raises(InvalidDefinitionError):
        OptionFlag.coerce("sometimes")


def test_coerce_invalid_bits():
    with pytest.raises(InvalidDefinitionError):
        OptionFlag.coerce(1 << 10)


def test_coerce_rejects_bool():
    with pytest.raises(InvalidDefinitionError):
        OptionFlag.coerce(True)


def test_mandatory_and_optional_are_exclusive():
    with pytest.raises(InvalidDefinitionError):
        OptionFlag.coerce(OptionFlag.TAKES_ARG | OptionFlag.TAKES_OPTIONAL_ARG)
