import pytest
from sift.predicate import Predicates


def is_positive(number):
    return number > 0


def is_even(number):
    return number % 2 == 0


@pytest.mark.parametrize(
    ["number", "both", "either"],
    [
        pytest.param(4, True, True, id="Positive and even"),
        pytest.param(3, False, True, id="Positive and odd"),
        pytest.param(-2, False, True, id="Negative and even"),
        pytest.param(-3, False, False, id="Negative and odd"),
    ],
)
def test_both_and_either(number, both, either):
    assert Predicates.both(is_positive, is_even)(number) == both
    assert Predicates.either(is_positive, is_even)(number) == either


def test_negate():
    assert Predicates.negate(is_positive)(-1)
    assert not Predicates.negate(is_positive)(1)


def test_always_and_never():
    assert Predicates.always("anything")
    assert not Predicates.never("anything")


def test_both_short_circuits():
    def explode(_):
        raise AssertionError("Should not be evaluated")

    assert not Predicates.both(is_positive, explode)(-1)
    assert Predicates.either(is_positive, explode)(1)
