import pytest

from minipyth.builtin.basic_builtin import BASIC_FUNCTIONS, apply_basic, invert_basic
from minipyth.types.value import DOMAIN, EMPTY, UNIMPLEMENTED, ErrorValue, make_error


@pytest.mark.parametrize(
    "op,value,expected",
    [
        # head
        ("h", 4, 5),
        ("h", -1, 0),
        ("h", (7, 8), 7),
        ("h", (), ErrorValue(EMPTY, "head", ())),
        # tail
        ("t", 4, 3),
        ("t", (7, 8, 9), (8, 9)),
        ("t", (), ()),
        # sum
        ("s", 0, 1),
        ("s", 5, 0),
        ("s", -3, 0),
        ("s", (1, 2, 3), 6),
        ("s", (), 0),
        ("s", ((1, 2), (3,), 4), (1, 2, 3, 4)),
        ("s", (((1,),), ()), ((1,),)),
        # product
        ("p", 12, (2, 2, 3)),
        ("p", 1, ()),
        ("p", (2, 3, 4), 24),
        ("p", (), 1),
        ("p", ((1, 2), (3, 4)), ((1, 3), (1, 4), (2, 3), (2, 4))),
        ("p", ((1, 2), 2), ((1, 0), (1, 1), (2, 0), (2, 1))),
        ("p", ((1,), make_error(EMPTY)), make_error(EMPTY)),
        # power-set
        ("y", 10, 1024),
        ("y", 0, 1),
        ("y", -1, ErrorValue(DOMAIN, "power-set", -1)),
        ("y", (1, 2), ((), (1,), (2,), (1, 2))),
        ("y", (), ((),)),
        # length
        ("l", (4, 5, 6), 3),
        ("l", (), 0),
        ("l", 6, (1, 1, 0)),
        ("l", 0, (0,)),
        ("l", -5, (1, 0, 1)),
        # negate
        ("n", 3, -3),
        ("n", (1, 2, 3), (3, 2, 1)),
        # equal
        ("e", (2, 2, 2), 1),
        ("e", (1, 2), 0),
        ("e", (), 1),
        ("e", ((1,), (1,)), 1),
        ("e", 5, ErrorValue(UNIMPLEMENTED, "equal", 5)),
        # combine
        ("c", ((1, 2, 3), (4, 5)), ((1, 4), (2, 5), (3,))),
        ("c", (7, (1, 2)), ((7, 1), (2,))),
        ("c", (), ()),
        ("c", ((1,), make_error(DOMAIN)), make_error(DOMAIN)),
        ("c", 3, ErrorValue(UNIMPLEMENTED, "combine", 3)),
        # all-pairs
        ("a", 3, ((3, 0), (3, 1), (3, 2))),
        ("a", (1, 2), (((1, 2), 1), ((1, 2), 2))),
        ("a", (1, (5, 6)), ((1, 5), (1, 6))),
        ("a", (1, (5,), (6,)), (((1, 5),), ((1, 6),))),
        ("a", ((5, 6), 1), ((5, 1), (6, 1))),
        ("a", ((5, 6), 1, 2), (((5, 1), (6, 1)), ((0, 1), (1, 1)))),
        ("a", (1, make_error(EMPTY)), make_error(EMPTY)),
        # deduplicate
        ("d", (1, 2, 1, (1,), (1,), 3), (1, 2, (1,), 3)),
        ("d", (), ()),
        ("d", 4, ErrorValue(UNIMPLEMENTED, "deduplicate", 4)),
    ],
)
def test_basic_dispatch(op, value, expected):
    assert apply_basic(op, value) == expected


@pytest.mark.parametrize("op", sorted(BASIC_FUNCTIONS))
def test_basic_functions_pass_errors_through(op):
    err = make_error(EMPTY, "head", ())
    assert apply_basic(op, err) is err


def test_power_set_of_large_integer_does_not_overflow():
    assert apply_basic("y", apply_basic("y", 7)) == 2**128


def test_lists_are_not_mutated():
    value = (3, 1, 2)
    apply_basic("n", value)
    apply_basic("t", value)
    assert value == (3, 1, 2)


@pytest.mark.parametrize(
    "op,value,expected",
    [
        ("h", 5, 4),
        ("h", (1, 2, 3), 3),
        ("h", (), ErrorValue(EMPTY, "inverse head", ())),
        ("t", 5, 6),
        ("t", (1, 2, 3), (1, 2)),
        ("t", (), ()),
        ("s", 5, (5,)),
        ("s", (1,), ((1,),)),
        ("p", 7, 1),
        ("p", 9, 0),
        ("p", 1, 0),
        ("p", 2, 1),
        ("p", (7, 2), (3, 1)),
        ("p", (-7, 2), (-3, -1)),
        ("p", (1, 0), ErrorValue(DOMAIN, "inverse product", (1, 0))),
        ("p", (1, 2, 3), ErrorValue(UNIMPLEMENTED, "inverse product", (1, 2, 3))),
        ("l", (1, 0, 1), 5),
        ("l", (), 0),
        ("l", ((1,),), ErrorValue(UNIMPLEMENTED, "inverse length", ((1,),))),
        ("l", 5, ErrorValue(UNIMPLEMENTED, "inverse length", 5)),
        ("n", 4, -4),
        ("n", (1, 2), (2, 1)),
    ],
)
def test_basic_inverse_dispatch(op, value, expected):
    assert invert_basic(op, value) == expected


@pytest.mark.parametrize("op,name", [("e", "equal"), ("c", "combine"), ("a", "all-pairs"), ("y", "power-set"), ("d", "deduplicate")])
def test_missing_inverses_are_unimplemented(op, name):
    assert invert_basic(op, (1, 1), name) == ErrorValue(UNIMPLEMENTED, f"inverse {name}", (1, 1))


def test_inverse_passes_errors_through():
    err = make_error(DOMAIN)
    assert invert_basic("h", err) is err
    assert invert_basic("e", err) is err
