import pytest

from minipyth.types.value import UNIMPLEMENTED, ErrorValue


@pytest.mark.parametrize(
    "program,value,expected",
    [
        ("ih", 5, 4),
        ("ih", (1, 2, 3), 3),
        ("it", (1, 2, 3), (1, 2)),
        ("in", (1, 2), (2, 1)),
        ("il", (1, 1, 0, 1), 13),
        ("ip", 97, 1),
        ("ip", 91, 0),
        ("ip", (17, 5), (3, 2)),
        ("is", 4, (4,)),
        ("ie", (1, 1), ErrorValue(UNIMPLEMENTED, "inverse equal", (1, 1))),
        ("iy", 3, ErrorValue(UNIMPLEMENTED, "inverse power-set", 3)),
    ],
)
def test_inverse_of_basic_functions(interp, program, value, expected):
    assert interp.eval(program, value) == expected


def test_inverse_of_composite_runs_left_to_right(interp):
    # inverse(product . sum): inverse product first, then inverse sum
    assert interp.eval("iqpsq", (7, 2)) == ((3, 1),)
    # inverse(sum . product): wrapping first leaves nothing to divide
    assert interp.eval("iqspq", (7, 2)) == ErrorValue(UNIMPLEMENTED, "inverse product", ((7, 2),))


def test_inverse_of_identity(interp):
    assert interp.eval("iz", (4, 5)) == (4, 5)


def test_double_inverse_is_the_function(interp):
    assert interp.eval("iih", 5) == 6
    assert interp.eval("iih", (7, 8)) == 7


@pytest.mark.parametrize(
    "program,value,expected",
    [
        ("imh", (5, 6), (4, 5)),
        ("imh", ((1, 2), (3, 4)), (2, 4)),
        ("ibht", 5, (4, 6)),
        ("irh", (2, 5), (5, 4, 3)),
        ("ifh", (1, 0, 2), (0, 2)),
        ("ixn", 3, (3, -3, 3)),
    ],
)
def test_inverse_of_higher_order_functions(interp, program, value, expected):
    assert interp.eval(program, value) == expected


def test_inverse_of_order_undoes_the_sort_permutation(interp):
    # order would move (20, 30, 10) to (10, 20, 30)
    assert interp.eval("ioz", (20, 30, 10)) == (30, 10, 20)
    assert interp.eval("ioz", (1, 2, 3)) == (1, 2, 3)


def test_inverse_propagates_errors(interp):
    err = ErrorValue("empty", "head", ())
    assert interp.eval("ih", err) == err
