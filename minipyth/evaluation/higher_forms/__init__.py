"""Registry of higher-order forms for the Minipyth evaluator.

Maps opcodes to handlers that receive their (unevaluated) function arguments,
the input value and the evaluator. INVERSE_FORMS holds the forms whose
inverse is not simply the form applied to inverted arguments.
"""

from minipyth.evaluation.higher_forms.list_forms import map_form, filter_form, order_form, order_inverse_form
from minipyth.evaluation.higher_forms.inverse_form import inverse_form, inverse_inverse_form
from minipyth.evaluation.higher_forms.bifurcate_form import bifurcate_form
from minipyth.evaluation.higher_forms.loop_forms import repeat_form, while_form, fixed_point_form

HIGHER_FORMS = {
    "b": bifurcate_form,
    "f": filter_form,
    "i": inverse_form,
    "m": map_form,
    "o": order_form,
    "r": repeat_form,
    "w": while_form,
    "x": fixed_point_form,
}

INVERSE_FORMS = {
    "i": inverse_inverse_form,
    "o": order_inverse_form,
}
