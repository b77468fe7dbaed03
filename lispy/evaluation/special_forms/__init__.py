"""Registry of special forms for the lispy evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so a
keyword here wins even when a variable of the same name is bound.
"""

from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.quote_form import quote_form
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
