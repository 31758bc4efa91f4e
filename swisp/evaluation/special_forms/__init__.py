"""Registry of special forms for the Swisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application.

Every handler has the signature ``handler(tail, env, evaluate_fn)`` where
`tail` is the form without its head symbol and `evaluate_fn` runs a
sub-expression to completion. A handler returns either a value or a TailCall
for expressions in tail position.
"""

from swisp.types.symbol import Symbol
from swisp.evaluation.special_forms.quote_form import quote_form
from swisp.evaluation.special_forms.if_form import if_form
from swisp.evaluation.special_forms.define_form import define_form
from swisp.evaluation.special_forms.set_form import set_form
from swisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
}
