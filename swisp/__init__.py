# Core type aliases for Swisp's data model.
# Expressions are plain Python values plus two small classes:
#
# - Number: decimal.Decimal
# - Symbol: swisp.types.symbol.Symbol
# - List:   list of Expression (the empty list is nil, the only false value)
# - Proc:   swisp.types.procedure.Procedure (Native or Lambda)
#
# Reader and evaluator code annotate with `Expression`; both source forms and
# runtime values share the representation.

from typing import Any, Callable

__version__ = "0.1.0"

Expression = Any

# Contract every native (host) procedure must satisfy.
NativeFn = Callable[[list], Expression]

# Evaluator function type passed to special forms.
EvaluatorFn = Callable[..., Expression]
