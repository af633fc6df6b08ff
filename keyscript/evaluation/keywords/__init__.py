"""Registry of the core keywords.

Maps keyword names to native implementations. `register` installs them as
the bottom frames of a binding stack, where user and plugin bindings can
shadow them like any other name.
"""

from types import MappingProxyType

from keyscript.types.binding_stack import BindingStack
from keyscript.types.frame import Frame
from keyscript.evaluation.keywords.binding_forms import let_keyword, set_keyword, inc_keyword
from keyscript.evaluation.keywords.function_forms import function_keyword, return_keyword
from keyscript.evaluation.keywords.operators import (
    add, sub, mul, div, mod,
    equals, not_equals, gt, lt, gte, lte,
    logical_and, logical_or,
)
from keyscript.evaluation.keywords.print_form import print_keyword
from keyscript.evaluation.keywords.loop_forms import for_keyword, while_keyword
from keyscript.evaluation.keywords.if_form import if_keyword
from keyscript.evaluation.keywords.import_form import import_keyword

KEYWORDS = MappingProxyType({
    "LET": let_keyword,
    "FUNCTION": function_keyword,
    "RETURN": return_keyword,
    "SET": set_keyword,
    "INC": inc_keyword,
    "ADD": add,
    "SUB": sub,
    "MUL": mul,
    "DIV": div,
    "MOD": mod,
    "==": equals,
    "<>": not_equals,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "AND": logical_and,
    "OR": logical_or,
    "PRINT": print_keyword,
    "FOR": for_keyword,
    "IF": if_keyword,
    "WHILE": while_keyword,
    "IMPORT": import_keyword,
})


def register(stack: BindingStack) -> None:
    """Push one frame per core keyword onto `stack`."""
    for name, fn in KEYWORDS.items():
        stack.push(Frame(name, fn))
