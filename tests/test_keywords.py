import pytest
from hypothesis import given, strategies as st

from keyscript.errors import (
    KeyScriptArityError,
    KeyScriptTypeError,
    KeyScriptUnboundKeyword,
    KeyScriptZeroDivision,
)
from keyscript.evaluation.keywords import KEYWORDS
from keyscript.interpreter import Interpreter


def ref(name):
    return {name: None}


def value_of(itp, expr):
    return itp.run([expr])[0]


# -----------------------------------------------------
# Binding
# -----------------------------------------------------

def test_let_then_print(itp, capsys):
    itp.run([{"LET": ["x", 5]}, {"PRINT": ref("x")}])
    assert capsys.readouterr().out == "5\n"


def test_let_without_value_binds_none(itp):
    assert itp.run([{"LET": "x"}, ref("x")]) == [None, None]


def test_shadowing_restores_outer_value(itp, capsys):
    itp.run([
        {"LET": ["x", 1]},
        [{"LET": ["x", 2]}, {"PRINT": ref("x")}],
        {"PRINT": ref("x")},
    ])
    assert capsys.readouterr().out == "2\n1\n"


def test_set_mutates_owning_frame(itp):
    result = itp.run([
        {"LET": ["x", 1]},
        [{"SET": ["x", 2]}],
        ref("x"),
    ])
    assert result == [None, [None], 2]


def test_set_creates_binding_in_current_scope(itp, capsys):
    result = itp.run([
        [{"SET": ["y", 7]}, ref("y")],
        ref("y"),
    ])
    assert result == [[None, 7], "y"]
    assert "keyword not found: 'y'" in capsys.readouterr().err


def test_set_requires_name_and_value(itp):
    with pytest.raises(KeyScriptArityError):
        itp.run([{"SET": ["x"]}])


def test_inc(itp):
    assert itp.run([{"LET": ["n", 41]}, {"INC": "n"}, ref("n")]) == [None, None, 42]


def test_inc_unbound_is_fatal(itp):
    with pytest.raises(KeyScriptUnboundKeyword):
        itp.run([{"INC": "nope"}])


def test_inc_non_number(itp):
    with pytest.raises(KeyScriptTypeError):
        itp.run([{"LET": ["s", "text"]}, {"INC": "s"}])


def test_builtins_can_be_shadowed(itp):
    assert itp.run([{"LET": ["ADD", "shadowed"]}, {"ADD": [1, 2]}]) == [None, "shadowed"]
    assert itp.run([{"ADD": [1, 2]}]) == [3]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        KEYWORDS["LET"] = None


# -----------------------------------------------------
# Arithmetic, relational, logic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "keyword,a,b,expected",
    [
        ("ADD", 2, 3, 5),
        ("ADD", 1, 2.5, 3.5),
        ("ADD", "ab", "cd", "abcd"),
        ("SUB", 2, 3, -1),
        ("MUL", 6, 7, 42),
        ("DIV", 7, 2, 3.5),
        ("DIV", 12, 3, 4),
        ("MOD", 7, 3, 1),
        ("MOD", -7, 3, 2),
        ("==", 1, 1, True),
        ("==", 1, 1.0, True),
        ("==", "1", 1, False),
        ("==", True, 1, False),
        ("==", "a", "a", True),
        ("<>", 1, 2, True),
        ("<>", "x", "x", False),
        (">", 3, 2, True),
        ("<", 3, 2, False),
        (">=", 2, 2, True),
        ("<=", 3, 2, False),
        ("<", "a", "b", True),
        ("AND", True, 0, 0),
        ("AND", 1, "x", "x"),
        ("OR", 0, "x", "x"),
        ("OR", None, False, False),
    ],
)
def test_binary_keywords(itp, keyword, a, b, expected):
    assert value_of(itp, {keyword: [a, b]}) == expected


@pytest.mark.parametrize("keyword", ["DIV", "MOD"])
def test_division_by_zero(itp, keyword):
    with pytest.raises(KeyScriptZeroDivision):
        itp.run([{keyword: [1, 0]}])


@pytest.mark.parametrize("expr", [
    {"ADD": ["a", 1]},
    {"SUB": ["a", 1]},
    {"MUL": [None, 2]},
    {"DIV": ["a", 2]},
    {"<": ["a", 1]},
    {">=": [None, 1]},
])
def test_operand_type_errors(itp, expr):
    with pytest.raises(KeyScriptTypeError):
        itp.run([expr])


@pytest.mark.parametrize("expr", [{"ADD": 1}, {"==": [1, 2, 3]}, {"AND": None}])
def test_binary_arity(itp, expr):
    with pytest.raises(KeyScriptArityError):
        itp.run([expr])


def test_nested_arithmetic(itp):
    assert value_of(itp, {"ADD": [1, {"MUL": [2, {"SUB": [10, 6]}]}]}) == 9


@given(
    st.sampled_from(["ADD", "SUB", "MUL", "==", "<>", ">", "<", ">=", "<=", "AND", "OR"]),
    st.integers(),
    st.integers(),
)
def test_operators_are_pure(keyword, a, b):
    itp = Interpreter(plugins=None)
    before = [(f.name, f.value) for f in itp.stack]
    first = itp.run([{keyword: [a, b]}])
    second = itp.run([{keyword: [a, b]}])
    assert first == second
    assert [(f.name, f.value) for f in itp.stack] == before


# -----------------------------------------------------
# PRINT
# -----------------------------------------------------

def test_print_concatenates_and_skips_none(itp, capsys):
    assert value_of(itp, {"PRINT": ["a", None, 1, True, False]}) is None
    assert capsys.readouterr().out == "a1truefalse\n"


def test_print_nothing_writes_empty_line(itp, capsys):
    itp.run([{"PRINT": None}])
    assert capsys.readouterr().out == "\n"
