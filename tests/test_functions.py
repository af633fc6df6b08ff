import pytest

from keyscript.errors import KeyScriptArityError, KeyScriptTypeError, ReturnOutsideFunction
from keyscript.evaluation.keywords.binding_forms import let_keyword
from keyscript.types.function import Function
from keyscript.types.native import native


def ref(name):
    return {name: None}


def define(name, params, body):
    return {"FUNCTION": [name, *params], "script": body}


def test_double(itp):
    result = itp.run([
        define("double", ["n"], [{"RETURN": {"MUL": [ref("n"), 2]}}]),
        {"double": 21},
    ])
    assert result == [None, 42]


def test_function_value_is_bound(itp):
    body = [{"PRINT": "hi"}]
    mark = len(itp.stack)
    itp.evaluator.evaluate(define("f", ["a", "b"], body))
    fn = itp.stack.lookup("f")
    assert isinstance(fn, Function)
    assert fn.params == ["a", "b"]
    assert fn.body is body
    itp.stack.truncate(mark)


def test_fall_through_yields_none(itp):
    result = itp.run([
        define("f", [], [{"ADD": [1, 2]}]),
        {"f": []},
    ])
    assert result == [None, None]


def test_return_skips_remaining_statements(itp, capsys):
    result = itp.run([
        define("f", [], [
            {"PRINT": "before"},
            {"RETURN": "done"},
            {"PRINT": "after"},
        ]),
        {"f": []},
    ])
    assert result[1] == "done"
    assert capsys.readouterr().out == "before\n"


def test_return_from_inside_loop_and_if(itp, capsys):
    before = len(itp.stack)
    result = itp.run([
        define("first_square_over", ["limit"], [
            {"FOR": ["i", 1, 100, None], "script": [
                {"IF": {">": [{"MUL": [ref("i"), ref("i")]}, ref("limit")]},
                 "script": [[{"RETURN": ref("i")}]]},
            ]},
            {"PRINT": "unreachable"},
        ]),
        {"first_square_over": 50},
    ])
    assert result[1] == 8
    assert capsys.readouterr().out == ""
    assert len(itp.stack) == before


def test_return_from_inside_while(itp):
    result = itp.run([
        define("countdown", ["n"], [
            {"WHILE": None, "script": [[True], [
                {"IF": {"<=": [ref("n"), 0]}, "script": [[{"RETURN": "liftoff"}]]},
                {"SET": ["n", {"SUB": [ref("n"), 1]}]},
            ]]},
        ]),
        {"countdown": 3},
    ])
    assert result[1] == "liftoff"


def test_return_in_argument_position(itp, capsys):
    result = itp.run([
        define("f", [], [{"PRINT": {"RETURN": 5}}]),
        {"f": []},
    ])
    assert result[1] == 5
    assert capsys.readouterr().out == ""


def test_recursion(itp):
    result = itp.run([
        define("fact", ["n"], [
            {"IF": {"<=": [ref("n"), 1]}, "script": [[{"RETURN": 1}]]},
            {"RETURN": {"MUL": [ref("n"), {"fact": {"SUB": [ref("n"), 1]}}]}},
        ]),
        {"fact": 5},
        {"fact": 1},
    ])
    assert result[1:] == [120, 1]


def test_parameters_are_local(itp):
    result = itp.run([
        {"LET": ["n", "outer"]},
        define("f", ["n"], [{"RETURN": ref("n")}]),
        {"f": "inner"},
        ref("n"),
    ])
    assert result[2:] == ["inner", "outer"]


def test_missing_arguments_bind_none(itp):
    result = itp.run([
        define("pair", ["a", "b"], [{"RETURN": [[ref("a"), ref("b")]]}]),
        {"pair": 1},
        {"pair": [1, 2, 3]},
    ])
    assert result[1:] == [[1, None], [1, 2]]


def test_function_sees_caller_bindings(itp):
    # Name resolution is dynamic: the body sees whatever is on the stack.
    result = itp.run([
        define("get_x", [], [{"RETURN": ref("x")}]),
        {"LET": ["x", 9]},
        {"get_x": []},
    ])
    assert result[2] == 9


def test_function_call_restores_stack(itp):
    before = len(itp.stack)
    fn = Function("g", ["a"], [{"LET": ["b", 1]}, {"RETURN": ref("a")}])
    assert fn(itp.evaluator, [3]) == 3
    assert len(itp.stack) == before


def test_single_expression_body(itp):
    fn = Function("g", ["a"], {"RETURN": {"ADD": [ref("a"), 1]}})
    assert fn(itp.evaluator, [1]) == 2


def test_function_requires_body(itp):
    with pytest.raises(KeyScriptArityError):
        itp.run([{"FUNCTION": "f"}])


def test_parameter_names_must_be_strings(itp):
    with pytest.raises(KeyScriptTypeError):
        itp.run([{"FUNCTION": ["f", 1], "script": []}])


def test_return_outside_function_is_fatal(itp, capsys):
    before = len(itp.stack)
    with pytest.raises(ReturnOutsideFunction) as info:
        itp.run([{"LET": ["x", 1]}, {"RETURN": 3}, {"PRINT": "never"}])
    assert info.value.value == 3
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "RETURN outside of a function" in captured.err
    assert len(itp.stack) == before


def test_return_outside_function_through_loop(itp):
    with pytest.raises(ReturnOutsideFunction):
        itp.run([{"FOR": ["i", 1, 3], "script": [{"RETURN": ref("i")}]}])


def test_parameters_are_bound_through_let_in_scope(itp):
    seen = []

    @native
    def traced_let(evaluator, args):
        seen.append(list(args))
        return let_keyword(evaluator, args)

    itp.import_plugin({"LET": traced_let})
    result = itp.run([
        define("f", ["a", "b"], [{"RETURN": {"ADD": [ref("a"), 10]}}]),
        {"f": 1},
    ])
    assert result == [None, 11]
    assert seen == [["a", 1], ["b", None]]
