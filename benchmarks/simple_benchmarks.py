import copy
import io
import math
from timeit import timeit

from keyscript.diagnostics import Console
from keyscript.interpreter import Interpreter
from keyscript.types.binding_stack import BindingStack
from keyscript.types.frame import Frame


def ref(name):
    return {name: None}


def time_script(script: list, rounds: int, plugins=None) -> float:
    """Time Interpreter.run on fresh copies of `script` (run evaluates in place)."""
    itp = Interpreter(console=Console(out=io.StringIO()), plugins=None)
    if plugins:
        itp.import_plugin(plugins)
    # Warmup
    itp.run(copy.deepcopy(script))
    copies = [copy.deepcopy(script) for _ in range(rounds)]
    it = iter(copies)
    return timeit(lambda: itp.run(next(it)), number=rounds)


# Pure binding-stack benchmark: lookup distance from the top

def bench_deep_lookup(depth: int = 1000, n_lookups: int = 10000) -> float:
    stack = BindingStack()
    stack.push(Frame("answer", 42))
    for i in range(depth):
        stack.push(Frame(f"filler{i}", i))
    # Warmup
    for _ in range(1000):
        stack.find("answer")
    return timeit(lambda: stack.find("answer"), number=n_lookups)


FACTORIAL_SCRIPT = [
    {"FUNCTION": ["fact", "n"], "script": [
        {"IF": {"<=": [ref("n"), 1]}, "script": [[{"RETURN": 1}]]},
        {"RETURN": {"MUL": [ref("n"), {"fact": {"SUB": [ref("n"), 1]}}]}},
    ]},
    {"fact": 50},
]

# Sum 1..N with a FOR loop mutating an outer binding
FOR_SUM_SCRIPT = [
    {"LET": ["total", 0]},
    {"FOR": ["i", 1, 500], "script": [
        {"SET": ["total", {"ADD": [ref("total"), ref("i")]}]},
    ]},
]

# Host interop: math.sqrt installed as a plugin keyword
SQRT_SCRIPT = [
    {"LET": ["acc", 0]},
    {"FOR": ["i", 1, 200], "script": [
        {"SET": ["acc", {"ADD": [ref("acc"), {"SQRT": ref("i")}]}]},
    ]},
]


def _print_one(name: str, script: list, rounds: int, plugins=None) -> None:
    t = time_script(script, rounds, plugins)
    print(f"Benchmark: {name}")
    print(f"  time: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: binding stack lookup 1000 frames deep")
    print(f"  time: {bench_deep_lookup():.6f}s")

    _print_one("recursion (factorial 50)", FACTORIAL_SCRIPT, rounds=200)
    _print_one("FOR loop sum 1..500", FOR_SUM_SCRIPT, rounds=200)
    _print_one("plugin interop: math.sqrt loop", SQRT_SCRIPT, rounds=200, plugins={"SQRT": math.sqrt})
