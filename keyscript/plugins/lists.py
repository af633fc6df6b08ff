"""List helpers installed as plain host functions.

This module has no KEYWORDS table, so every public function below becomes a
keyword under its own name. Pass a list value inside an argument script,
e.g. {"count": [{"xs": null}]}: a bare list value would be spread into
separate arguments.
"""


def items(*values):
    return list(values)


def count(xs):
    return len(xs)


def nth(xs, index):
    return xs[index]


def first(xs):
    return xs[0] if xs else None


def rest(xs):
    return list(xs[1:])


def append(xs, value):
    return [*xs, value]
