from typing import Any


class KeyScriptError(Exception):
    """ Base class for all keyscript errors"""
    pass

class KeyScriptSyntaxError(KeyScriptError):
    """ Raised when an expression node is malformed"""

class KeyScriptUnboundKeyword(KeyScriptError):
    """ Raised when a keyword must already be bound but is not"""

class KeyScriptArityError(KeyScriptError):
    """ Raised when the number of arguments passed to a keyword is incorrect"""

class KeyScriptTypeError(KeyScriptError):
    """ Raised when the types of arguments passed to a keyword are incorrect"""

class KeyScriptZeroDivision(KeyScriptError, ZeroDivisionError):
    """ Raised when DIV or MOD is asked to divide by zero"""

class KeyScriptPluginError(KeyScriptError):
    """ Raised when a plugin cannot be located, imported or installed"""


class ReturnOutsideFunction(KeyScriptError):
    """RETURN was signalled with no enclosing function invocation to catch it."""

    def __init__(self, value: Any):
        super().__init__(f"RETURN outside of a function (value={value!r})")
        self.value: Any = value
