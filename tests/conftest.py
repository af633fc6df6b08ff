import pytest

from keyscript.interpreter import Interpreter

# Tests build interpreters with plugins=None so KEYSCRIPT_PLUGINS in a
# developer's environment cannot leak keywords into the vocabulary under test.
# Hypothesis tests construct their own interpreter instead of using this
# function-scoped fixture.


@pytest.fixture
def itp():
    return Interpreter(plugins=None)
