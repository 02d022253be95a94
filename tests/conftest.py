import pytest

from guci.builtin.env_builtin import register
from guci.evaluation.special_forms.quit_form import TerminationFlag
from guci.types.context import EvaluationContext


@pytest.fixture
def flag():
    return TerminationFlag()


@pytest.fixture
def ctx(flag):
    """Fresh global context with builtins loaded."""
    c = EvaluationContext()
    register(c, flag)
    return c
