import sys
import types

import numpy as np
import pytest

import gradfn
from gradfn.types import Tensor, Variable


@pytest.fixture
def functions():
    return gradfn._C._functions


@pytest.fixture
def registry():
    return gradfn._C._function_types


@pytest.fixture
def running_stats():
    return (
        Tensor(np.zeros(4), name="running_mean"),
        Tensor(np.ones(4), name="running_var"),
    )


@pytest.fixture
def weight():
    return Variable(np.arange(3.0), name="weight")


@pytest.fixture
def parent_module(monkeypatch):
    module = types.ModuleType("fake_parent")
    monkeypatch.setitem(sys.modules, "fake_parent", module)
    return module
