from __future__ import annotations

import logging
import types

from ..jit import InterpreterFunctionFactory, TracingState
from .python_function import FunctionObject
from .registry import FunctionTypeRegistry

logger = logging.getLogger("bindings.closure")


class InterpreterFunctionFactoryBinding:
    """Python handle on an `InterpreterFunctionFactory`; calling it constructs a node."""

    __slots__ = ("_factory", "_registry")

    def __init__(self, factory: InterpreterFunctionFactory, registry: FunctionTypeRegistry):
        self._factory = factory
        self._registry = registry

    @property
    def tracing_state(self) -> TracingState:
        return self._factory.tracing_state

    def __call__(self, *args, **kwargs) -> FunctionObject:
        return self._registry.wrap(self._factory.construct(*args, **kwargs))


def init_closure_bindings(module: types.ModuleType, registry: FunctionTypeRegistry) -> None:
    """Expose the interpreter function factory on `module`."""

    def _jit_create_interpreter_factory(tracing_state: TracingState) -> InterpreterFunctionFactoryBinding:
        return InterpreterFunctionFactoryBinding(InterpreterFunctionFactory(tracing_state), registry)

    module.InterpreterFunctionFactory = InterpreterFunctionFactoryBinding
    module._jit_create_interpreter_factory = _jit_create_interpreter_factory
    module._jit_createInterpreterFactory = _jit_create_interpreter_factory
    logger.debug(f"Closure bindings installed on {module.__name__}")
