from .interpreter import InterpreterAutogradFunction, InterpreterFunctionFactory
from .tracer import TracingState

__all__ = ["InterpreterAutogradFunction", "InterpreterFunctionFactory", "TracingState"]
