"""
Native-facing entry module.

Importing it registers the autograd function types under `_functions`,
publishes the reverse registry as `_function_types` and installs the
interpreter factory bindings. A failed registration aborts the import.
"""

import sys

from .autograd import Function
from .bindings import DEFAULT_CONFIG, FunctionObject, init_closure_bindings, init_functions


def wrap_function(node: Function | None) -> FunctionObject | None:
    """Wrap any graph node in its registered Python type."""
    return getattr(sys.modules[__name__], DEFAULT_CONFIG.registry_attr).wrap(node)


if not init_functions(DEFAULT_CONFIG):
    raise ImportError(f"Failed to initialize {DEFAULT_CONFIG.namespace_name}")

init_closure_bindings(
    sys.modules[__name__],
    getattr(sys.modules[__name__], DEFAULT_CONFIG.registry_attr),
)
