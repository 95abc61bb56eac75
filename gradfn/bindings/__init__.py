from .closure import InterpreterFunctionFactoryBinding, init_closure_bindings
from .config import DEFAULT_CONFIG, BindingConfig
from .descriptors import AttributeDescriptor, FieldKind, attribute_table
from .errors import (
    ArgumentCountError,
    ArgumentError,
    ArgumentTypeError,
    AttributeConversionError,
    BindingError,
    ConstructionNotSupportedError,
    RegistrationError,
)
from .functions import (
    FUNCTION_CLASSES,
    GENERATED_FUNCTION_CLASSES,
    ClassDescriptor,
    FunctionTypeTable,
    build_function_types,
    init_functions,
)
from .python_function import FunctionObject, create_function_type
from .registry import FunctionTypeRegistry, RegistryBuilder
from .schema import NO_CONSTRUCTOR, ArgumentSchema, Constructor, constructor

__all__ = [
    "ArgumentCountError",
    "ArgumentError",
    "ArgumentSchema",
    "ArgumentTypeError",
    "AttributeConversionError",
    "AttributeDescriptor",
    "BindingConfig",
    "BindingError",
    "ClassDescriptor",
    "ConstructionNotSupportedError",
    "Constructor",
    "DEFAULT_CONFIG",
    "FUNCTION_CLASSES",
    "FieldKind",
    "FunctionObject",
    "FunctionTypeRegistry",
    "FunctionTypeTable",
    "GENERATED_FUNCTION_CLASSES",
    "InterpreterFunctionFactoryBinding",
    "NO_CONSTRUCTOR",
    "RegistrationError",
    "RegistryBuilder",
    "attribute_table",
    "build_function_types",
    "constructor",
    "create_function_type",
    "init_closure_bindings",
    "init_functions",
]
