class BindingError(Exception):
    """Base exception for function-type binding errors."""

    pass


class ArgumentError(BindingError, TypeError):
    """Raised when a constructor receives arguments it cannot accept."""

    pass


class ArgumentCountError(ArgumentError):
    """Raised when a constructor receives the wrong number of arguments."""

    pass


class ArgumentTypeError(ArgumentError):
    """Raised when a constructor argument has the wrong type."""

    pass


class ConstructionNotSupportedError(BindingError, RuntimeError):
    """Raised when a type that is only produced by the graph is instantiated directly."""

    pass


class AttributeConversionError(BindingError, RuntimeError):
    """Raised when a node field cannot be read or converted to a Python value."""

    pass


class RegistrationError(BindingError):
    """Raised when a function type cannot be registered."""

    pass
