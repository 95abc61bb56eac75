"""
Registration of the autograd function types.

`init_functions` walks `FUNCTION_CLASSES` (and `GENERATED_FUNCTION_CLASSES`),
builds one Python type per native class, collects them into a namespace
module and publishes both the module and the frozen reverse registry on the
parent module.
"""

from __future__ import annotations

import importlib
import logging
import types
from collections.abc import Iterable
from dataclasses import dataclass

from ..autograd import Function, generated
from ..autograd.functions import (
    AccumulateGrad,
    Add,
    AddBackward_Deprecated,
    BatchNormBackward,
    BatchNormBackwardBackward,
    BatchNormForward,
    BatchNormParams,
    Cat,
    Clone,
    Contiguous,
    CopyBackwards,
    CopySlices,
    DelayedError,
    Error,
    Eval,
    Expand,
    Identity,
    Narrow,
    Transpose,
    View,
)
from ..jit import InterpreterAutogradFunction
from .config import DEFAULT_CONFIG, BindingConfig
from .descriptors import AttributeDescriptor, FieldKind, attribute_table
from .python_function import FunctionObject, create_function_type
from .registry import FunctionTypeRegistry, RegistryBuilder
from .schema import NO_CONSTRUCTOR, constructor

logger = logging.getLogger("bindings.functions")


@dataclass(frozen=True)
class ClassDescriptor:
    """Static description of one native class to expose."""

    name: str
    native_class: type[Function]
    constructor: object = NO_CONSTRUCTOR
    attributes: tuple[AttributeDescriptor, ...] = ()


# Shared by the forward, backward and double-backward batch norm nodes.
BATCH_NORM_ATTRIBUTES = attribute_table(
    ("running_mean", FieldKind.TENSOR),
    ("running_var", FieldKind.TENSOR),
    ("training", FieldKind.FLAG),
    ("momentum", FieldKind.SCALAR),
    ("eps", FieldKind.SCALAR),
    ("cudnn_enabled", FieldKind.FLAG),
    prefix="params",
)

SIZE_ATTRIBUTES = attribute_table(
    AttributeDescriptor("size", FieldKind.SEQUENCE, element=FieldKind.INTEGER),
)

ERROR_ATTRIBUTES = attribute_table(("msg", FieldKind.STRING))


@constructor(
    ("running_mean", FieldKind.TENSOR),
    ("running_var", FieldKind.TENSOR),
    ("training", FieldKind.FLAG),
    ("momentum", FieldKind.SCALAR),
    ("eps", FieldKind.SCALAR),
    ("cudnn_enabled", FieldKind.FLAG),
)
def batch_norm_ctor(**params) -> BatchNormForward:
    return BatchNormForward(BatchNormParams(**params))


@constructor(("msg", FieldKind.STRING))
def delayed_error_ctor(msg: str) -> DelayedError:
    return DelayedError(msg)


FUNCTION_CLASSES: tuple[ClassDescriptor, ...] = (
    ClassDescriptor("BatchNorm", BatchNormForward, batch_norm_ctor, BATCH_NORM_ATTRIBUTES),
    ClassDescriptor("BatchNormBackward", BatchNormBackward, attributes=BATCH_NORM_ATTRIBUTES),
    ClassDescriptor("BatchNormBackwardBackward", BatchNormBackwardBackward, attributes=BATCH_NORM_ATTRIBUTES),
    ClassDescriptor(
        "AccumulateGrad",
        AccumulateGrad,
        attributes=attribute_table(("variable", FieldKind.VARIABLE)),
    ),
    ClassDescriptor("Add", Add),
    ClassDescriptor("AddBackward_Deprecated", AddBackward_Deprecated),
    ClassDescriptor("Error", Error, attributes=ERROR_ATTRIBUTES),
    ClassDescriptor("DelayedError", DelayedError, delayed_error_ctor, ERROR_ATTRIBUTES),
    ClassDescriptor("Clone", Clone),
    ClassDescriptor("Contiguous", Contiguous),
    ClassDescriptor("Identity", Identity),
    ClassDescriptor(
        "Transpose",
        Transpose,
        attributes=attribute_table(("dim1", FieldKind.INTEGER), ("dim2", FieldKind.INTEGER)),
    ),
    ClassDescriptor("View", View, attributes=SIZE_ATTRIBUTES),
    ClassDescriptor("Expand", Expand, attributes=SIZE_ATTRIBUTES),
    ClassDescriptor(
        "Narrow",
        Narrow,
        attributes=attribute_table(
            ("dim", FieldKind.INTEGER),
            ("start", FieldKind.INTEGER),
            ("size", FieldKind.INTEGER),
        ),
    ),
    ClassDescriptor("Cat", Cat, attributes=attribute_table(("dim", FieldKind.INTEGER))),
    ClassDescriptor("Eval", Eval),
    ClassDescriptor(
        "InterpreterAutogradFunction",
        InterpreterAutogradFunction,
        attributes=attribute_table(("stage", FieldKind.INTEGER)),
    ),
    ClassDescriptor("CopyBackwards", CopyBackwards),
    ClassDescriptor(
        "CopySlices",
        CopySlices,
        attributes=(
            AttributeDescriptor("base_sizes", FieldKind.SEQUENCE, source="base.sizes", element=FieldKind.INTEGER),
            AttributeDescriptor("base_strides", FieldKind.SEQUENCE, source="base.strides", element=FieldKind.INTEGER),
            AttributeDescriptor("storage_offset", FieldKind.INTEGER, source="base.storage_offset"),
        ),
    ),
)

GENERATED_FUNCTION_CLASSES: tuple[ClassDescriptor, ...] = (
    ClassDescriptor(
        "AddBackward0",
        generated.AddBackward0,
        attributes=attribute_table(("alpha", FieldKind.SCALAR)),
    ),
    ClassDescriptor(
        "MulBackward0",
        generated.MulBackward0,
        attributes=(
            AttributeDescriptor("self", FieldKind.TENSOR, source="self_"),
            AttributeDescriptor("other", FieldKind.TENSOR),
        ),
    ),
    ClassDescriptor(
        "SumBackward0",
        generated.SumBackward0,
        attributes=(
            AttributeDescriptor("self_sizes", FieldKind.SEQUENCE, element=FieldKind.INTEGER),
        ),
    ),
)


@dataclass(frozen=True)
class FunctionTypeTable:
    """Result of a registration pass: the namespace module and its registry."""

    module: types.ModuleType
    registry: FunctionTypeRegistry


def build_function_types(
    descriptors: Iterable[ClassDescriptor], module_name: str
) -> FunctionTypeTable:
    """
    Build every function type described by `descriptors`.

    Nothing is published here; the returned table is complete and immutable
    by the time it is handed back.
    """
    module = types.ModuleType(module_name, "Autograd function types.")
    builder = RegistryBuilder()
    for descriptor in descriptors:
        py_type = create_function_type(
            descriptor.name,
            descriptor.native_class,
            descriptor.constructor,
            descriptor.attributes,
            module=module_name,
        )
        builder.add(descriptor.native_class, py_type)
        setattr(module, descriptor.name, py_type)
    module.FunctionObject = FunctionObject
    return FunctionTypeTable(module, builder.freeze())


def init_functions(config: BindingConfig = DEFAULT_CONFIG) -> bool:
    """
    Build the function types and publish them on `config.parent_module`.

    Returns False (after logging the cause) when the types cannot be built
    or the parent module cannot be imported; callers must treat that as a
    failed startup.
    """
    descriptors = FUNCTION_CLASSES
    if config.include_generated:
        descriptors = descriptors + GENERATED_FUNCTION_CLASSES

    try:
        table = build_function_types(descriptors, config.namespace_name)
    except Exception as e:
        logger.error(f"Failed to build function types for {config.namespace_name}: {e}")
        return False

    try:
        parent = importlib.import_module(config.parent_module)
    except ImportError as e:
        logger.error(f"Cannot locate parent module {config.parent_module}: {e}")
        return False

    setattr(parent, config.namespace_attr, table.module)
    setattr(parent, config.registry_attr, table.registry)
    logger.info(
        f"Registered {len(table.registry)} function types in {config.namespace_name}"
    )
    return True
