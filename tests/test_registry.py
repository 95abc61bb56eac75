import logging

import pytest

import gradfn
from gradfn.autograd import Function
from gradfn.autograd.functions import BatchNormForward, Clone, Identity
from gradfn.bindings import (
    BindingConfig,
    ClassDescriptor,
    FunctionTypeRegistry,
    RegistrationError,
    RegistryBuilder,
    build_function_types,
    create_function_type,
    init_functions,
)
from gradfn.bindings import functions as functions_module
from gradfn.bindings.functions import FUNCTION_CLASSES, GENERATED_FUNCTION_CLASSES


def test_one_entry_per_registered_class(functions, registry):
    descriptors = FUNCTION_CLASSES + GENERATED_FUNCTION_CLASSES
    assert isinstance(registry, FunctionTypeRegistry)
    assert len(registry) == len(descriptors)
    for descriptor in descriptors:
        py_type = getattr(functions, descriptor.name)
        assert registry[descriptor.native_class] is py_type
        assert registry.lookup(descriptor.native_class) is py_type
        assert py_type._type_registry is registry


def test_namespace_is_published_on_parent(functions):
    assert functions.__name__ == "gradfn._C._functions"
    assert gradfn._C._functions is functions
    assert functions.BatchNorm.__module__ == "gradfn._C._functions"


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry[Identity] = None
    assert registry.lookup(Function) is None


def test_builder_rejects_duplicates():
    builder = RegistryBuilder()
    builder.add(Identity, create_function_type("Identity", Identity))

    with pytest.raises(RegistrationError, match="already registered"):
        builder.add(Identity, create_function_type("Other", Identity))
    with pytest.raises(RegistrationError, match="named 'Identity'"):
        builder.add(BatchNormForward, create_function_type("Identity", BatchNormForward))


def test_builder_is_closed_after_freeze():
    builder = RegistryBuilder()
    builder.freeze()
    with pytest.raises(RegistrationError, match="frozen"):
        builder.add(Identity, create_function_type("Identity", Identity))


def test_build_function_types_is_independent(functions):
    table = build_function_types(FUNCTION_CLASSES[:3], "scratch._functions")
    assert len(table.registry) == 3
    assert table.module.BatchNorm is not functions.BatchNorm
    assert not hasattr(table.module, "Identity")


def test_build_function_types_rejects_duplicate_names():
    duplicated = (ClassDescriptor("Identity", Identity), ClassDescriptor("Identity", Clone))
    with pytest.raises(RegistrationError, match="named 'Identity'"):
        build_function_types(duplicated, "scratch._functions")


def test_build_function_types_rejects_duplicate_classes():
    duplicated = (ClassDescriptor("Identity", Identity), ClassDescriptor("Other", Identity))
    with pytest.raises(RegistrationError, match="already registered"):
        build_function_types(duplicated, "scratch._functions")


def test_attribute_may_not_shadow_builtin_members():
    from gradfn.bindings import AttributeDescriptor, FieldKind

    with pytest.raises(ValueError, match="shadows"):
        create_function_type(
            "Bad", Identity, attributes=(AttributeDescriptor("metadata", FieldKind.FLAG),)
        )


def test_init_functions_publishes_on_given_parent(parent_module):
    config = BindingConfig(parent_module="fake_parent", include_generated=False)
    assert init_functions(config) is True

    assert parent_module._functions.__name__ == "fake_parent._functions"
    assert len(parent_module._function_types) == len(FUNCTION_CLASSES)
    assert parent_module._function_types[BatchNormForward] is parent_module._functions.BatchNorm


def test_init_functions_fails_without_parent(caplog):
    config = BindingConfig(parent_module="gradfn_missing_parent_module")
    with caplog.at_level(logging.ERROR, logger="bindings.functions"):
        assert init_functions(config) is False
    assert "Cannot locate parent module" in caplog.text


def test_init_functions_fails_on_bad_descriptor_table(parent_module, monkeypatch, caplog):
    duplicated = (ClassDescriptor("Identity", Identity), ClassDescriptor("Identity", Identity))
    monkeypatch.setattr(functions_module, "FUNCTION_CLASSES", duplicated)

    config = BindingConfig(parent_module="fake_parent", include_generated=False)
    with caplog.at_level(logging.ERROR, logger="bindings.functions"):
        assert init_functions(config) is False
    assert "Failed to build function types" in caplog.text
    assert "already registered" in caplog.text
    assert not hasattr(parent_module, "_functions")


def test_wrap_function_uses_published_registry(functions):
    fn = gradfn._C.wrap_function(Identity())
    assert type(fn) is functions.Identity
