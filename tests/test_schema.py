import numpy as np
import pytest

from gradfn.bindings import (
    ArgumentCountError,
    ArgumentError,
    ArgumentSchema,
    ArgumentTypeError,
    AttributeDescriptor,
    FieldKind,
    attribute_table,
    constructor,
)
from gradfn.autograd.functions import Narrow
from gradfn.types import Tensor, Variable


@pytest.fixture
def narrow_ctor():
    @constructor(("dim", FieldKind.INTEGER), ("start", FieldKind.INTEGER), ("size", FieldKind.INTEGER))
    def build(dim, start, size):
        return Narrow(dim, start, size)

    return build


def test_parse_converts_in_order():
    schema = ArgumentSchema(
        (
            ("x", FieldKind.TENSOR),
            ("scale", FieldKind.SCALAR),
            ("axis", FieldKind.INTEGER),
            ("label", FieldKind.STRING),
        )
    )
    v = Variable([1.0, 2.0])
    values = schema.parse("f", (v, np.float32(0.5), np.int64(2), "mean"))

    assert list(values) == ["x", "scale", "axis", "label"]
    assert values["x"] is v.value
    assert values["scale"] == 0.5 and type(values["scale"]) is float
    assert values["axis"] == 2 and type(values["axis"]) is int
    assert values["label"] == "mean"


def test_falsy_values_are_accepted():
    schema = ArgumentSchema((("flag", FieldKind.FLAG), ("n", FieldKind.INTEGER), ("s", FieldKind.STRING)))
    assert schema.parse("f", (False, 0, "")) == {"flag": False, "n": 0, "s": ""}


def test_bools_are_not_numbers():
    schema = ArgumentSchema((("n", FieldKind.INTEGER),))
    with pytest.raises(ArgumentTypeError, match="must be int, not bool"):
        schema.parse("f", (True,))


def test_count_is_checked_first():
    schema = ArgumentSchema((("x", FieldKind.TENSOR),))
    with pytest.raises(ArgumentCountError, match=r"f\(\) takes exactly 1 arguments \(2 given\)"):
        schema.parse("f", ("not a tensor", Tensor(1.0)))


def test_sequence_is_not_a_constructor_kind():
    with pytest.raises(ValueError, match="unsupported kind"):
        ArgumentSchema((("sizes", FieldKind.SEQUENCE),))


def test_constructor_builds_node(narrow_ctor):
    node = narrow_ctor("Narrow", (1, 0, 3), {})
    assert isinstance(node, Narrow)
    assert (node.dim, node.start, node.size) == (1, 0, 3)


def test_constructor_rejects_keywords(narrow_ctor):
    with pytest.raises(ArgumentError, match="keyword"):
        narrow_ctor("Narrow", (1, 0), {"size": 3})


def test_sequence_descriptor_needs_element_kind():
    with pytest.raises(ValueError, match="element kind"):
        AttributeDescriptor("sizes", FieldKind.SEQUENCE)
    with pytest.raises(ValueError, match="Only sequence"):
        AttributeDescriptor("dim", FieldKind.INTEGER, element=FieldKind.INTEGER)


def test_attribute_table_prefix_and_duplicates():
    table = attribute_table(("eps", FieldKind.SCALAR), prefix="params")
    assert table[0].source == "params.eps"

    with pytest.raises(ValueError, match="Duplicate attribute 'eps'"):
        attribute_table(("eps", FieldKind.SCALAR), ("eps", FieldKind.SCALAR))
