"""
Unit tests for object under test construction.
"""

import pytest

from pojo_kit.core.object_synthesizer import ObjectSynthesizer
from pojo_kit.domain.type_descriptor import TypeDescriptor, declared_constructors
from pojo_kit.utilities.constants import ConstructorPolicy
from pojo_kit.utilities.errors import InstantiationFailure, UnsupportedTypeFailure
from tests.fixtures.pojos import AbstractShape, Customer, Point, Strict, Tracked, Unbuildable


class TestDeclaredConstructors:
    """Test cases for constructor discovery."""

    def test_class_call_first(self):
        """Test the class call precedes alternate constructors."""
        constructors = declared_constructors(Tracked)
        assert [c.name for c in constructors] == ["__init__", "from_label"]
        assert constructors[1].parameters[0].name == "label"
        assert constructors[1].parameters[0].hint is str

    def test_parameters_typed_from_init(self):
        """Test parameter hints come from __init__."""
        init = declared_constructors(Point)[0]
        assert [(p.name, p.hint) for p in init.parameters] == [("x", int), ("y", int)]
        assert all(p.needs_value for p in init.parameters)

    def test_type_descriptor(self):
        """Test constructors are only collected for plain classes."""
        assert [c.name for c in TypeDescriptor.of(Strict).constructors] == ["__init__", "default"]
        generic = TypeDescriptor.of(list[int])
        assert generic.origin is list
        assert generic.args == (int,)
        assert generic.constructors == ()


class TestObjectSynthesizer:
    """Test cases for ObjectSynthesizer."""

    def test_first_success_policy(self, value_synthesizer):
        """Test the earliest successful constructor supplies the instance."""
        objects = ObjectSynthesizer(value_synthesizer, ConstructorPolicy.FIRST_SUCCESS)
        tracked = objects.build(Tracked)

        assert tracked.get_origin() == "__init__"
        assert objects.last_constructor.name == "__init__"

    def test_last_success_policy(self, value_synthesizer):
        """Test the latest successful constructor supplies the instance."""
        objects = ObjectSynthesizer(value_synthesizer, ConstructorPolicy.LAST_SUCCESS)
        tracked = objects.build(Tracked)

        assert tracked.get_origin() == "from_label"
        assert objects.last_constructor.name == "from_label"

    def test_failing_constructor_skipped(self, value_synthesizer):
        """Test a raising constructor does not stop the others."""
        objects = ObjectSynthesizer(value_synthesizer)
        strict = objects.build(Strict)

        assert strict.get_token() == "ok"
        assert str(objects.last_constructor) == "default()"

    def test_nested_arguments(self, value_synthesizer):
        """Test constructor arguments are synthesized recursively."""
        customer = ObjectSynthesizer(value_synthesizer).build(Customer)
        assert customer.get_address() is not None

    @pytest.mark.parametrize("cls", [Unbuildable, AbstractShape])
    def test_unbuildable(self, value_synthesizer, cls):
        """Test classes with no working constructor raise InstantiationFailure."""
        with pytest.raises(InstantiationFailure) as exc_info:
            ObjectSynthesizer(value_synthesizer).build(cls)

        error = exc_info.value
        assert error.target is cls
        assert not isinstance(error, UnsupportedTypeFailure)
        assert error.attempts
        assert error.__cause__ is error.attempts[-1][1]
        assert f"Unable to create object of type {cls.__qualname__}" in str(error)
