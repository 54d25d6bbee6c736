"""Tests for Stack and the shared TypedContainer behaviour."""

from __future__ import annotations

import pytest

from generix.containers import (
    ContainerProtocol,
    EmptyContainerError,
    InvalidElementTypeError,
    Stack,
)


class TestStack:
    def test_empty_on_construction(self) -> None:
        stack = Stack(int)

        assert stack.size() == 0
        assert stack.is_empty()
        assert len(stack) == 0
        assert stack.element_type is int

    def test_lifo_order(self) -> None:
        stack = Stack(int)
        pushed = [10, 20, 30, 40]
        for n in pushed:
            stack.push(n)

        popped = [stack.pop() for _ in pushed]

        assert popped == list(reversed(pushed))
        assert stack.is_empty()

    def test_size_invariant(self) -> None:
        stack = Stack(str)
        for word in ["apple", "banana", "cherry", "date"]:
            stack.push(word)
        stack.pop()
        stack.pop()

        assert stack.size() == 2
        assert list(stack) == ["apple", "banana"]

    def test_peek_does_not_mutate(self) -> None:
        stack = Stack(int, [10, 20])

        assert stack.peek() == 20
        assert stack.peek() == 20
        assert stack.size() == 2

    @pytest.mark.parametrize("operation", ["pop", "peek"])
    def test_empty_fails_without_mutation(self, operation: str) -> None:
        stack = Stack(int)

        with pytest.raises(EmptyContainerError) as exc_info:
            getattr(stack, operation)()

        assert exc_info.value.operation == operation
        assert stack.size() == 0
        assert stack.is_empty()

    def test_pop_after_draining(self) -> None:
        stack = Stack(int, [1])
        stack.pop()

        with pytest.raises(EmptyContainerError):
            stack.pop()

    def test_rejects_wrong_type(self) -> None:
        stack = Stack(int, [1])

        with pytest.raises(InvalidElementTypeError) as exc_info:
            stack.push("hello")

        assert exc_info.value.expected == "int"
        assert exc_info.value.actual == "str"
        assert stack.items() == (1,)

    def test_rejects_bool_for_int(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Stack(int).push(True)

    def test_bool_stack_accepts_bool(self) -> None:
        stack = Stack(bool)
        stack.push(False)

        assert stack.peek() is False

    def test_float_stack_accepts_int(self) -> None:
        stack = Stack(float)
        stack.push(1)
        stack.push(2.5)

        assert stack.items() == (1, 2.5)

    def test_initial_items_are_checked(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Stack(int, [1, 2, "three"])

    def test_element_type_must_be_a_class(self) -> None:
        with pytest.raises(InvalidElementTypeError):
            Stack("int")

    def test_subclass_instances_are_accepted(self) -> None:
        class Base:
            pass

        class Child(Base):
            pass

        stack = Stack(Base)
        stack.push(Child())

        assert isinstance(stack.peek(), Child)

    def test_iteration_is_a_snapshot(self) -> None:
        stack = Stack(int, [1, 2, 3])
        for n in stack:
            stack.push(n * 10)

        assert stack.items() == (1, 2, 3, 10, 20, 30)

    def test_repr(self) -> None:
        assert repr(Stack(int, [10, 20, 30])) == "Stack[int]([10, 20, 30])"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Stack(int), ContainerProtocol)
