"""Tests for the generix error handling system."""

from __future__ import annotations

from datetime import datetime

import pytest

from generix.containers.errors import (
    CONTAINERS,
    EMPTY_CONTAINER,
    ContainerError,
    ElementIndexError,
    EmptyContainerError,
    InvalidElementTypeError,
)
from generix.errors import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorRegistry,
    ErrorSeverity,
    GenerixError,
    registry,
)


class SampleError(GenerixError):
    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, code=INTERNAL_ERROR, **kwargs)


class TestGenerixError:
    def test_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            GenerixError("nope", code=INTERNAL_ERROR)

    def test_fields(self) -> None:
        error = SampleError("Something went wrong", host="db.example.com")

        assert error.message == "Something went wrong"
        assert error.code == INTERNAL_ERROR
        assert error.category == INTERNAL
        assert error.severity == ErrorSeverity.ERROR
        assert error.context == {"host": "db.example.com"}
        assert isinstance(error.timestamp, datetime)
        assert str(error) == "INTERNAL_ERROR: Something went wrong"

    def test_code_must_be_error_code(self) -> None:
        class Loose(GenerixError):
            pass

        with pytest.raises(TypeError):
            Loose("bad", code="NOT_A_CODE")

    def test_add_context_chains(self) -> None:
        error = SampleError("Connection failed")
        error.add_context("retry_count", 3).add_context("timeout", 30)

        assert error.context == {"retry_count": 3, "timeout": 30}

    def test_to_dict(self) -> None:
        error = SampleError("Resource not found", severity=ErrorSeverity.WARNING, resource_id="12345")

        data = error.to_dict()

        assert data["code"] == "INTERNAL_ERROR"
        assert data["message"] == "Resource not found"
        assert data["category"] == "INTERNAL"
        assert data["severity"] == "WARNING"
        assert data["context"] == {"resource_id": "12345"}
        assert "timestamp" in data

    def test_context_dict_is_copied(self) -> None:
        context = {"a": 1}
        error = SampleError("x", context=context)
        error.add_context("b", 2)

        assert context == {"a": 1}


class TestRegistry:
    def test_singleton(self) -> None:
        assert ErrorRegistry() is registry

    def test_get_or_create_is_idempotent(self) -> None:
        category = ErrorCategory.get_or_create("TEST_CATEGORY")
        code = ErrorCode.get_or_create("TEST_CODE", category)

        assert ErrorCategory.get_or_create("TEST_CATEGORY") is category
        assert ErrorCode.get_or_create("TEST_CODE", category) is code
        assert registry.get_code("TEST_CODE") is code
        assert registry.get_category("TEST_CATEGORY") is category

    def test_existing_code_keeps_its_category(self) -> None:
        first = ErrorCategory.get_or_create("TEST_FIRST")
        code = ErrorCode.get_or_create("TEST_SHARED_CODE", first)
        other = ErrorCategory.get_or_create("TEST_OTHER")

        assert ErrorCode.get_or_create("TEST_SHARED_CODE", other).category is first
        assert code.category == first

    def test_code_defaults_to_internal_category(self) -> None:
        assert ErrorCode("TEST_UNREGISTERED").category is INTERNAL


class TestContainerErrors:
    def test_empty_container_error(self) -> None:
        error = EmptyContainerError("pop", "Stack")

        assert isinstance(error, ContainerError)
        assert error.code == EMPTY_CONTAINER
        assert error.category == CONTAINERS
        assert error.operation == "pop"
        assert error.context == {"operation": "pop", "container": "Stack"}
        assert str(error) == "EMPTY_CONTAINER: Cannot pop() on an empty Stack"

    def test_invalid_element_type_is_type_error(self) -> None:
        error = InvalidElementTypeError("bad", expected="int", actual="str")

        assert isinstance(error, TypeError)
        assert error.expected == "int"
        assert error.context["actual"] == "str"

    def test_element_index_error_is_index_error(self) -> None:
        error = ElementIndexError(5, 2)

        assert isinstance(error, IndexError)
        assert error.index == 5
        assert error.context == {"index": 5, "size": 2}
