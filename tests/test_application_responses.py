"""
Tests for the responses application layer (use cases).

Tests use cases with in-memory sources. No real infrastructure needed.
Each test verifies orchestration logic, not dispatch rules.
"""

import pytest

from respkit.application.responses.build_registry import (
    BuildResponseRegistryUseCase,
)
from respkit.application.responses.dtos import ResponseSummary
from respkit.application.responses.list_responses import ListResponsesUseCase
from respkit.domain.responses.errors import (
    MissingBaselineResponsesError,
    RegistryFrozenError,
)
from respkit.domain.responses.ports import ResponseSource


def builtin_ok(context):
    return "builtin ok"


def custom_ok(context):
    return "custom ok"


def payment_required(context):
    return "payment required"


class StaticSource(ResponseSource):
    """A source serving a fixed list of pairs."""

    def __init__(self, pairs, is_built_in=False):
        self._pairs = pairs
        self.is_built_in = is_built_in

    def load(self):
        return list(self._pairs)


class TestBuildResponseRegistryUseCase:
    """Tests for the BuildResponseRegistryUseCase."""

    def test_custom_sources_override_built_ins(self) -> None:
        """Later sources win, and keep their own built-in flag."""
        use_case = BuildResponseRegistryUseCase(
            sources=[
                StaticSource([("ok", builtin_ok)], is_built_in=True),
                StaticSource([("ok", custom_ok), ("payment_required", payment_required)]),
            ],
        )

        registry = use_case.execute()

        assert registry.resolve("ok").implementation is custom_ok
        assert registry.resolve("ok").is_built_in is False
        assert registry.resolve("payment_required").implementation is payment_required

    def test_built_in_flag_comes_from_source(self) -> None:
        registry = BuildResponseRegistryUseCase(
            sources=[StaticSource([("ok", builtin_ok)], is_built_in=True)],
        ).execute()

        assert registry.resolve("ok").is_built_in is True

    def test_missing_required_names_fail_startup(self) -> None:
        """A missing baseline response is reported before serving."""
        use_case = BuildResponseRegistryUseCase(
            sources=[StaticSource([("ok", builtin_ok)], is_built_in=True)],
            required_names=["ok", "not_found"],
        )

        with pytest.raises(MissingBaselineResponsesError) as exc_info:
            use_case.execute()

        assert exc_info.value.names == ["not_found"]

    def test_registry_is_frozen(self) -> None:
        registry = BuildResponseRegistryUseCase(
            sources=[StaticSource([("ok", builtin_ok)], is_built_in=True)],
            required_names=["ok"],
        ).execute()

        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("late", custom_ok)


class TestListResponsesUseCase:
    """Tests for the ListResponsesUseCase."""

    def test_lists_summaries_sorted_by_name(self) -> None:
        registry = BuildResponseRegistryUseCase(
            sources=[
                StaticSource([("ok", builtin_ok)], is_built_in=True),
                StaticSource([("payment_required", payment_required)]),
            ],
        ).execute()

        summaries = ListResponsesUseCase(registry).execute()

        assert summaries == [
            ResponseSummary(name="ok", is_built_in=True),
            ResponseSummary(name="payment_required", is_built_in=False),
        ]
