"""
Use case: Describe the registered responses.

Input: None.
Output: list[ResponseSummary], sorted by name.
Side effects: None.
"""

from respkit.application.responses.dtos import ResponseSummary
from respkit.domain.responses.registry import ResponseRegistry


class ListResponsesUseCase:
    """Lists every response the registry can dispatch."""

    def __init__(self, registry: ResponseRegistry) -> None:
        self._registry = registry

    def execute(self) -> list[ResponseSummary]:
        return [
            ResponseSummary(name=handler.name, is_built_in=handler.is_built_in)
            for handler in self._registry.handlers()
        ]
