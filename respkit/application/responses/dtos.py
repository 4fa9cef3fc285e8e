"""
Data Transfer Objects for the responses application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResponseSummary:
    """Output DTO describing one registered response.

    Attributes:
        name: Response name, as called on the response handle.
        is_built_in: True if the handler ships with the package.
    """

    name: str
    is_built_in: bool
