"""Base aliases and enums shared by the search engine and its results."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric path cost. Any type with ``+``, ``<`` and ``>=`` works as well;
#: the alias only documents the common case.
Cost = Union[int, float]


class FrontierSelect(IntEnum):
    """Strategy used to pick the next frontier node to finalize.

    Both strategies order the frontier by ``(distance, node)``, so ties on
    distance go to the smallest node and the resulting predecessor maps match.
    """

    #: Binary heap with lazy deletion, O((V + E) log V).
    HEAP = 1
    #: Linear scan over all tentative distances, O(V^2).
    LINEAR_SCAN = 2

    @classmethod
    def from_string(cls, value: str) -> "FrontierSelect":
        """Parse a string into a FrontierSelect enum value.

        Args:
            value: Case-insensitive member name (e.g., "heap", "LINEAR_SCAN").

        Returns:
            The corresponding FrontierSelect member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid frontier selection '{value}'. Valid values are: {valid}"
            ) from None


class PathStatus(IntEnum):
    """Outcome of reconstructing a path from a predecessor map."""

    #: The backward walk reached the start node.
    COMPLETE = 1
    #: The walk ran out of predecessors before reaching the start node.
    NO_PATH = 2
