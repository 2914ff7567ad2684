"""Configuration classes for spgraph components."""

from dataclasses import dataclass

from spgraph.types.base import FrontierSelect


@dataclass
class SpfConfig:
    """Configuration for single-source shortest-path searches."""

    # How the next node to finalize is chosen
    frontier: FrontierSelect = FrontierSelect.HEAP

    # Raise ValueError on edge costs below the zero cost
    validate_costs: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.frontier, str):
            self.frontier = FrontierSelect.from_string(self.frontier)


# Global configuration instance
SPF_CONFIG = SpfConfig()
