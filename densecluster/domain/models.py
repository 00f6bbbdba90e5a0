"""Pure domain models with no external dependencies."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field


# ── Errors ──────────────────────────────────────────────────────────────────

class NodeNotFoundError(KeyError):
    """Raised when a node is queried that the graph has never seen."""

    def __init__(self, node: str):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node not found in graph: {self.node!r}"


class InvalidThresholdError(ValueError):
    """Raised for a clustering threshold outside [0, 1]."""


def validate_threshold(name: str, value: float) -> float:
    """Return *value* as a float, or raise if it is not a number in [0, 1]."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidThresholdError(f"{name} must be a number, got {value!r}") from None
    # NaN fails both comparisons, so it is rejected here too
    if not 0.0 <= number <= 1.0:
        raise InvalidThresholdError(f"{name} must be within [0, 1], got {value!r}")
    return number


# ── Graph ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class WeightedEdge:
    """A directed half-edge; every undirected connection is stored as two."""

    source: str
    target: str
    weight: float = 1.0


# ── Clusters ────────────────────────────────────────────────────────────────

@dataclass
class Cluster:
    """A set of node ids grown from a single seed.

    ``members`` is a plain set while the cluster is being expanded. After
    :meth:`freeze` the members become a frozenset and no attribute can be
    reassigned; a second ``freeze`` is refused as well.
    """

    members: set[str] | frozenset[str] = field(default_factory=set)
    edge_count: int = 0
    density: float = 0.0

    @classmethod
    def seeded(cls, seed: str) -> Cluster:
        return cls(members={seed})

    @property
    def nodes(self) -> tuple[str, ...]:
        return tuple(sorted(self.members))

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def frozen(self) -> bool:
        return self.__dict__.get("_frozen", False)

    def freeze(self, edge_count: int, density: float) -> None:
        if self.frozen:
            raise FrozenInstanceError("cluster is already frozen")
        self.members = frozenset(self.members)
        self.edge_count = edge_count
        self.density = density
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        if self.frozen:
            raise FrozenInstanceError(f"cannot assign to field {name!r} of a frozen cluster")
        super().__setattr__(name, value)

    def __contains__(self, node: object) -> bool:
        return node in self.members

    def __len__(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class CandidateEvaluation:
    """Outcome of testing one candidate during an expansion round."""

    candidate: str
    round: int
    density: float
    periphery_ratio: float
    accepted: bool


@dataclass(frozen=True)
class ClusterStatistics:
    """Display figures for one accepted cluster (1-based index)."""

    index: int
    node_count: int
    edge_count: int
    density: float
