"""Service: greedy fixed-point expansion of a single cluster.

A cluster grows in rounds. Each round collects the unvisited neighbours of
every member in ascending id order, then tries them one at a time:

* tentative apply: mark the candidate visited and form the trial member set
  (current members plus the candidate),
* evaluate: density of the trial set and the candidate's periphery ratio
  into it,
* commit the candidate into the cluster, or roll it back (mark it
  unvisited so a later round or seed can try it again).

Later candidates in a round are measured against a cluster that already
contains the ones committed before them, so the evaluation order is part
of the result. Expansion stops after the first round that commits nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from densecluster.domain.graph import Graph
from densecluster.domain.models import CandidateEvaluation, Cluster

log = logging.getLogger(__name__)


class VisitedMarkers:
    """Per-run visited flags shared by every expansion in one clustering run."""

    def __init__(self, nodes: Iterable[str]):
        self._visited: dict[str, bool] = {node: False for node in nodes}

    def is_visited(self, node: str) -> bool:
        return self._visited.get(node, False)

    def mark(self, node: str) -> None:
        self._visited[node] = True

    def unmark(self, node: str) -> None:
        self._visited[node] = False

    def unvisited(self) -> list[str]:
        return sorted(node for node, seen in self._visited.items() if not seen)

    def visited_count(self) -> int:
        return sum(1 for seen in self._visited.values() if seen)

    def __len__(self) -> int:
        return len(self._visited)


class ClusterExpander:
    """Grow one cluster in place until it reaches a fixed point."""

    def __init__(
        self,
        graph: Graph,
        visited: VisitedMarkers,
        *,
        density_threshold: float,
        cp_threshold: float,
    ):
        self._graph = graph
        self._visited = visited
        self._density_threshold = density_threshold
        self._cp_threshold = cp_threshold

    # ── public ──

    def expand(self, cluster: Cluster) -> list[CandidateEvaluation]:
        """Expand *cluster* and return every evaluation made, in order."""
        evaluations: list[CandidateEvaluation] = []
        round_no = 0
        added = True

        while added:
            added = False
            round_no += 1
            candidates = self.collect_candidates(cluster)
            log.debug(
                "Round %d: cluster size %d, %d candidates",
                round_no,
                cluster.size,
                len(candidates),
            )

            for candidate in candidates:
                trial = self._tentative_apply(cluster, candidate)
                evaluation = self._evaluate(trial, candidate, round_no)
                if evaluation.accepted:
                    self._commit(cluster, candidate)
                    added = True
                else:
                    self._rollback(candidate)
                evaluations.append(evaluation)

        return evaluations

    def collect_candidates(self, cluster: Cluster) -> list[str]:
        """Unvisited neighbours of any member, ascending and without repeats."""
        candidates: set[str] = set()
        for node in cluster.nodes:
            for edge in self._graph.neighbors(node):
                if not self._visited.is_visited(edge.target):
                    candidates.add(edge.target)
        return sorted(candidates)

    # ── two-phase candidate step ──

    def _tentative_apply(self, cluster: Cluster, candidate: str) -> frozenset[str]:
        """Mark *candidate* visited and return the members it would produce."""
        self._visited.mark(candidate)
        return frozenset(cluster.members) | {candidate}

    def _evaluate(self, trial: frozenset[str], candidate: str, round_no: int) -> CandidateEvaluation:
        density = self._graph.density(trial)
        ratio = self._graph.periphery_ratio(candidate, trial)
        accepted = density >= self._density_threshold and self._graph.is_in_periphery(
            candidate, trial, self._cp_threshold
        )
        return CandidateEvaluation(
            candidate=candidate,
            round=round_no,
            density=density,
            periphery_ratio=ratio,
            accepted=accepted,
        )

    def _commit(self, cluster: Cluster, candidate: str) -> None:
        cluster.members.add(candidate)

    def _rollback(self, candidate: str) -> None:
        self._visited.unmark(candidate)
