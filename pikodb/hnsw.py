"""Hierarchical navigable small-world graph over cosine distance."""

from __future__ import annotations

import heapq
import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

MAX_LAYERS = 16


@dataclass(frozen=True)
class Neighbour:
    """A search hit: data id, distance and graph node id."""

    d_id: int
    distance: float
    p_id: int


@dataclass
class _Node:
    vector: np.ndarray
    norm: float
    data_id: int
    links: list


class HnswIndex:
    """Approximate nearest-neighbour index; every insert adds a new node."""

    def __init__(
        self,
        max_nb_connection: int = 16,
        ef_construction: int = 200,
        max_layer: int = MAX_LAYERS,
        seed: Optional[int] = None,
    ) -> None:
        if max_nb_connection < 2:
            raise ValueError("max_nb_connection must be at least 2")
        self._max_conn = max_nb_connection
        self._ef_construction = max(ef_construction, 1)
        self._max_layer = max(1, min(max_layer, MAX_LAYERS))
        self._level_mult = 1.0 / math.log(max_nb_connection)
        self._rng = random.Random(seed)
        self._nodes: list[_Node] = []
        self._entry: Optional[int] = None
        self._dimension: Optional[int] = None

    def __len__(self) -> int:
        return len(self._nodes)

    def _capacity(self, layer: int) -> int:
        return self._max_conn * 2 if layer == 0 else self._max_conn

    def _as_vector(self, vector: Sequence[float]) -> np.ndarray:
        arr = np.asarray(vector, dtype=np.float64).ravel()
        if self._dimension is not None and arr.shape[0] != self._dimension:
            raise ValueError(f"vector has dimension {arr.shape[0]}, index holds {self._dimension}")
        return arr

    def _distance(self, query: np.ndarray, q_norm: float, node_id: int) -> float:
        node = self._nodes[node_id]
        if q_norm == 0.0 or node.norm == 0.0:
            return 0.0
        return max(1.0 - float(np.dot(query, node.vector)) / (q_norm * node.norm), 0.0)

    def _search_layer(self, query, q_norm, entry_points, ef, layer):
        visited = {node_id for _, node_id in entry_points}
        candidates = list(entry_points)
        heapq.heapify(candidates)
        results = [(-d, n) for d, n in entry_points]
        heapq.heapify(results)
        while len(results) > ef:
            heapq.heappop(results)
        while candidates:
            dist, node_id = heapq.heappop(candidates)
            if len(results) >= ef and dist > -results[0][0]:
                break
            for other in self._nodes[node_id].links[layer]:
                if other in visited:
                    continue
                visited.add(other)
                d = self._distance(query, q_norm, other)
                if len(results) < ef or d < -results[0][0]:
                    heapq.heappush(candidates, (d, other))
                    heapq.heappush(results, (-d, other))
                    if len(results) > ef:
                        heapq.heappop(results)
        return sorted((-neg, n) for neg, n in results)

    def _descend(self, query, q_norm, down_to):
        entry = self._entry
        nearest = [(self._distance(query, q_norm, entry), entry)]
        for layer in range(len(self._nodes[entry].links) - 1, down_to, -1):
            nearest = self._search_layer(query, q_norm, nearest, 1, layer)
        return nearest

    def insert(self, vector: Sequence[float], data_id: int) -> None:
        """Add ``vector`` to the graph, tagged with ``data_id``."""
        arr = self._as_vector(vector)
        self._dimension = arr.shape[0]
        level = min(
            int(-math.log(1.0 - self._rng.random()) * self._level_mult), self._max_layer - 1
        )
        node_id = len(self._nodes)
        node = _Node(arr, float(np.linalg.norm(arr)), data_id, [[] for _ in range(level + 1)])
        self._nodes.append(node)
        if self._entry is None:
            self._entry = node_id
            return

        top = len(self._nodes[self._entry].links) - 1
        nearest = self._descend(arr, node.norm, level)
        for layer in range(min(top, level), -1, -1):
            nearest = self._search_layer(arr, node.norm, nearest, self._ef_construction, layer)
            capacity = self._capacity(layer)
            node.links[layer] = [other for _, other in nearest[:capacity]]
            for other in node.links[layer]:
                peer = self._nodes[other]
                links = peer.links[layer]
                links.append(node_id)
                if len(links) > capacity:
                    links.sort(key=lambda n: self._distance(peer.vector, peer.norm, n))
                    del links[capacity:]
        if level > top:
            self._entry = node_id

    def search(self, query: Sequence[float], k: int, ef: int) -> list[Neighbour]:
        """Return up to ``k`` nearest neighbours, closest first."""
        if k <= 0 or self._entry is None:
            return []
        arr = self._as_vector(query)
        q_norm = float(np.linalg.norm(arr))
        found = self._search_layer(arr, q_norm, self._descend(arr, q_norm, 0), max(ef, k), 0)
        return [Neighbour(self._nodes[n].data_id, d, n) for d, n in found[:k]]