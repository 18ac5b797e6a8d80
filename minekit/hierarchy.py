"""Agglomerative hierarchical clustering of points in the plane."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations

from minekit.geometry import SAMPLE_POINTS, Point


class LinkageMethod(Enum):
    """How the distance between two clusters is measured."""

    SINGLE = "Single"
    COMPLETE = "Complete"
    AVERAGE = "Average"


@dataclass
class Cluster:
    """A node of the dendrogram: a leaf or the merge of two clusters."""

    id: int
    points: list[int] = field(default_factory=list)
    left: Cluster | None = None
    right: Cluster | None = None
    height: float = 0.0

    @classmethod
    def merge(cls, cluster_id: int, left: Cluster, right: Cluster, height: float) -> Cluster:
        """Join ``left`` and ``right`` into a new cluster at ``height``."""
        return cls(cluster_id, [*left.points, *right.points], left, right, height)


class HierarchicalClustering:
    """Bottom-up clustering that repeatedly merges the two closest clusters."""

    def __init__(self, data: Iterable[Point], method: LinkageMethod = LinkageMethod.SINGLE):
        self.data = list(data)
        self.method = LinkageMethod(method)

    def _pair_distances(self, cluster_a: Cluster, cluster_b: Cluster) -> list[float]:
        return [
            self.data[i].distance(self.data[j])
            for i in cluster_a.points
            for j in cluster_b.points
        ]

    def cluster_distance(self, cluster_a: Cluster, cluster_b: Cluster) -> float:
        """Distance between two clusters under the chosen linkage."""
        distances = self._pair_distances(cluster_a, cluster_b)
        if self.method is LinkageMethod.SINGLE:
            return min(distances, default=math.inf)
        if self.method is LinkageMethod.COMPLETE:
            return max(distances, default=0.0)
        return sum(distances) / len(distances) if distances else math.inf

    def find_closest_clusters(self, clusters: Sequence[Cluster]) -> tuple[int, int, float]:
        """Indices ``(i, j)`` with ``i < j`` of the closest pair, and their distance.

        Ties go to the pair found first.
        """
        best = (0, 1, math.inf)
        for i, j in combinations(range(len(clusters)), 2):
            distance = self.cluster_distance(clusters[i], clusters[j])
            if distance < best[2]:
                best = (i, j, distance)
        return best

    def fit(self) -> Cluster:
        """Build the dendrogram and return its root."""
        if not self.data:
            raise ValueError("cannot cluster empty data")
        clusters = [Cluster(i, [i]) for i in range(len(self.data))]
        next_id = len(self.data)
        while len(clusters) > 1:
            i, j, distance = self.find_closest_clusters(clusters)
            right = clusters.pop(j)
            left = clusters.pop(i)
            clusters.append(Cluster.merge(next_id, left, right, distance))
            next_id += 1
        return clusters[0]

    def _walk(self, node: Cluster, depth: int) -> Iterator[str]:
        indent = "  " * depth
        yield f"{indent}Cluster {node.id} (height: {node.height:.2f})"
        if len(node.points) <= 3:
            coords = ", ".join(
                f'"({self.data[i].x:.1f},{self.data[i].y:.1f})"' for i in node.points
            )
            yield f"{indent}Points: [{coords}]"
        else:
            yield f"{indent}Contains {len(node.points)} points"
        for child in (node.left, node.right):
            if child is not None:
                yield from self._walk(child, depth + 1)

    def dendrogram_lines(self, node: Cluster, depth: int = 0) -> list[str]:
        """Text lines describing ``node`` and everything below it."""
        return list(self._walk(node, depth))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run hierarchical clustering on the sample points with every linkage."
    )
    parser.parse_args(argv)

    data = list(SAMPLE_POINTS)
    for method in LinkageMethod:
        print(f"\n=== {method.value} Linkage Hierarchical Clustering ===")
        clustering = HierarchicalClustering(data, method)
        root = clustering.fit()
        print("\nDendrogram structure:")
        for line in clustering.dendrogram_lines(root):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())