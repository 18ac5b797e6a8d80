"""K-means clustering of points in the plane."""

from __future__ import annotations

import argparse
import random
from collections import defaultdict
from collections.abc import Sequence

from minekit.geometry import SAMPLE_POINTS, Point

_TOLERANCE = 1e-6


class KMeans:
    """K-means with centroids drawn at random from the data."""

    def __init__(self, k: int, max_iterations: int = 100, rng: random.Random | None = None):
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self.max_iterations = max_iterations
        self.centroids: list[Point] = []
        self.iterations = 0
        self._rng = rng if rng is not None else random.Random()

    def initialize_centroids(self, data: Sequence[Point]) -> None:
        """Pick ``k`` centroids from ``data`` at random, with replacement."""
        if not data:
            raise ValueError("cannot initialise centroids from empty data")
        self.centroids = [self._rng.choice(data) for _ in range(self.k)]

    def assign_clusters(self, data: Sequence[Point]) -> list[int]:
        """Index of the nearest centroid for every point; ties go to the lowest index."""
        if not self.centroids:
            raise ValueError("centroids have not been initialised")
        return [
            min(range(len(self.centroids)), key=lambda i: point.distance(self.centroids[i]))
            for point in data
        ]

    def update_centroids(self, data: Sequence[Point], clusters: Sequence[int]) -> bool:
        """Move each centroid to the mean of its points; report whether any moved."""
        sums = [Point(0.0, 0.0)] * self.k
        counts = [0] * self.k
        for point, cluster in zip(data, clusters):
            sums[cluster] = sums[cluster] + point
            counts[cluster] += 1

        new_centroids = [
            total.scale(1.0 / count) if count else old
            for total, count, old in zip(sums, counts, self.centroids)
        ]
        changed = any(
            new.distance(old) > _TOLERANCE for new, old in zip(new_centroids, self.centroids)
        )
        self.centroids = new_centroids
        return changed

    def fit(self, data: Sequence[Point]) -> list[int]:
        """Cluster ``data`` and return each point's cluster index."""
        self.initialize_centroids(data)
        clusters = self.assign_clusters(data)
        iteration = 0
        while iteration < self.max_iterations:
            if not self.update_centroids(data, clusters):
                break
            clusters = self.assign_clusters(data)
            iteration += 1
        self.iterations = iteration
        return clusters

    def inertia(self, data: Sequence[Point], clusters: Sequence[int]) -> float:
        """Sum of squared distances from each point to its centroid."""
        return sum(
            point.distance(self.centroids[cluster]) ** 2
            for point, cluster in zip(data, clusters)
        )


def _grouped(data: Sequence[Point], clusters: Sequence[int]) -> dict[int, list[tuple[float, float]]]:
    groups: dict[int, list[tuple[float, float]]] = defaultdict(list)
    for point, cluster in zip(data, clusters):
        groups[cluster].append((point.x, point.y))
    return dict(sorted(groups.items()))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run k-means on the sample points for k = 2..5.")
    parser.add_argument("--seed", type=int, default=None, help="seed for centroid selection")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    data = list(SAMPLE_POINTS)
    for k in range(2, 6):
        print(f"\nRunning k-means with k = {k}")
        kmeans = KMeans(k, 100, rng=rng)
        clusters = kmeans.fit(data)
        print(f"Converged after {kmeans.iterations} iterations")
        print(f"Final centroids: {kmeans.centroids}")
        print(f"Inertia (sum of squared distances): {kmeans.inertia(data, clusters):.4f}")
        print("Cluster assignments:")
        for cluster, points in _grouped(data, clusters).items():
            print(f"Cluster {cluster}: {points}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())