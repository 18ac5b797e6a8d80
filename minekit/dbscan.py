"""Density-based clustering (DBSCAN) of points in the plane."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Sequence
from enum import Enum

from minekit.geometry import SAMPLE_POINTS, Point


class PointType(Enum):
    """Role a point plays after clustering."""

    CORE = "Core"
    BORDER = "Border"
    NOISE = "Noise"
    UNCLASSIFIED = "Unclassified"


class DBSCAN:
    """DBSCAN with a Euclidean neighbourhood radius ``eps``.

    ``min_points`` counts neighbours other than the point itself.
    """

    def __init__(self, eps: float, min_points: int):
        self.eps = eps
        self.min_points = min_points

    def region_query(self, data: Sequence[Point], point_idx: int) -> list[int]:
        """Indices of all other points within ``eps`` of ``data[point_idx]``."""
        centre = data[point_idx]
        return [
            i
            for i, p in enumerate(data)
            if i != point_idx and p.distance(centre) <= self.eps
        ]

    def _expand_cluster(
        self,
        data: Sequence[Point],
        point_idx: int,
        neighbors: list[int],
        cluster_id: int,
        clusters: list[int | None],
        point_types: list[PointType],
    ) -> None:
        clusters[point_idx] = cluster_id
        point_types[point_idx] = PointType.CORE

        seeds = deque(neighbors)
        while seeds:
            current = seeds.popleft()
            if point_types[current] is PointType.NOISE:
                clusters[current] = cluster_id
                point_types[current] = PointType.BORDER
                continue
            if clusters[current] is not None:
                continue

            clusters[current] = cluster_id
            new_neighbors = self.region_query(data, current)
            if len(new_neighbors) >= self.min_points:
                point_types[current] = PointType.CORE
                seeds.extend(
                    n
                    for n in new_neighbors
                    if clusters[n] is None or point_types[n] is PointType.NOISE
                )
            else:
                point_types[current] = PointType.BORDER

    def fit(self, data: Sequence[Point]) -> tuple[list[int | None], list[PointType]]:
        """Cluster ``data``.

        Returns each point's cluster id (numbered from 1, ``None`` for noise)
        and each point's type.
        """
        clusters: list[int | None] = [None] * len(data)
        point_types = [PointType.UNCLASSIFIED] * len(data)
        cluster_id = 0

        for i in range(len(data)):
            if clusters[i] is not None:
                continue
            neighbors = self.region_query(data, i)
            if len(neighbors) < self.min_points:
                point_types[i] = PointType.NOISE
                continue
            cluster_id += 1
            self._expand_cluster(data, i, neighbors, cluster_id, clusters, point_types)

        return clusters, point_types


def _quoted_list(items: list[str]) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def _label(point_type: PointType) -> str:
    if point_type in (PointType.CORE, PointType.BORDER):
        return point_type.value
    return "Unknown"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run DBSCAN on the sample points.")
    parser.parse_args(argv)

    data = list(SAMPLE_POINTS)
    for eps, min_points in ((1.5, 2), (2.0, 2), (2.5, 2), (3.0, 2)):
        print(f"\nRunning DBSCAN with eps = {eps:g}, min_points = {min_points}")
        clusters, point_types = DBSCAN(eps, min_points).fit(data)

        unique = sorted({c for c in clusters if c is not None})
        noise_count = clusters.count(None)
        print(f"Found {len(unique)} clusters and {noise_count} noise points")

        noise = [f"({p.x:.1f},{p.y:.1f})" for p, c in zip(data, clusters) if c is None]
        if noise:
            print(f"Noise points: {_quoted_list(noise)}")

        for cluster_id in unique:
            members = [
                f"({p.x:.1f},{p.y:.1f}):{_label(t)}"
                for p, c, t in zip(data, clusters, point_types)
                if c == cluster_id
            ]
            print(f"Cluster {cluster_id}: {_quoted_list(members)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())