import random
import statistics

import pytest

from minekit.geometry import SAMPLE_POINTS, Point
from minekit.kmeans import KMeans, main

DATA = list(SAMPLE_POINTS)


def test_rejects_k_below_one():
    with pytest.raises(ValueError):
        KMeans(0)


def test_initialize_from_empty_data_raises():
    with pytest.raises(ValueError):
        KMeans(2).initialize_centroids([])


def test_initialized_centroids_come_from_data():
    km = KMeans(4, rng=random.Random(3))
    km.initialize_centroids(DATA)
    assert len(km.centroids) == 4
    assert all(c in DATA for c in km.centroids)


def test_assign_without_centroids_raises():
    with pytest.raises(ValueError):
        KMeans(2).assign_clusters(DATA)


def test_assign_picks_nearest_centroid():
    km = KMeans(2)
    km.centroids = [Point(0.0, 0.0), Point(10.0, 10.0)]
    data = [Point(1.0, 1.0), Point(9.0, 9.0), Point(2.0, 0.0)]
    assert km.assign_clusters(data) == [0, 1, 0]


def test_assign_tie_goes_to_lowest_index():
    km = KMeans(2)
    km.centroids = [Point(0.0, 0.0), Point(2.0, 0.0)]
    assert km.assign_clusters([Point(1.0, 0.0)]) == [0]


def test_update_moves_centroid_to_mean():
    km = KMeans(1)
    km.centroids = [Point(0.0, 0.0)]
    data = [Point(0.0, 0.0), Point(2.0, 0.0), Point(4.0, 6.0)]
    assert km.update_centroids(data, [0, 0, 0]) is True
    assert km.centroids[0].x == pytest.approx(statistics.fmean(p.x for p in data))
    assert km.centroids[0].y == pytest.approx(statistics.fmean(p.y for p in data))


def test_update_twice_reports_no_change():
    km = KMeans(2)
    km.centroids = [Point(0.0, 0.0), Point(5.0, 5.0)]
    clusters = [0, 0, 1, 1]
    data = [Point(0.0, 1.0), Point(1.0, 0.0), Point(5.0, 6.0), Point(6.0, 5.0)]
    km.update_centroids(data, clusters)
    assert km.update_centroids(data, clusters) is False


def test_empty_cluster_keeps_its_centroid():
    km = KMeans(2)
    far = Point(100.0, 100.0)
    km.centroids = [Point(0.0, 0.0), far]
    km.update_centroids([Point(1.0, 1.0)], [0])
    assert km.centroids[1] == far


def test_k_one_puts_everything_in_one_cluster_at_the_mean():
    km = KMeans(1, rng=random.Random(0))
    clusters = km.fit(DATA)
    assert clusters == [0] * len(DATA)
    assert km.centroids[0].x == pytest.approx(statistics.fmean(p.x for p in DATA))
    assert km.centroids[0].y == pytest.approx(statistics.fmean(p.y for p in DATA))


@pytest.mark.parametrize("k", [2, 3, 4, 5])
def test_fit_result_is_consistent_with_centroids(k):
    km = KMeans(k, rng=random.Random(k))
    clusters = km.fit(DATA)
    assert len(clusters) == len(DATA)
    assert all(0 <= c < k for c in clusters)
    assert clusters == km.assign_clusters(DATA)
    assert km.iterations <= km.max_iterations


def test_fit_is_deterministic_with_same_seed():
    first = KMeans(3, rng=random.Random(42))
    second = KMeans(3, rng=random.Random(42))
    assert first.fit(DATA) == second.fit(DATA)
    assert first.centroids == second.centroids


def test_zero_iterations_keeps_initial_centroids():
    km = KMeans(3, max_iterations=0, rng=random.Random(7))
    km.fit(DATA)
    assert km.iterations == 0
    assert all(c in DATA for c in km.centroids)


def test_inertia_is_zero_when_centroids_sit_on_points():
    km = KMeans(2)
    data = [Point(1.0, 1.0), Point(4.0, 4.0)]
    km.centroids = list(data)
    assert km.inertia(data, [0, 1]) == 0.0


def test_inertia_equals_squared_distance_sum():
    km = KMeans(1)
    km.centroids = [Point(0.0, 0.0)]
    data = [Point(3.0, 4.0)]
    assert km.inertia(data, [0]) == pytest.approx(data[0].distance(km.centroids[0]) ** 2)


def test_main_prints_a_run_for_each_k(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    for k in range(2, 6):
        assert f"Running k-means with k = {k}" in out
    assert out.count("Converged after") == 4
    assert "Inertia (sum of squared distances):" in out