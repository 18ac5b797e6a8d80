import pytest

from minekit.dbscan import DBSCAN, PointType, main
from minekit.geometry import SAMPLE_POINTS, Point

DATA = list(SAMPLE_POINTS)
C, B, N = PointType.CORE, PointType.BORDER, PointType.NOISE


def test_region_query_excludes_the_point_itself():
    model = DBSCAN(100.0, 1)
    neighbours = model.region_query(DATA, 3)
    assert 3 not in neighbours
    assert sorted(neighbours) == [i for i in range(len(DATA)) if i != 3]


def test_region_query_includes_points_exactly_at_eps():
    data = [Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0)]
    assert DBSCAN(1.0, 1).region_query(data, 0) == [1]


def test_worked_example_on_sample_points():
    clusters, types = DBSCAN(1.5, 2).fit(DATA)
    assert clusters == [1, None, 1, None, 1, 2, 2, 2, None, None]
    assert types == [B, N, C, N, B, B, C, B, N, N]


def test_noise_seen_first_becomes_border_later():
    data = [Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0)]
    clusters, types = DBSCAN(1.0, 2).fit(data)
    assert clusters == [1, 1, 1]
    assert types[1] is C
    assert types[0] is B and types[2] is B


def test_large_eps_puts_everything_in_one_cluster():
    clusters, types = DBSCAN(100.0, 2).fit(DATA)
    assert set(clusters) == {1}
    assert all(t is C for t in types)


def test_unreachable_min_points_makes_everything_noise():
    clusters, types = DBSCAN(100.0, len(DATA)).fit(DATA)
    assert clusters == [None] * len(DATA)
    assert types == [N] * len(DATA)


def test_empty_data_gives_empty_result():
    assert DBSCAN(1.0, 2).fit([]) == ([], [])


@pytest.mark.parametrize("eps", [1.5, 2.0, 2.5, 3.0])
def test_invariants_hold_for_sample_parameters(eps):
    model = DBSCAN(eps, 2)
    clusters, types = model.fit(DATA)
    assert len(clusters) == len(types) == len(DATA)
    for i, (cluster, kind) in enumerate(zip(clusters, types)):
        neighbours = model.region_query(DATA, i)
        if cluster is None:
            assert kind is N
            assert len(neighbours) < model.min_points
        if kind is C:
            assert len(neighbours) >= model.min_points
            assert all(clusters[n] == cluster for n in neighbours)
        assert kind is not PointType.UNCLASSIFIED
    ids = sorted({c for c in clusters if c is not None})
    assert ids == list(range(1, len(ids) + 1))


def test_growing_eps_never_adds_noise():
    noise_counts = [DBSCAN(eps, 2).fit(DATA)[0].count(None) for eps in (1.5, 2.0, 2.5, 3.0)]
    assert noise_counts == sorted(noise_counts, reverse=True)


def test_main_prints_each_parameter_set(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Running DBSCAN with eps = 1.5, min_points = 2" in out
    assert "Running DBSCAN with eps = 3, min_points = 2" in out
    assert out.count("Found ") == 4