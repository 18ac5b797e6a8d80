# minekit

A small toolkit of classic data mining algorithms in plain Python, with no
third-party dependencies.

Clustering of points in the plane:

- **k-means** (`minekit.kmeans.KMeans`): Euclidean distance, mean centroids.
- **k-medians** (`minekit.kmedians.KMedians`): Manhattan distance,
  coordinate-wise median centroids.
- **DBSCAN** (`minekit.dbscan.DBSCAN`): density-based clustering that labels
  each point as core, border or noise (`minekit.dbscan.PointType`).
- **Agglomerative hierarchical clustering**
  (`minekit.hierarchy.HierarchicalClustering`) with single, complete or
  average linkage (`minekit.hierarchy.LinkageMethod`), producing a dendrogram
  of `minekit.hierarchy.Cluster` nodes.

Frequent itemset mining and association rules:

- **Apriori** (`minekit.apriori.apriori`)
- **FP-growth** (`minekit.fpgrowth.fp_growth`, built on `minekit.fpgrowth.FPTree`)

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Points

All clustering algorithms work on `minekit.geometry.Point` values, which are
frozen dataclasses:

```python
from minekit.geometry import Point

a = Point(1.0, 1.0)
b = Point(4.0, 5.0)
a.distance(b)            # 5.0, Euclidean
a.manhattan_distance(b)  # 7.0
a + b                    # Point(x=5.0, y=6.0)
a.scale(2.0)             # Point(x=2.0, y=2.0)
```

## Clustering

```python
import random

from minekit.geometry import Point
from minekit.kmeans import KMeans
from minekit.dbscan import DBSCAN
from minekit.hierarchy import HierarchicalClustering, LinkageMethod

data = [Point(1.0, 1.0), Point(2.0, 2.0), Point(6.0, 8.0), Point(8.0, 6.0)]

kmeans = KMeans(2, 100, rng=random.Random(1))
labels = kmeans.fit(data)             # one cluster index per point
print(kmeans.centroids, kmeans.iterations)
print(kmeans.inertia(data, labels))   # sum of squared distances

clusters, point_types = DBSCAN(2.0, 1).fit(data)
# clusters: cluster ids numbered from 1, None for noise

clustering = HierarchicalClustering(data, LinkageMethod.AVERAGE)
root = clustering.fit()
print("\n".join(clustering.dendrogram_lines(root)))
```

Initial centroids for `KMeans` and `KMedians` are drawn at random from the
data, with replacement. Pass `rng=random.Random(seed)` for repeatable
results. `KMedians.inertia` returns the sum of Manhattan distances, and
`minekit.kmedians.median` is the median helper it uses.

For `DBSCAN(eps, min_points)`, `min_points` counts the neighbours within `eps`
other than the point itself.

## Association rules

```python
from minekit.apriori import apriori
from minekit.fpgrowth import fp_growth

transactions = [
    {"a", "b", "c", "d"},
    {"b", "c", "d"},
    {"a", "e", "f", "g", "h"},
]

itemsets, support_counts, rules = apriori(transactions, 0.4, 0.75)
itemsets_with_support, rules = fp_growth([sorted(t) for t in transactions], 0.4, 0.75)

for rule in rules:
    print(rule.antecedent, "=>", rule.consequent, rule.confidence)
```

Itemsets are tuples of items. `apriori` returns the frequent itemsets, the
support count of every candidate it counted, and the rules; `fp_growth`
returns `(itemset, support)` pairs and the rules. Both produce
`minekit.apriori.AssociationRule` values.

`min_support` is a fraction of the number of transactions; the required
count is rounded up. Rules are kept when their confidence is at least
`min_confidence`.

## Command-line demos

Each algorithm has a demo that runs it on a small built-in data set and
prints the result:

```
minekit-kmeans [--seed N]
minekit-kmedians [--seed N]
minekit-dbscan
minekit-hierarchy
minekit-apriori [--min-support F] [--min-confidence F]
minekit-fpgrowth [--min-support F] [--min-confidence F]
```

`minekit-kmeans` and `minekit-kmedians` run for k = 2 to 5;
`minekit-dbscan` tries eps = 1.5, 2.0, 2.5 and 3.0 with `min_points` 2;
`minekit-hierarchy` runs every linkage method; `minekit-fpgrowth` also
prints the FP-tree and its header table.

## Limits

The commands only run on their built-in sample data: nothing reads points or
transactions from files, and nothing writes results anywhere but standard
output. There is no plotting of dendrograms or clusters; dendrograms are
available as text lines only.