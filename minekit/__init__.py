"""Clustering (k-means, k-medians, DBSCAN, hierarchical) and frequent itemset mining (Apriori, FP-growth)."""

__version__ = "0.1.0"