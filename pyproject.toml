[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minekit"
version = "0.1.0"
description = "Small, dependency-free data mining toolkit: k-means, k-medians, DBSCAN, hierarchical clustering, Apriori and FP-growth."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-mining",
    "clustering",
    "kmeans",
    "kmedians",
    "dbscan",
    "hierarchical-clustering",
    "apriori",
    "fp-growth",
    "association-rules",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minekit-kmeans = "minekit.kmeans:main"
minekit-kmedians = "minekit.kmedians:main"
minekit-dbscan = "minekit.dbscan:main"
minekit-hierarchy = "minekit.hierarchy:main"
minekit-apriori = "minekit.apriori:main"
minekit-fpgrowth = "minekit.fpgrowth:main"

[tool.hatch.build.targets.wheel]
packages = ["minekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
