"""Benchmark pointer representation building and dendrogram cuts."""

import pytest

from slink import (
    CallableMetric,
    ClusterExtractor,
    SingleLinkClusterer,
    SlinkBuilder,
    VectorMetric,
    to_linkage,
)
from slink.clustering import ThresholdSweep


@pytest.mark.benchmark
@pytest.mark.parametrize("distance", ["euclidean", "manhattan", "braycurtis"])
@pytest.mark.parametrize("data_size", [100, 500, 1000])
def bench_build_batched(benchmark, synthetic_embeddings, distance, data_size):
    """Benchmark building with a vectorised distance row per object."""
    embeddings = synthetic_embeddings[:data_size]
    if distance == "braycurtis":
        embeddings = embeddings - embeddings.min()
    metric = VectorMetric(embeddings, distance)

    def _build():
        return SlinkBuilder(metric).add_objects(range(data_size))

    model = benchmark(_build)
    assert len(model) == data_size


@pytest.mark.benchmark
@pytest.mark.parametrize("data_size", [100, 500])
def bench_build_pairwise(benchmark, synthetic_embeddings, data_size):
    """Benchmark building through a plain pairwise callable."""
    vector_metric = VectorMetric(synthetic_embeddings[:data_size])
    metric = CallableMetric(vector_metric.distance)

    def _build():
        return SlinkBuilder(metric).add_objects(range(data_size))

    model = benchmark(_build)
    assert len(model) == data_size


@pytest.mark.benchmark
@pytest.mark.parametrize("quantile", [0.1, 0.5, 0.99])
def bench_extract(benchmark, fitted_model, quantile):
    """Benchmark cutting a fitted dendrogram at a threshold."""
    levels = fitted_model.merge_levels()
    threshold = float(levels[int(quantile * (len(levels) - 1))])
    extractor = ClusterExtractor()

    clusters = benchmark(extractor.extract, fitted_model, threshold)
    assert sum(len(cluster) for cluster in clusters) == len(fitted_model)


@pytest.mark.benchmark
@pytest.mark.parametrize("n_clusters", [5, 10, 50])
def bench_extract_n_clusters(benchmark, fitted_model, n_clusters):
    """Benchmark cutting a fitted dendrogram at a cluster count."""
    extractor = ClusterExtractor()
    clusters = benchmark(extractor.extract_n_clusters, fitted_model, n_clusters)
    assert len(clusters) <= n_clusters


@pytest.mark.benchmark
def bench_to_linkage(benchmark, fitted_model):
    """Benchmark linkage matrix export."""
    Z = benchmark(to_linkage, fitted_model)
    assert Z.shape == (len(fitted_model) - 1, 4)


@pytest.mark.benchmark
@pytest.mark.parametrize("n_clusters", [5, 10, 20])
def bench_clusterer_fit(benchmark, synthetic_embeddings, n_clusters):
    """Benchmark the estimator end to end."""
    embeddings = synthetic_embeddings[:1000]
    clusterer = SingleLinkClusterer(n_clusters=n_clusters)

    def _fit():
        clusterer.fit(embeddings)
        return clusterer

    result = benchmark(_fit)
    assert result.n_clusters_ <= n_clusters


@pytest.mark.benchmark
def bench_threshold_sweep(benchmark, fitted_model, synthetic_embeddings):
    """Benchmark scoring a set of cuts with the silhouette."""
    levels = fitted_model.merge_levels()
    sweep = ThresholdSweep(thresholds=levels[-20:].tolist())

    results = benchmark(sweep.run, fitted_model, synthetic_embeddings[:1000])
    assert len(results) == 20
