"""Tests for landmark selection policies."""

import pytest
import jax.numpy as jnp
import numpy as np

from nystroem.data.formats import LandmarkIndices, LandmarkPoints
from nystroem.errors import ConvergenceError, InvalidArgumentError
from nystroem.selection import (
    KMeansSelection,
    OrderedSelection,
    PointSelectionPolicy,
    RandomSelection,
    make_policy,
)


def test_ordered_selects_first_points(sample_data):
    landmarks = OrderedSelection().select(sample_data, 7)
    
    assert isinstance(landmarks, LandmarkIndices)
    assert landmarks.rank == 7
    assert jnp.array_equal(landmarks.indices, jnp.arange(7))


def test_ordered_is_deterministic(sample_data):
    policy = OrderedSelection()
    first = policy.select(sample_data, 5)
    second = policy.select(sample_data, 5)
    assert jnp.array_equal(first.indices, second.indices)


def test_random_selects_distinct_indices_in_range(sample_data):
    landmarks = RandomSelection(seed=0).select(sample_data, 15)
    indices = np.asarray(landmarks.indices)
    
    assert isinstance(landmarks, LandmarkIndices)
    assert indices.shape == (15,)
    assert len(set(indices.tolist())) == 15
    assert indices.min() >= 0
    assert indices.max() < sample_data.shape[0]


def test_random_can_select_every_point(sample_data):
    landmarks = RandomSelection(seed=3).select(sample_data, 40)
    assert sorted(np.asarray(landmarks.indices).tolist()) == list(range(40))


def test_random_varies_between_calls(sample_data):
    """Repeated draws should rarely repeat the same landmark set."""
    policy = RandomSelection(seed=1)
    draws = {
        tuple(sorted(np.asarray(policy.select(sample_data, 5).indices).tolist()))
        for _ in range(10)
    }
    assert len(draws) > 1


def test_random_seed_reproducible(sample_data):
    a = RandomSelection(seed=7)
    b = RandomSelection(seed=7)
    for _ in range(3):
        assert jnp.array_equal(
            a.select(sample_data, 6).indices,
            b.select(sample_data, 6).indices,
        )


def test_random_without_seed_draws_one():
    policy = RandomSelection()
    assert isinstance(policy.seed, int)


def test_kmeans_returns_synthesized_points(sample_data):
    landmarks = KMeansSelection(seed=0).select(sample_data, 4)
    
    assert isinstance(landmarks, LandmarkPoints)
    assert landmarks.points.shape == (4, 3)
    assert jnp.all(jnp.isfinite(landmarks.points))
    assert landmarks.points.dtype == sample_data.dtype


def test_kmeans_seed_reproducible(sample_data):
    first = KMeansSelection(seed=5).select(sample_data, 4)
    second = KMeansSelection(seed=5).select(sample_data, 4)
    assert jnp.allclose(first.points, second.points)


def test_kmeans_centroids_recover_separated_clusters():
    """Tight, well separated groups should yield one centroid per group."""
    centers = jnp.array([[0.0, 0.0], [10.0, 10.0], [-10.0, 10.0]])
    offsets = jnp.array([[0.1, 0.0], [-0.1, 0.0], [0.0, 0.1], [0.0, -0.1]])
    data = (centers[:, None, :] + offsets[None, :, :]).reshape(-1, 2)
    
    landmarks = KMeansSelection(max_iter=50, n_init=5, seed=0).select(data, 3)
    found = np.asarray(landmarks.points)
    for center in np.asarray(centers):
        assert np.min(np.linalg.norm(found - center, axis=1)) < 1e-6


def test_kmeans_too_few_distinct_points():
    data = jnp.array([[1.0, 2.0]] * 4 + [[3.0, 4.0]] * 4)
    with pytest.raises(ConvergenceError):
        KMeansSelection(seed=0).select(data, 3)


def test_kmeans_rank_exceeding_points_is_convergence_error(sample_data):
    with pytest.raises(ConvergenceError):
        KMeansSelection(seed=0).select(sample_data[:3], 5)


@pytest.mark.parametrize(
    "policy", [OrderedSelection(), RandomSelection(seed=0), KMeansSelection(seed=0)]
)
def test_zero_rank_is_invalid(policy, sample_data):
    with pytest.raises(InvalidArgumentError):
        policy.select(sample_data, 0)


@pytest.mark.parametrize("policy", [OrderedSelection(), RandomSelection(seed=0)])
def test_index_policies_reject_rank_above_n(policy, sample_data):
    with pytest.raises(InvalidArgumentError):
        policy.select(sample_data, 41)


def test_non_integer_rank_is_invalid(sample_data):
    with pytest.raises(InvalidArgumentError):
        OrderedSelection().select(sample_data, 2.5)


def test_policies_satisfy_protocol():
    for policy in (OrderedSelection(), RandomSelection(seed=0), KMeansSelection()):
        assert isinstance(policy, PointSelectionPolicy)


def test_make_policy():
    assert isinstance(make_policy("ordered"), OrderedSelection)
    assert make_policy("random", seed=4).seed == 4
    assert make_policy("kmeans", max_iter=10).max_iter == 10


def test_make_policy_rejects_unknown_name():
    with pytest.raises(InvalidArgumentError, match="Unknown sampling scheme"):
        make_policy("farthest")


def test_kmeans_rejects_bad_iterations():
    with pytest.raises(ValueError):
        KMeansSelection(max_iter=0)
    with pytest.raises(InvalidArgumentError):
        make_policy("kmeans", max_iter=0)


@pytest.mark.filterwarnings("ignore::sklearn.exceptions.ConvergenceWarning")
def test_kmeans_ignores_warnings_from_other_threads():
    """A ConvergenceWarning raised elsewhere must not fail a valid selection."""
    import threading
    import warnings
    
    import jax.random as random
    from sklearn.exceptions import ConvergenceWarning
    
    data = random.uniform(random.PRNGKey(0), (400, 2)) * 100.0
    stop = threading.Event()
    
    def emit_warnings():
        while not stop.is_set():
            warnings.warn("unrelated fit did not converge", ConvergenceWarning)
    
    emitter = threading.Thread(target=emit_warnings)
    emitter.start()
    try:
        policy = KMeansSelection(seed=0)
        for _ in range(20):
            landmarks = policy.select(data, 10)
            assert landmarks.points.shape == (10, 2)
    finally:
        stop.set()
        emitter.join()
