import numpy as np
import pytest

from lhrdecoder import ROOT, cosine_arc_scores, decode_tree


def test_cosine_scores():
    context_vectors = np.array([[1., 0.], [0., 1.], [1., 1.]])
    latent_heads = np.array([[0., 2.], [1., 0.], [0., -1.]])
    root_vector = np.array([1., 0.])

    scores = cosine_arc_scores(context_vectors, latent_heads, root_vector)

    assert sorted(scores) == [0, 1, 2]
    assert scores.get_score(0, ROOT) == pytest.approx(0.)
    assert scores.get_score(0, 1) == pytest.approx(1.)
    assert scores.get_score(0, 2) == pytest.approx(np.sqrt(0.5))
    assert scores.get_score(1, ROOT) == pytest.approx(1.)
    assert scores.get_score(2, 1) == pytest.approx(-1.)
    # no self arcs
    assert scores.get_score(0, 0) is None


def test_cosine_scores_decode():
    random_state = np.random.RandomState(7)
    context_vectors = random_state.normal(size=[6, 5])
    latent_heads = random_state.normal(size=[6, 5])
    root_vector = random_state.normal(size=5)

    scores = cosine_arc_scores(context_vectors, latent_heads, root_vector)
    graph = decode_tree(range(6), scores)

    assert graph.is_tree()


def test_cosine_scores_shapes():
    with pytest.raises(ValueError):
        cosine_arc_scores(np.zeros([3, 2]), np.zeros([2, 2]), np.zeros(2))
