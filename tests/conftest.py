import pytest

from lhrdecoder import ArcScores, ROOT


@pytest.fixture
def cyclic_scores():
    """
    Scores whose greedy heads make the cycle 1 <-> 2, detached from the top
    token 0.
    """
    return ArcScores({
        0: {ROOT: 0.9, 1: 0.1, 2: 0.2},
        1: {ROOT: 0.5, 0: 0.3, 2: 0.8},
        2: {ROOT: 0.4, 0: 0.25, 1: 0.85},
    })
