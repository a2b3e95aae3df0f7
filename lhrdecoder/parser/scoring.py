# -*- coding: utf-8 -*-

import numpy as np
from scipy.spatial.distance import cdist

from .arc_scores import ArcScores


def cosine_arc_scores(context_vectors, latent_heads, root_vector):
    """
    Score every arc by the cosine similarity between the latent head vector
    of the dependent and the context vector of the governor.

    :param context_vectors: array (num_tokens, size) with the context vector
        of each token
    :param latent_heads: array (num_tokens, size) with the latent head vector
        of each token
    :param root_vector: array (size,) representing the virtual root
    :return: ArcScores. Arcs with undefined similarity (zero vectors) are
        left out.
    """
    context_vectors = np.asarray(context_vectors, dtype=np.float64)
    latent_heads = np.asarray(latent_heads, dtype=np.float64)
    root_vector = np.asarray(root_vector, dtype=np.float64).reshape(1, -1)

    if context_vectors.shape != latent_heads.shape:
        raise ValueError('Context vectors %s and latent heads %s must have '
                         'the same shape'
                         % (context_vectors.shape, latent_heads.shape))

    # governors are the root (column 0) followed by the tokens
    governors = np.concatenate([root_vector, context_vectors], 0)
    with np.errstate(divide='ignore', invalid='ignore'):
        similarities = 1 - cdist(latent_heads, governors, 'cosine')

    return ArcScores.from_matrix(similarities)
