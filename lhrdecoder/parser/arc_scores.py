# -*- coding: utf-8 -*-

from types import MappingProxyType

import numpy as np

from .constants import ROOT
from .errors import NoCandidateError


def governor_rank(governor):
    """
    Sort key used to break ties between governors: the root comes first, then
    lower token ids.
    """
    return -1 if governor is ROOT else governor


def _is_better(governor, score, best_governor, best_score):
    if score != best_score:
        return score > best_score
    return governor_rank(governor) < governor_rank(best_governor)


class ArcScores(object):
    """
    Attachment scores of a sentence.

    Each dependent token id is mapped to a dictionary from candidate governors
    (token ids or ROOT) to real valued scores. There is no assumption about the
    range of the scores. The table is read-only once created.
    """
    def __init__(self, scores):
        """
        :param scores: mapping dependent -> {governor -> score}. It is copied.
        """
        self._scores = {dependent: MappingProxyType(dict(candidates))
                        for dependent, candidates in scores.items()}

    @classmethod
    def from_matrix(cls, matrix):
        """
        Create the scores from a matrix with shape (n, n + 1).

        Cell [m, 0] has the score for token m being attached to the root and
        [m, h + 1] the score of the arc (h, m). Cells with -inf (masked arcs),
        NaN and the arcs from a token to itself are not included.

        :param matrix: array-like with shape (n, n + 1)
        :return: a new ArcScores object
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[1] != matrix.shape[0] + 1:
            raise ValueError('Expected a score matrix with shape (n, n + 1), '
                             'got %s' % (matrix.shape,))

        scores = {}
        for m, row in enumerate(matrix):
            candidates = {}
            if row[0] > -np.inf:
                candidates[ROOT] = float(row[0])

            for h in np.nonzero(row[1:] > -np.inf)[0]:
                h = int(h)
                if h != m:
                    candidates[h] = float(row[h + 1])

            scores[m] = candidates

        return cls(scores)

    def __reduce__(self):
        # mapping proxies can't be pickled
        scores = {dependent: dict(candidates)
                  for dependent, candidates in self._scores.items()}
        return self.__class__, (scores,)

    def __len__(self):
        return len(self._scores)

    def __iter__(self):
        return iter(self._scores)

    def __contains__(self, dependent):
        return dependent in self._scores

    def __getitem__(self, dependent):
        return self._scores[dependent]

    def keys(self):
        return self._scores.keys()

    def get_score(self, dependent, governor):
        """
        Return the score of the arc (governor, dependent), or None if it is not
        a candidate.
        """
        candidates = self._scores.get(dependent)
        if candidates is None:
            return None
        return candidates.get(governor)

    def check(self, elements):
        """
        Check that these scores cover exactly the given token ids and that
        every token can be attached to the root.

        :param elements: the token ids of the sentence
        :raise NoCandidateError: if the scores are not valid for the sentence
        """
        element_set = set(elements)
        for dependent in elements:
            if dependent not in self._scores:
                raise NoCandidateError(
                    'No scores for token %d' % dependent, dependent)

            candidates = self._scores[dependent]
            if ROOT not in candidates:
                raise NoCandidateError(
                    'Token %d has no score for the root' % dependent, dependent)

            for governor in candidates:
                if governor is not ROOT and governor not in element_set:
                    raise NoCandidateError(
                        'Token %d has a score for the unknown governor %r'
                        % (dependent, governor), dependent)

        extra = set(self._scores) - element_set
        if extra:
            raise NoCandidateError(
                'Scores given for tokens not in the sentence: %s'
                % sorted(extra))

    def find_highest_scoring_top(self):
        """
        Find the token with the highest score for being attached to the root.

        Among equal scores, the lowest token id wins.

        :return: a tuple (token_id, score)
        :raise NoCandidateError: if no token has a root score
        """
        best = None
        for dependent, candidates in self._scores.items():
            if ROOT not in candidates:
                continue

            score = candidates[ROOT]
            if best is None or _is_better(dependent, score, *best):
                best = (dependent, score)

        if best is None:
            raise NoCandidateError('No token can be attached to the root')

        return best

    def find_highest_scoring_head(self, dependent, excluding=()):
        """
        Find the best governor of a dependent, ignoring the dependent itself
        and the governors in `excluding`.

        Among equal scores the root comes first, then the lowest token id.

        :param dependent: a token id
        :param excluding: governors (token ids or ROOT) not to be considered
        :return: a tuple (governor, score)
        :raise NoCandidateError: if no admissible governor remains
        """
        if dependent not in self._scores:
            raise NoCandidateError(
                'No scores for token %r' % (dependent,), dependent)

        excluding = set(excluding)
        best = None
        for governor, score in self._scores[dependent].items():
            if governor == dependent or governor in excluding:
                continue

            if best is None or _is_better(governor, score, *best):
                best = (governor, score)

        if best is None:
            raise NoCandidateError(
                'No admissible governor for token %r' % (dependent,),
                dependent)

        return best
