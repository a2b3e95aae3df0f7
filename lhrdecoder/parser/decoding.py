# -*- coding: utf-8 -*-

import os

from joblib import Parallel, delayed

from ..classifier.utils import get_logger
from .arc_scores import ArcScores
from .constants import ROOT
from .cycles import CycleFixer
from .dependency_graph import DependencyGraph
from .errors import DecodingError, EmptyInputError


logger = get_logger()
os.environ['LOKY_PICKLER'] = 'pickle'


class DecodingInput(object):
    """
    A sentence to be decoded in a batch.
    """
    def __init__(self, sentence_id, elements, scores, labeler=None):
        """
        :param sentence_id: anything identifying the sentence to the caller
        :param elements: token ids of the sentence
        :param scores: ArcScores of the sentence
        :param labeler: optional RelationLabeler for this sentence
        """
        self.sentence_id = sentence_id
        self.elements = elements
        self.scores = scores
        self.labeler = labeler


class DecodingOutcome(object):
    """
    Result of decoding a sentence in a batch: either a graph or an error.
    """
    def __init__(self, sentence_id, graph=None, error=None):
        self.sentence_id = sentence_id
        self.graph = graph
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return 'DecodingOutcome(%r, %r)' % (self.sentence_id, self.graph)
        return 'DecodingOutcome(%r, error=%r)' % (self.sentence_id, self.error)


def assign_heads(graph: DependencyGraph, scores: ArcScores):
    """
    Assign to each token of the graph its highest scoring governor.

    The token with the best root score becomes the top of the graph and the
    others are attached independently to their best governor other than the
    root. The result may contain cycles.

    :param graph: the graph to fill
    :param scores: ArcScores covering the tokens of the graph
    :return: the same graph
    """
    top, top_score = scores.find_highest_scoring_top()
    graph.set_attachment_score(top, top_score)

    for dependent in graph.elements:
        if dependent == top:
            continue

        governor, score = scores.find_highest_scoring_head(
            dependent, excluding=[ROOT])
        graph.set_arc(dependent, governor, score, allow_cycle=True)

    logger.debug('Greedy heads: %r' % graph)

    return graph


def fix_cycles(graph, scores):
    """
    Repair the cycles of a greedily assigned graph in place.

    :return: the number of repaired cycles
    """
    return CycleFixer(graph, scores).fix_cycles()


def decode_tree(elements, scores: ArcScores, labeler=None) -> DependencyGraph:
    """
    Decode the dependency tree of a sentence from its attachment scores.

    The scores are validated before a graph is created, so no partial graph
    is produced if they are not valid.

    :param elements: token ids of the sentence, in sentence order
    :param scores: ArcScores with the candidate governors of each token
    :param labeler: optional RelationLabeler to annotate the tree
    :return: a DependencyGraph which is a spanning tree with a single root
    :raise EmptyInputError: if there are no tokens
    :raise NoCandidateError: if the scores do not cover the sentence or some
        token has no admissible governor
    :raise UnresolvableCycleError: if a cycle cannot be repaired
    """
    elements = list(elements)
    if not elements:
        raise EmptyInputError('Cannot decode a sentence without tokens')

    scores.check(elements)

    graph = DependencyGraph(elements)
    assign_heads(graph, scores)
    num_fixed = fix_cycles(graph, scores)
    if num_fixed:
        logger.debug('Fixed %d cycle(s)' % num_fixed)

    graph.check_tree()

    if labeler is not None:
        labeler.assign_labels(graph)

    return graph


def _decode_input(decoding_input: DecodingInput) -> DecodingOutcome:
    try:
        graph = decode_tree(decoding_input.elements, decoding_input.scores,
                            decoding_input.labeler)
    except DecodingError as e:
        return DecodingOutcome(decoding_input.sentence_id, error=e)

    return DecodingOutcome(decoding_input.sentence_id, graph)


def batch_decode(inputs, n_jobs=1):
    """
    Decode many sentences, possibly in parallel.

    Failures are confined to their sentence: the returned outcome has the
    error and the other sentences are decoded normally.

    This function uses multiprocessing instead of multithreading.

    :param inputs: list of DecodingInput objects
    :param n_jobs: number of jobs to run in parallel. 1 avoids parallelization
    :return: list of DecodingOutcome objects in the same order as `inputs`
    """
    p = Parallel(n_jobs=n_jobs)
    outcomes = p(delayed(_decode_input)(decoding_input)
                 for decoding_input in inputs)

    for outcome in outcomes:
        if not outcome.ok:
            logger.warning('Could not decode sentence %s: %s (%s)'
                           % (outcome.sentence_id, outcome.error,
                              outcome.error.__class__.__name__))

    return outcomes
