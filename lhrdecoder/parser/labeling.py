# -*- coding: utf-8 -*-

import numpy as np
from scipy.special import softmax

from ..classifier.utils import get_logger
from .constants import ROOT_RELATION


logger = get_logger()


class LabelPredictor(object):
    '''Interface of the objects that score the relations of a token.'''
    def predict_labels(self, graph, position):
        """
        Score the relations of the token at a given position.

        :param graph: the decoded DependencyGraph
        :param position: position of the token in the sentence
        :return: 1d array with a score for each label in the vocabulary, or
            None if there is no prediction for the token
        """
        raise NotImplementedError


class LabelSelector(object):
    '''Interface of the objects that choose a relation from label scores.'''
    def select_label(self, distribution, position, governor_position):
        """
        :param distribution: 1d array with a score for each label
        :param position: position of the dependent in the sentence
        :param governor_position: position of the governor, or None if the
            token is attached to the root
        :return: the label name
        """
        raise NotImplementedError


class RelationLabeler(object):
    """
    Annotate a decoded graph with one relation per token.
    """
    def __init__(self, predictor, selector):
        """
        :param predictor: an object with a `predict_labels(graph, position)`
            method, such as a LabelPredictor
        :param selector: an object with a `select_label(distribution,
            position, governor_position)` method, such as a LabelSelector
        """
        self.predictor = predictor
        self.selector = selector

    def assign_labels(self, graph):
        """
        Set the label of every token in the graph, in sentence order.

        Tokens for which the predictor gives nothing are left unlabeled.

        :return: the number of labeled tokens
        """
        num_labeled = 0
        for position, token in enumerate(graph.elements):
            distribution = self.predictor.predict_labels(graph, position)
            if distribution is None:
                logger.debug('No relation scores for token %r' % token)
                continue

            head = graph.get_head(token)
            governor_position = None if head is None \
                else graph.get_position(head)
            label = self.selector.select_label(distribution, position,
                                               governor_position)
            graph.set_label(token, label)
            num_labeled += 1

        return num_labeled


class ScoreMatrixLabelPredictor(LabelPredictor):
    """
    Label predictor over precomputed relation scores, one row per token.
    """
    def __init__(self, label_scores, normalize=True):
        """
        :param label_scores: array (num_tokens, num_labels) or a list of 1d
            arrays; rows may be None for tokens without prediction
        :param normalize: apply a softmax to each row
        """
        self.label_scores = label_scores
        self.normalize = normalize

    def predict_labels(self, graph, position):
        if position >= len(self.label_scores):
            return None

        row = self.label_scores[position]
        if row is None:
            return None

        row = np.asarray(row, dtype=np.float64)
        if self.normalize:
            row = softmax(row)

        return row


class BestLabelSelector(LabelSelector):
    '''Choose the highest scoring label without any constraint.'''
    def __init__(self, alphabet):
        self.alphabet = alphabet

    def select_label(self, distribution, position, governor_position):
        return self.alphabet.get_label_name(int(np.argmax(distribution)))


class MorphoDeprelSelector(LabelSelector):
    """
    Choose the best relation compatible with the grammatical category of the
    token and with its attachment to the root.

    The root relation is the only one admissible for the top token and it is
    not admissible for any other token. Other relations are checked against
    the admissible relations of the token's UPOS tag; tags without an entry
    admit any relation.
    """
    def __init__(self, alphabet, upos_tags, admissible_relations=None,
                 root_relation=ROOT_RELATION):
        """
        :param alphabet: Alphabet of relations
        :param upos_tags: UPOS tag of each token of the sentence
        :param admissible_relations: dictionary mapping UPOS tags to
            collections of relations
        :param root_relation: name of the relation of the top token
        """
        self.alphabet = alphabet
        self.upos_tags = upos_tags
        self.admissible_relations = admissible_relations or {}
        self.root_relation = root_relation

    def is_admissible(self, label, position, governor_position):
        if governor_position is None:
            return label == self.root_relation
        if label == self.root_relation:
            return False

        upos = self.upos_tags[position]
        admissible = self.admissible_relations.get(upos)
        return admissible is None or label in admissible

    def select_label(self, distribution, position, governor_position):
        ranking = np.argsort(-np.asarray(distribution), kind='stable')
        for label_id in ranking:
            label = self.alphabet.get_label_name(int(label_id))
            if self.is_admissible(label, position, governor_position):
                return label

        best = self.alphabet.get_label_name(int(ranking[0]))
        logger.warning('No admissible relation for the token at position %d, '
                       'using %s' % (position, best))
        return best
