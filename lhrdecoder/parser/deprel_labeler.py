# -*- coding: utf-8 -*-

import torch
from torch import nn
from torch.nn import functional as F

from .constants import SOFTMAX, loss_criteria
from .labeling import LabelPredictor


class DeprelLabelerModel(nn.Module):
    """
    Network scoring the relation of an arc from the context vectors of the
    dependent and of its governor.

    The top token uses a trained root embedding as its governor vector.
    """
    def __init__(self, context_size, relations, loss_criterion=SOFTMAX):
        """
        :param context_size: size of the token context vectors
        :param relations: Alphabet of relations
        :param loss_criterion: 'softmax' to output probabilities or 'hinge' to
            output raw scores
        """
        super().__init__()
        if loss_criterion not in loss_criteria:
            raise ValueError('Unknown loss criterion: %s' % loss_criterion)

        self.context_size = context_size
        self.relations = relations
        self.loss_criterion = loss_criterion

        self.root_embedding = nn.Parameter(torch.empty(1, context_size))
        nn.init.xavier_uniform_(self.root_embedding)

        self.hidden = nn.Linear(2 * context_size, context_size)
        self.output = nn.Linear(context_size, len(relations))

    def forward(self, dependents, governors):
        """
        :param dependents: tensor (num_arcs, context_size)
        :param governors: tensor (num_arcs, context_size)
        :return: tensor (num_arcs, num_relations)
        """
        hidden = torch.tanh(self.hidden(torch.cat([dependents, governors], -1)))
        scores = self.output(hidden)

        if self.loss_criterion == SOFTMAX:
            return F.softmax(scores, -1)

        return scores

    def extra_repr(self):
        return 'context_size={}, num_relations={}, loss_criterion={}'.format(
            self.context_size, len(self.relations), self.loss_criterion)


class DeprelLabeler(LabelPredictor):
    """
    Predict the relations of a sentence with a DeprelLabelerModel.
    """
    def __init__(self, model, context_vectors):
        """
        :param model: a DeprelLabelerModel
        :param context_vectors: array or tensor (num_tokens, context_size)
            with the context vector of each token in sentence order
        """
        self.model = model
        self.context_vectors = torch.as_tensor(context_vectors,
                                               dtype=torch.float)

    def predict_labels(self, graph, position):
        if position >= len(self.context_vectors):
            return None

        head = graph.get_head(graph.elements[position])
        dependent = self.context_vectors[position].unsqueeze(0)
        if head is None:
            governor = self.model.root_embedding
        else:
            governor_position = graph.get_position(head)
            governor = self.context_vectors[governor_position].unsqueeze(0)

        self.model.eval()
        with torch.no_grad():
            prediction = self.model(dependent, governor)

        return prediction.squeeze(0).numpy()
