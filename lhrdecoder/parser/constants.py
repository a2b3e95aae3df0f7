# -*- coding: utf-8 -*-

from enum import Enum, auto


class Governor(Enum):
    """
    Special governors of a dependency arc.

    ROOT stands for the virtual sentence root; it is never a token id.
    """
    ROOT = auto()

    def __repr__(self):
        return 'ROOT'


ROOT = Governor.ROOT

ROOT_RELATION = 'root'

# loss criteria of the relation labeler
SOFTMAX = 'softmax'
HINGE = 'hinge'
loss_criteria = (SOFTMAX, HINGE)
