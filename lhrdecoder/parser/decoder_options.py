import json

from ..classifier.options import OptionParser
from .constants import ROOT_RELATION


class DecoderOptionParser(OptionParser):
    '''Options for the dependency decoder.'''
    def __init__(self):
        super(DecoderOptionParser, self).__init__(
            prog='lhrdecoder',
            description='Decode dependency trees from attachment scores.')
        parser = self.parser

        parser.add_argument('--scores', required=True,
                            help="""File (.npz) with one attachment score
                            matrix per sentence, in the same order as the
                            sentences. Each matrix has shape (n, n + 1): cell
                            [m, 0] is the score of token m attached to the
                            root and [m, h + 1] the score of the arc h -> m.
                            Masked arcs should have -inf.""")
        parser.add_argument('--label_scores',
                            help="""File (.npz) with one relation score matrix
                            per sentence, with shape (n, number of labels).
                            Requires --labels.""")
        parser.add_argument('--labels',
                            help="""Text file with the relation vocabulary, one
                            label per line, in the order of the columns of the
                            label scores.""")
        parser.add_argument('--constraints',
                            help="""JSON file mapping UPOS tags to the list of
                            relations admissible for tokens with that tag.
                            Tags not in the file admit any relation.""")
        parser.add_argument('--root_relation', default=ROOT_RELATION,
                            help='Relation of the top token of each sentence.')

    def parse_args(self, args=None):
        options = super(DecoderOptionParser, self).parse_args(args)
        if options.label_scores and not options.labels:
            self.parser.error('--label_scores requires --labels')

        return options


def load_constraints(path):
    """
    Read the admissible relations of each UPOS tag from a JSON file.

    :return: dictionary mapping UPOS tags to sets of relations
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError('Constraints in %s should be a JSON object' % path)

    return {upos: set(relations) for upos, relations in data.items()}
