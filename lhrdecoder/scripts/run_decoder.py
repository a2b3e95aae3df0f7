# -*- coding: utf-8 -*-

"""
Decode dependency trees for the sentences of a conllu file, given the
attachment scores computed for them.

It also serves as an example of API usage.
"""

import logging
import sys
import time

import numpy as np

from lhrdecoder import ArcScores, Alphabet, DecodingInput, \
    DependencyWriter, RelationLabeler, batch_decode, read_instances
from lhrdecoder.classifier import utils
from lhrdecoder.parser.decoder_options import DecoderOptionParser, \
    load_constraints
from lhrdecoder.parser.labeling import BestLabelSelector, \
    MorphoDeprelSelector, ScoreMatrixLabelPredictor


def load_matrices(path):
    """Return the arrays stored in a .npz file, in the order they were saved"""
    with np.load(path) as data:
        return [data[name] for name in data.files]


def create_labeler(label_scores, instance, alphabet, constraints,
                   root_relation):
    predictor = ScoreMatrixLabelPredictor(label_scores)
    if constraints is None:
        selector = BestLabelSelector(alphabet)
    else:
        selector = MorphoDeprelSelector(alphabet, instance.get_all_upos(),
                                        constraints, root_relation)

    return RelationLabeler(predictor, selector)


def main(args=None):
    options = DecoderOptionParser().parse_args(args)
    level = logging.DEBUG if options.verbose else logging.INFO
    logger = utils.get_logger(level)

    tic = time.time()
    instances = read_instances(options.file or sys.stdin)
    score_matrices = load_matrices(options.scores)
    if len(score_matrices) != len(instances):
        logger.error('Found %d sentences but %d score matrices'
                     % (len(instances), len(score_matrices)))
        return 1

    label_matrices = None
    alphabet = None
    constraints = None
    if options.label_scores:
        label_matrices = load_matrices(options.label_scores)
        if len(label_matrices) != len(instances):
            logger.error('Found %d sentences but %d label score matrices'
                         % (len(instances), len(label_matrices)))
            return 1

        alphabet = Alphabet.from_file(options.labels)
        if options.constraints:
            constraints = load_constraints(options.constraints)

    inputs = []
    for i, instance in enumerate(instances):
        labeler = None
        if label_matrices is not None:
            labeler = create_labeler(label_matrices[i], instance, alphabet,
                                     constraints, options.root_relation)

        scores = ArcScores.from_matrix(score_matrices[i])
        inputs.append(DecodingInput(i + 1, instance.token_ids, scores,
                                    labeler))

    logger.info('Number of sentences: %d' % len(inputs))
    outcomes = batch_decode(inputs, n_jobs=options.n_jobs)

    if options.output:
        with DependencyWriter().open(options.output) as writer:
            for instance, outcome in zip(instances, outcomes):
                writer.write(instance, outcome.graph)
    else:
        for instance, outcome in zip(instances, outcomes):
            print(instance.to_conll(outcome.graph))
            print()

    num_failed = sum(1 for outcome in outcomes if not outcome.ok)
    if num_failed:
        logger.warning('%d sentence(s) could not be decoded' % num_failed)

    toc = time.time()
    logger.info('Total running time: %f' % (toc - tic))

    return 0


if __name__ == '__main__':
    sys.exit(main())
