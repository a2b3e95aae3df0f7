import io
import json

import numpy as np

from lhrdecoder import DependencyInstance, DependencyWriter, decode_tree, \
    read_instances
from lhrdecoder.scripts import run_decoder


CONLLU = """# sent_id = 1
# text = Vou ao cinema
1	Vou	ir	VERB	_	_	0	root	_	_
2-3	ao	_	_	_	_	_	_	_	_
2	a	a	ADP	_	_	4	case	_	_
3	o	o	DET	_	_	4	det	_	_
4	cinema	cinema	NOUN	_	_	1	obl	_	_

1	Sim	sim	INTJ	_	_	0	root	_	_
1.1	_	_	_	_	_	_	_	_	_

"""


def write_conllu(tmp_path):
    path = tmp_path / 'input.conllu'
    path.write_text(CONLLU, encoding='utf-8')
    return str(path)


def test_read_instances(tmp_path):
    instances = read_instances(write_conllu(tmp_path))

    assert len(instances) == 2
    first, second = instances
    assert first.forms == ['Vou', 'a', 'o', 'cinema']
    assert first.get_all_upos() == ['VERB', 'ADP', 'DET', 'NOUN']
    assert first.token_ids == [0, 1, 2, 3]
    assert len(first.multiwords) == 1
    assert second.forms == ['Sim']


def test_read_from_stream():
    instances = read_instances(io.StringIO(CONLLU))
    assert [len(instance) for instance in instances] == [4, 1]


def test_to_conll(cyclic_scores):
    instance = DependencyInstance.from_tokens(['a', 'b', 'c'])
    graph = decode_tree(instance.token_ids, cyclic_scores)
    graph.set_label(0, 'root')

    lines = instance.to_conll(graph).split('\n')
    assert lines[0].split('\t') == \
        ['1', 'a', '_', '_', '_', '_', '0', 'root', '_', '_']
    assert lines[1].split('\t')[6:8] == ['1', '_']
    assert lines[2].split('\t')[6:8] == ['2', '_']

    undecoded = instance.to_conll().split('\n')
    assert undecoded[2].split('\t')[6:8] == ['_', '_']


def test_to_conll_keeps_multiwords(tmp_path):
    instance = read_instances(write_conllu(tmp_path))[0]
    lines = instance.to_conll().split('\n')

    assert len(lines) == 5
    assert lines[1].startswith('2-3\tao\t')


def test_writer(tmp_path, cyclic_scores):
    instance = DependencyInstance.from_tokens(['a', 'b', 'c'])
    graph = decode_tree(instance.token_ids, cyclic_scores)
    path = str(tmp_path / 'output.conllu')

    with DependencyWriter().open(path) as writer:
        writer.write(instance, graph)
        writer.write(instance)

    with open(path, encoding='utf-8') as f:
        text = f.read()

    sentences = text.strip().split('\n\n')
    assert len(sentences) == 2
    assert sentences[0] == instance.to_conll(graph)


def test_run_decoder(tmp_path):
    input_path = write_conllu(tmp_path)
    inf = -np.inf
    # first sentence: 0 is the top; 1 <-> 2 form a cycle; 3 -> 0
    first = np.array([[2., inf, 0., 0., 0.],
                      [0., 0.5, inf, 1., 0.],
                      [0., 0.2, 1., inf, 0.],
                      [0., 1., 0., 0., inf]])
    second = np.array([[1., inf]])
    scores_path = str(tmp_path / 'scores.npz')
    np.savez(scores_path, first, second)

    label_scores_path = str(tmp_path / 'labels.npz')
    np.savez(label_scores_path,
             np.array([[3., 0., 0., 1.],
                       [0., 0., 3., 1.],
                       [0., 0., 3., 1.],
                       [3., 0., 0., 1.]]),
             np.array([[0., 3., 0., 0.]]))
    labels_path = tmp_path / 'labels.txt'
    labels_path.write_text('root\ncase\ndet\nobl\n', encoding='utf-8')
    constraints_path = tmp_path / 'constraints.json'
    constraints_path.write_text(json.dumps({'NOUN': ['obl'],
                                            'ADP': ['case']}),
                                encoding='utf-8')
    output_path = str(tmp_path / 'output.conllu')

    status = run_decoder.main(['-f', input_path, '--scores', scores_path,
                               '--label_scores', label_scores_path,
                               '--labels', str(labels_path),
                               '--constraints', str(constraints_path),
                               '-o', output_path])
    assert status == 0

    output = read_conllu_columns(output_path)
    assert output == [[('0', 'root'), ('1', 'case'), ('2', 'det'),
                       ('1', 'obl')],
                      [('0', 'root')]]


def test_run_decoder_reports_failures(tmp_path, capsys):
    input_path = write_conllu(tmp_path)
    scores_path = str(tmp_path / 'scores.npz')
    # the second sentence has no root score
    np.savez(scores_path, np.zeros([4, 5]), np.full([1, 2], -np.inf))

    status = run_decoder.main(['-f', input_path, '--scores', scores_path])
    assert status == 0

    output = capsys.readouterr().out
    sentences = output.strip().split('\n\n')
    assert len(sentences) == 2
    assert sentences[1].split('\t')[6:8] == ['_', '_']


def test_run_decoder_mismatched_scores(tmp_path):
    input_path = write_conllu(tmp_path)
    scores_path = str(tmp_path / 'scores.npz')
    np.savez(scores_path, np.zeros([4, 5]))

    assert run_decoder.main(['-f', input_path, '--scores', scores_path]) == 1


def read_conllu_columns(path):
    """Return the (HEAD, DEPREL) of each word of each sentence"""
    sentences = []
    with open(path, encoding='utf-8') as f:
        for block in f.read().strip().split('\n\n'):
            words = []
            for line in block.split('\n'):
                fields = line.split('\t')
                if '-' in fields[0]:
                    continue
                words.append((fields[6], fields[7]))
            sentences.append(words)

    return sentences
