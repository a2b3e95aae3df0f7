import pytest

from lhrdecoder import DependencyGraph


def make_graph(heads):
    """Create a graph from a list such that heads[i] is the head of i"""
    graph = DependencyGraph(range(len(heads)))
    for dependent, head in enumerate(heads):
        if head is None:
            graph.set_attachment_score(dependent, 0.)
        else:
            graph.set_arc(dependent, head, 1., allow_cycle=True)
    return graph


def test_new_graph():
    graph = DependencyGraph([0, 1, 2])
    assert graph.elements == (0, 1, 2)
    assert len(graph) == 3
    assert graph.heads == {0: None, 1: None, 2: None}
    assert graph.labels == {0: None, 1: None, 2: None}
    assert graph.roots == [0, 1, 2]
    assert graph.root is None


def test_duplicate_ids():
    with pytest.raises(ValueError):
        DependencyGraph([0, 1, 1])


def test_set_arc():
    graph = DependencyGraph([0, 1, 2])
    graph.set_attachment_score(0, 0.9)
    graph.set_arc(1, 0, 0.3)
    graph.set_arc(2, 1, 0.85)

    assert graph.get_head(1) == 0
    assert graph.get_attachment_score(2) == 0.85
    assert graph.get_attachment_score(0) == 0.9
    assert graph.root == 0
    assert graph.get_dependents(0) == [1]
    assert graph.total_score() == pytest.approx(2.05)


def test_set_arc_errors():
    graph = DependencyGraph([0, 1, 2])
    with pytest.raises(ValueError):
        graph.set_arc(1, 1)
    with pytest.raises(KeyError):
        graph.set_arc(1, 3)
    with pytest.raises(KeyError):
        graph.get_head(5)


def test_cycles_only_when_allowed():
    graph = DependencyGraph([0, 1, 2])
    graph.set_arc(1, 2)
    with pytest.raises(ValueError):
        graph.set_arc(2, 1)

    graph.set_arc(2, 1, allow_cycle=True)
    assert graph.find_cycles() == [[1, 2]]


def test_find_cycles():
    graph = make_graph([None, 2, 1, 4, 5, 3, 0])
    assert graph.find_cycles() == [[1, 2], [3, 4, 5]]
    assert not graph.is_tree()
    with pytest.raises(ValueError):
        graph.check_tree()


def test_find_cycles_in_long_graph():
    num_tokens = 3000
    heads = [None] + list(range(num_tokens - 1))
    heads[1] = num_tokens - 1
    graph = make_graph(heads)

    assert graph.find_cycles() == [list(range(1, num_tokens))]

    graph.set_arc(1, 0)
    assert graph.find_cycles() == []
    graph.check_tree()


def test_tree():
    graph = make_graph([2, 2, None, 1, 1])
    assert graph.find_cycles() == []
    assert graph.is_tree()
    graph.check_tree()


def test_multiple_roots():
    graph = make_graph([None, 0, None])
    assert graph.roots == [0, 2]
    assert graph.root is None
    assert not graph.is_tree()
    with pytest.raises(ValueError):
        graph.check_tree()


def test_descendants():
    # 3 and 4 hang from the cycle 1 <-> 2, 5 hangs from 4
    graph = make_graph([None, 2, 1, 1, 2, 4, 0])
    assert graph.get_descendants([1, 2]) == {3, 4, 5}
    assert graph.get_descendants([0]) == {6}


def test_positions_of_non_contiguous_ids():
    graph = DependencyGraph([10, 20, 30])
    graph.set_arc(30, 10)
    assert graph.get_position(30) == 2
    assert graph.get_dependents(10) == [30]


def test_labels_and_copy():
    graph = make_graph([None, 0])
    graph.set_label(0, 'root')
    graph.set_label(1, 'obj')

    copy = graph.copy()
    copy.set_label(1, 'nsubj')
    copy.set_attachment_score(1, 2.)

    assert graph.get_label(1) == 'obj'
    assert graph.get_head(1) == 0
    assert graph.get_attachment_score(1) == 1.
    assert copy.get_label(0) == 'root'
    assert copy.roots == [0, 1]
