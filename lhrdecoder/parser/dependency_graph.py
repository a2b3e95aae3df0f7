# -*- coding: utf-8 -*-

from collections import defaultdict


class DependencyGraph(object):
    """
    Dependency graph over the tokens of a sentence.

    Every token has at most one governor; tokens without a governor are
    attached to the virtual root. While heads are being assigned this is any
    functional graph, so cycles and several (or no) root tokens are allowed.
    A decoded graph must be a spanning tree with a single root, which is
    checked with `is_tree()` or `check_tree()`.
    """
    def __init__(self, elements):
        """
        :param elements: the token ids of the sentence, in sentence order
        """
        elements = tuple(elements)
        if len(set(elements)) != len(elements):
            raise ValueError('Token ids must be unique: %s' % (elements,))

        self.elements = elements
        self._positions = {token: i for i, token in enumerate(elements)}

        # heads[d] is None for tokens attached to the root
        self.heads = {token: None for token in elements}
        self.attachment_scores = {token: None for token in elements}
        self.labels = {token: None for token in elements}

    def __len__(self):
        return len(self.elements)

    def __contains__(self, token):
        return token in self._positions

    def __repr__(self):
        arcs = ', '.join('%s->%s' % (self.heads[d], d) for d in self.elements)
        return '%s(%s)' % (self.__class__.__name__, arcs)

    def _check_token(self, token):
        if token not in self._positions:
            raise KeyError('Unknown token id %r' % (token,))

    def get_position(self, token):
        """Return the position of a token in the sentence"""
        self._check_token(token)
        return self._positions[token]

    def get_head(self, token):
        self._check_token(token)
        return self.heads[token]

    def get_attachment_score(self, token):
        self._check_token(token)
        return self.attachment_scores[token]

    def get_label(self, token):
        self._check_token(token)
        return self.labels[token]

    def get_dependents(self, governor):
        """Return the direct dependents of a token, in sentence order"""
        self._check_token(governor)
        return [token for token in self.elements
                if self.heads[token] == governor]

    def get_descendants(self, tokens):
        """
        Return the set of tokens whose chain of governors reaches any of the
        given tokens, not including the tokens themselves.
        """
        dependents = defaultdict(list)
        for token, head in self.heads.items():
            if head is not None:
                dependents[head].append(token)

        tokens = set(tokens)
        descendants = set()
        agenda = list(tokens)
        while agenda:
            token = agenda.pop()
            for dependent in dependents[token]:
                if dependent not in tokens and dependent not in descendants:
                    descendants.add(dependent)
                    agenda.append(dependent)

        return descendants

    @property
    def roots(self):
        """Tokens without governor, in sentence order"""
        return [token for token in self.elements if self.heads[token] is None]

    @property
    def root(self):
        """The root token, or None if there is not exactly one"""
        roots = self.roots
        return roots[0] if len(roots) == 1 else None

    def set_attachment_score(self, dependent, score):
        """
        Attach a token to the virtual root with the given score.
        """
        self._check_token(dependent)
        self.heads[dependent] = None
        self.attachment_scores[dependent] = score

    def set_arc(self, dependent, governor, score=None, allow_cycle=False):
        """
        Set the governor of a token, replacing any previous one.

        :param dependent: token id
        :param governor: token id of the new governor
        :param score: attachment score of the arc
        :param allow_cycle: if False, raise ValueError if the arc would close
            a cycle
        """
        self._check_token(dependent)
        self._check_token(governor)
        if dependent == governor:
            raise ValueError('Token %r cannot be its own governor' % dependent)

        if not allow_cycle and self._reaches(governor, dependent):
            raise ValueError('Arc %r -> %r would create a cycle'
                             % (governor, dependent))

        self.heads[dependent] = governor
        self.attachment_scores[dependent] = score

    def set_label(self, dependent, label):
        self._check_token(dependent)
        self.labels[dependent] = label

    def _reaches(self, token, target):
        """
        Whether following governors from `token` arrives at `target`.
        """
        # a walk longer than the sentence is going around a cycle
        for _ in range(len(self.elements) + 1):
            if token == target:
                return True
            token = self.heads[token]
            if token is None:
                return False

        return False

    def find_cycles(self):
        """
        Find the cycles of the graph.

        Governor pointers are followed from each token not yet visited. A walk
        stops at the root, at a token seen in an earlier walk, or at a token
        of its own path, in which case the path from there on is a cycle.

        :return: a list of cycles sorted by their lowest token id. Each cycle
            is a sorted list of token ids.
        """
        # walk in which each token was first reached
        visited = {}
        cycles = []
        for walk, token in enumerate(self.elements):
            path = []
            while token is not None and token not in visited:
                visited[token] = walk
                path.append(token)
                token = self.heads[token]

            if token is not None and visited[token] == walk:
                cycle = path[path.index(token):]
                cycles.append(sorted(cycle))

        cycles.sort(key=lambda cycle: cycle[0])

        return cycles

    def is_tree(self):
        """
        Whether the graph is a spanning tree: a single root and no cycles.

        Since every other token has exactly one governor, following governors
        from any token then ends at the root.
        """
        return len(self.roots) == 1 and len(self.find_cycles()) == 0

    def check_tree(self):
        """
        Raise ValueError if the graph is not a spanning tree.
        """
        roots = self.roots
        if len(roots) != 1:
            raise ValueError('Expected a single root, found %d: %s'
                             % (len(roots), roots))

        cycles = self.find_cycles()
        if cycles:
            raise ValueError('The graph has cycles: %s' % cycles)

    def total_score(self):
        """Sum of the attachment scores that have been set"""
        return sum(score for score in self.attachment_scores.values()
                   if score is not None)

    def copy(self):
        graph = DependencyGraph(self.elements)
        graph.heads.update(self.heads)
        graph.attachment_scores.update(self.attachment_scores)
        graph.labels.update(self.labels)
        return graph
