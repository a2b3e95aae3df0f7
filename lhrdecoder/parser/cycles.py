# -*- coding: utf-8 -*-

from ..classifier.utils import get_logger
from .constants import ROOT
from .errors import NoCandidateError, UnresolvableCycleError


logger = get_logger()


class CycleFixer(object):
    """
    Turn a dependency graph whose heads were assigned greedily into a tree.

    Each cycle is broken by attaching one of its members to its best governor
    outside of the cycle. The chosen member is the one whose new arc loses the
    least score with respect to its current arc; among equal losses the lowest
    token id is chosen.

    The new governor can be neither a member of the cycle nor a token whose
    chain of governors leads into it, and it cannot be the root, which is
    already taken by the top token. Therefore a repair never creates a new
    cycle and at most one repair per cycle is needed.

    If no member has such a governor, the member with the best root score
    becomes the root instead, and the former top token is attached to its best
    governor outside of its own subtree.
    """
    def __init__(self, graph, scores):
        """
        :param graph: DependencyGraph with a single root; it is changed in
            place
        :param scores: ArcScores used to assign the heads of the graph
        """
        self.graph = graph
        self.scores = scores

    def fix_cycles(self):
        """
        Repair all cycles of the graph.

        An acyclic graph is left untouched.

        :return: the number of repaired cycles
        :raise UnresolvableCycleError: if a cycle cannot be attached to the
            rest of the graph
        """
        num_fixed = 0
        cycles = self.graph.find_cycles()

        while cycles:
            # cycles are disjoint and repairing one does not change the others
            for cycle in cycles:
                self.fix_cycle(cycle)
                num_fixed += 1

            cycles = self.graph.find_cycles()

        return num_fixed

    def fix_cycle(self, cycle):
        """
        Break a single cycle, replacing the arc of one of its members.

        :param cycle: list of the token ids in the cycle
        :return: a tuple (dependent, governor, loss) with the new arc;
            governor is ROOT if the dependent became the root
        """
        best = self.find_best_arc(cycle)
        if best is None:
            return self.move_root(cycle)

        dependent, governor, score, loss = best
        logger.debug('Breaking cycle %s: %d -> %d (loss %f)'
                     % (cycle, governor, dependent, loss))

        self.graph.set_arc(dependent, governor, score, allow_cycle=False)

        return dependent, governor, loss

    def find_best_arc(self, cycle):
        """
        Find the replacement arc with the minimum loss for a cycle.

        :param cycle: list of the token ids in the cycle
        :return: a tuple (dependent, governor, score, loss), or None if no
            member has a token governor outside the cycle
        """
        excluded = set(cycle)
        excluded.update(self.graph.get_descendants(cycle))
        excluded.add(ROOT)

        best = None
        for member in sorted(cycle):
            try:
                governor, score = self.scores.find_highest_scoring_head(
                    member, excluding=excluded)
            except NoCandidateError:
                continue

            loss = self._current_score(member) - score
            if best is None or loss < best[3]:
                best = (member, governor, score, loss)

        return best

    def move_root(self, cycle):
        """
        Break a cycle by making one of its members the root.

        The member with the highest root score is chosen, the lowest id among
        equal scores. The former top token is attached to its best governor
        that does not depend on it.

        :param cycle: list of the token ids in the cycle
        :return: a tuple (new top, ROOT, loss)
        :raise UnresolvableCycleError: if no member can be the root or the
            former top token has no other admissible governor
        """
        top = self.graph.root
        candidates = [(self.scores.get_score(member, ROOT), member)
                      for member in sorted(cycle)]
        candidates = [(score, member) for score, member in candidates
                      if score is not None]
        if top is None or not candidates:
            raise UnresolvableCycleError(
                'No token of the cycle %s can be attached outside of it'
                % cycle, cycle)

        root_score, new_top = min(candidates,
                                  key=lambda item: (-item[0], item[1]))

        excluded = self.graph.get_descendants([top])
        excluded.add(ROOT)
        try:
            governor, score = self.scores.find_highest_scoring_head(
                top, excluding=excluded)
        except NoCandidateError:
            raise UnresolvableCycleError(
                'No token of the cycle %s can be attached outside of it and '
                'token %r cannot leave the root' % (cycle, top), cycle)

        loss = self._current_score(new_top) - root_score
        logger.debug('Breaking cycle %s: %d becomes the root, %d -> %d '
                     '(loss %f)' % (cycle, new_top, governor, top, loss))

        self.graph.set_attachment_score(new_top, root_score)
        self.graph.set_arc(top, governor, score, allow_cycle=False)

        return new_top, ROOT, loss

    def _current_score(self, dependent):
        score = self.graph.get_attachment_score(dependent)
        if score is None:
            # the arc was set without a score
            score = self.scores.get_score(dependent,
                                          self.graph.get_head(dependent))
        return 0. if score is None else score
