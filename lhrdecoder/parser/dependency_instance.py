num_conllu_fields = 10
multiword_blanks = '\t'.join(['_'] * 8)


class MultiwordSpan(object):
    """
    Class for storing a multiword token, including its text form and text span.
    """
    def __init__(self, first, last, form):
        """
        Create a multiword token representation. For example, a token as

        9-10	ao	_

        should be instantiated as MultiwordSpan(9, 10, 'ao')

        :param first: The first position of the words included in the multiword
            token
        :param last: Same as above, for the last position
        :param form: The token form as appears in the text
        """
        self.first = first
        self.last = last
        self.form = form


class DependencyInstance(object):
    """
    The tokens of a sentence to be decoded.

    There is no root pseudo-token: token ids are the positions 0..n-1, and in
    CoNLL-U output they are written counting from 1.
    """
    def __init__(self, forms, lemmas, upos, xpos, morph_singletons,
                 multiwords):
        self.forms = forms
        self.lemmas = lemmas
        self.upos = upos
        self.xpos = xpos
        self.morph_singletons = morph_singletons
        self.multiwords = multiwords

    @classmethod
    def from_tokens(cls, tokens):
        """Create an instance from tokens only, without any annotation"""
        empty_list = ['_' for _ in tokens]
        return cls(list(tokens), empty_list, empty_list.copy(),
                   empty_list.copy(), empty_list.copy(), [])

    def __len__(self):
        return len(self.forms)

    @property
    def token_ids(self):
        return list(range(len(self)))

    def get_all_upos(self):
        return self.upos

    def to_conll(self, graph=None) -> str:
        """
        Return a string in CONLLU format.

        :param graph: decoded DependencyGraph over `token_ids`. If None, the
            HEAD and DEPREL columns are left empty.
        """
        # keep track of multiword tokens
        multiword = self.multiwords[0] if len(self.multiwords) else None
        multiword_idx = 0
        lines = []

        for i in range(len(self)):
            conll_id = i + 1
            if multiword and conll_id == multiword.first:
                span = '%d-%d' % (multiword.first, multiword.last)
                line = '%s\t%s\t%s' % (span, multiword.form, multiword_blanks)
                lines.append(line)

                multiword_idx += 1
                if multiword_idx >= len(self.multiwords):
                    multiword = None
                else:
                    multiword = self.multiwords[multiword_idx]

            if graph is None:
                head = '_'
                relation = '_'
            else:
                token = graph.elements[i]
                governor = graph.get_head(token)
                head = '0' if governor is None \
                    else str(graph.get_position(governor) + 1)
                relation = graph.get_label(token) or '_'

            line = '\t'.join([str(conll_id), self.forms[i], self.lemmas[i],
                              self.upos[i], self.xpos[i],
                              self.morph_singletons[i], head, relation,
                              '_', '_'])
            lines.append(line)

        return '\n'.join(lines)
