from ..commons.reader import AuxiliaryReader, Reader
from .dependency_instance import DependencyInstance, MultiwordSpan, \
    num_conllu_fields


class ConllReader(Reader):
    """
    Reader class for reading sentence tokens from conllu files.
    """
    def __init__(self):
        super(ConllReader, self).__init__(AuxiliaryConllReader)


class AuxiliaryConllReader(AuxiliaryReader):

    def __next__(self):
        sentence_fields = []
        multiwords = []

        for line in self.file:
            line = line.strip()
            if line == '':
                if len(sentence_fields) == 0:
                    # ignore multiple empty lines
                    continue
                break

            # Ignore comment lines (necessary for CONLLU files).
            if line[0] == '#':
                continue
            fields = line.split('\t')

            # Ignore ellipsed words (as in UD English EWT)
            if '.' in fields[0]:
                continue

            # Store multiword tokens (necessary for CONLLU output files)
            if '-' in fields[0]:
                span = fields[0].split('-')
                first = int(span[0])
                last = int(span[1])
                form = fields[1]
                multiword = MultiwordSpan(first, last, form)
                multiwords.append(multiword)
                continue

            if len(fields) < num_conllu_fields:
                raise ValueError('Expected %d fields, found %d: %s'
                                 % (num_conllu_fields, len(fields), line))

            sentence_fields.append(fields)

        if not len(sentence_fields):
            raise StopIteration()

        forms = [fields[1] for fields in sentence_fields]
        lemmas = [fields[2] for fields in sentence_fields]
        upos = [fields[3] for fields in sentence_fields]
        xpos = [fields[4] for fields in sentence_fields]
        morph_singletons = [fields[5] for fields in sentence_fields]

        return DependencyInstance(forms, lemmas, upos, xpos, morph_singletons,
                                  multiwords)


def read_instances(path):
    """
    Read the sentences in a conllu file.

    Any existing HEAD and DEPREL annotation is ignored.

    :param path: path to a file, or an open text stream
    :return: list of DependencyInstance objects
    """
    instances = []
    reader = ConllReader()

    with reader.open(path) as r:
        for instance in r:
            instances.append(instance)

    return instances
