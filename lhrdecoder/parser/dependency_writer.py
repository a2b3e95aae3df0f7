class DependencyWriter(object):
    '''Write decoded sentences in CONLLU format.'''
    def __init__(self):
        self.file = None

    def open(self, path):
        self.file = open(path, 'w', encoding='utf-8')
        return self

    def close(self):
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write(self, instance, graph=None):
        """
        :param instance: DependencyInstance
        :param graph: its decoded DependencyGraph, or None if decoding failed
        """
        self.file.write(instance.to_conll(graph))
        self.file.write('\n\n')
