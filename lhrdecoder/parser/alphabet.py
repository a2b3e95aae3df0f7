'''This implements a dictionary of relation labels.'''


class Alphabet(dict):
    '''This class implements a dictionary of labels. Labels as mapped to
    integers, and it is efficient to retrieve the label name from its
    integer representation, and vice-versa.'''
    def __init__(self, label_names=None):
        dict.__init__(self)
        self.locked = False
        self.names = []
        if label_names is not None:
            for name in label_names:
                self.insert(name)

    @classmethod
    def from_file(cls, path):
        '''Read labels from a text file with one label per line. The
        alphabet is locked after reading.'''
        with open(path, 'r', encoding='utf-8') as f:
            names = [line.strip() for line in f]

        alphabet = cls(name for name in names if name)
        alphabet.stop_growth()
        return alphabet

    def insert(self, name):
        '''Add new label.'''
        if name in self:
            return
        if self.locked:
            raise ValueError('Attempted to insert in locked alphabet')

        label_id = len(self.names)
        self[name] = label_id
        self.names.append(name)

    def lookup(self, name):
        '''Lookup label. Return -1 if it is unknown.'''
        return self.get(name, -1)

    def stop_growth(self):
        self.locked = True

    def get_label_name(self, label_id):
        '''Get label name from id.'''
        return self.names[label_id]
