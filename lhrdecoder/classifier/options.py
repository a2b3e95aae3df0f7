import argparse


class OptionParser(object):
    '''Parser for the command line arguments shared by the decoding tools.'''
    def __init__(self, prog=None, description=None):
        """
        `prog` and `description` are arguments for the argparse parser.
        """
        parser = argparse.ArgumentParser(prog=prog, description=description)

        parser.add_argument('-f', '--file', type=str, default=None,
                            help='Input conllu file. If not given, read from '
                                 'stdin')
        parser.add_argument('-o', '--output', type=str, default=None,
                            help='Output conllu file. If not given, write to '
                                 'stdout')
        parser.add_argument('--n_jobs', type=int, default=1,
                            help='Number of sentences decoded in parallel. '
                                 '1 avoids parallelization')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='Verbose mode with some extra information '
                                 'about the decoding')

        self.parser = parser

    def parse_args(self, args=None):
        return self.parser.parse_args(args)
