# -*- coding: utf-8 -*-

"""
Errors raised while decoding a single sentence.

All of them are fatal for the sentence being decoded, but not for a batch.
"""


class DecodingError(ValueError):
    """Base class for failures of a sentence decode."""
    pass


class EmptyInputError(DecodingError):
    """A sentence without tokens was given to the decoder."""
    pass


class NoCandidateError(DecodingError):
    """
    No admissible candidate governor remains for a token, or the score table
    does not cover the sentence.
    """
    def __init__(self, message, dependent=None):
        super(NoCandidateError, self).__init__(message)
        self.dependent = dependent

    def __reduce__(self):
        return self.__class__, (str(self), self.dependent)


class UnresolvableCycleError(DecodingError):
    """None of the members of a cycle can be attached outside of it."""
    def __init__(self, message, cycle=None):
        super(UnresolvableCycleError, self).__init__(message)
        self.cycle = cycle

    def __reduce__(self):
        return self.__class__, (str(self), self.cycle)
