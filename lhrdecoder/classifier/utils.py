import logging

'''Several utility functions.'''

_logger_name = 'lhrdecoder'
_log_format = '%(asctime)s %(levelname)s %(message)s'


def get_logger(level=None):
    '''
    Return the logger shared by the whole package.

    A stream handler is attached the first time it is requested.

    :param level: if given, set the logging level of the package logger
    '''
    logger = logging.getLogger(_logger_name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_log_format))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(level)

    return logger
