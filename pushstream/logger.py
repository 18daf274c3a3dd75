import logging


LOGGER_NAME = 'pushstream'

__super = logging.getLogger(LOGGER_NAME)


def debug(message, **kwargs):
    v = {'message': message, **kwargs}
    __super.debug(v)


def warn(message, **kwargs):
    v = {'message': message, **kwargs}
    __super.warning(v)


def error(message, **kwargs):
    v = {'message': message, **kwargs}
    __super.error(v)
