"""
Logging utility for mapmaker, same conventions as desiutil.log

Usage:
    from mapmaker.log import get_logger
    log = get_logger()
    log.info("hello")

The level defaults to INFO, or to the value of $MAPMAKER_LOGLEVEL
(DEBUG, INFO, WARNING, ERROR or CRITICAL).
"""

import os
import sys
import logging

_loggers = dict()

_levels = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

def get_logger(level=None):
    """
    Returns the mapmaker logger

    Args:
        level (optional): logging level, either a name like 'DEBUG'
            or a logging module constant. Overrides $MAPMAKER_LOGLEVEL.

    Returns a logging.Logger named 'mapmaker'
    """
    name = 'mapmaker'

    #- an existing logger keeps its level unless one is requested
    if name in _loggers and level is None:
        return _loggers[name]

    if level is None:
        level = os.getenv('MAPMAKER_LOGLEVEL', 'INFO')

    if isinstance(level, str):
        if level.upper() not in _levels:
            raise ValueError('Unknown log level {}; should be one of {}'.format(
                level, list(_levels.keys())))
        level = _levels[level.upper()]

    if name in _loggers:
        log = _loggers[name]
        log.setLevel(level)
        return log

    log = logging.getLogger(name)
    log.propagate = False
    log.setLevel(level)

    #- only one handler, even if the logging module was set up elsewhere
    if len(log.handlers) == 0:
        ch = logging.StreamHandler(sys.stdout)
        fmt = '%(levelname)s:%(filename)s:%(lineno)s:%(funcName)s:%(message)s'
        ch.setFormatter(logging.Formatter(fmt))
        log.addHandler(ch)

    _loggers[name] = log
    return log
