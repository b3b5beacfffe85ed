import logging
import os

LOG_LEVEL_ENV = 'WITC_LOG_LEVEL'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None):
    """Configure the ``witc`` logger; the level defaults to $WITC_LOG_LEVEL, then WARNING."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'WARNING')

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger('witc')
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name):
    if name == 'witc' or name.startswith('witc.'):
        return logging.getLogger(name)
    return logging.getLogger('witc.%s' % name)
