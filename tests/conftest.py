import logging

import pytest

from witc.parser.parser import Parser

TIMER_WIT = """\
// lunatic::timer host functions
send-after : func(process-id: u64, message-id: u64, delay: u64) -> u64
cancel-timer : func(timer-id: u64) -> u32
"""


@pytest.fixture
def parser():
    return Parser()


@pytest.fixture
def timer_wit(tmp_path):
    path = tmp_path / 'lunatic_timer.wit'
    path.write_text(TIMER_WIT, encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def reset_witc_logger():
    yield
    logger = logging.getLogger('witc')
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
