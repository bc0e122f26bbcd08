import logging

from core.logging import logger, set_level


def test_set_level_is_case_insensitive():
    old = logger.level
    try:
        set_level("debug")
        assert logger.level == logging.DEBUG
        set_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(old)
        for h in logger.handlers:
            h.setLevel(logging.NOTSET)


def test_set_level_ignores_invalid_input():
    old = logger.level
    set_level("loud")
    set_level("")
    assert logger.level == old
