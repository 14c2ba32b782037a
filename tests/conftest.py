"""
Shared pytest fixtures for bintally tests.
"""

import logging

import pytest


@pytest.fixture
def write_input(tmp_path):
    """Write ``data`` to a binary file under tmp_path and return its path.

    Example usage:
        def test_something(write_input):
            path = write_input(b"\\x0f\\xff\\x00")
    """

    def _write(data: bytes, name: str = "input.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_bintally_logging():
    """Reset logging state before and after each test.

    Removes every handler except a NullHandler and resets the level to
    NOTSET so configuration from one test does not leak into another.
    """
    logger = logging.getLogger("bintally")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
