"""Pytest configuration and shared fixtures for adtkit tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from adtkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from adtkit import Err

    return Err('test error')


@pytest.fixture
def sample_page():
    """A successful RemotePaginate with a cursor as meta."""
    from adtkit import create_paginate, loaded

    return create_paginate([1, 2, 3], loaded(), meta={'cursor': 'abc'})


@pytest.fixture(params=['not_asked', 'loading', 'failure'])
def unsettled_remote(request):
    """Every RemoteData state other than Success."""
    from adtkit import failure, loading, not_asked

    return {
        'not_asked': not_asked(),
        'loading': loading(),
        'failure': failure('boom'),
    }[request.param]


@pytest.fixture(autouse=True)
def restore_library_logger():
    """Undo configure_logging() side effects on the adtkit logger."""
    import logging

    lib_logger = logging.getLogger('adtkit')
    saved = (lib_logger.handlers[:], lib_logger.level, lib_logger.propagate)
    yield
    lib_logger.handlers[:], lib_logger.level, lib_logger.propagate = saved
