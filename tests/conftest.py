"""Shared pytest configuration."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # CLI tests configure structlog against captured streams that close afterwards.
    yield
    structlog.reset_defaults()
