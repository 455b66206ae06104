"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from pricer.amm import ConstantProductAMM
from pricer.api.main import app
from pricer.pools import ReserveBook
from pricer.routing import PathPricer
from tests.helpers import DAI, USDC, WETH, make_reference_book


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test (e.g. the CLI) installs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def amm() -> ConstantProductAMM:
    """AMM with the default 0.3% fee."""
    return ConstantProductAMM()


@pytest.fixture
def reference_book() -> ReserveBook:
    """Reserves for the WETH -> USDC -> DAI reference path."""
    return make_reference_book()


@pytest.fixture
def reference_path() -> list[str]:
    """Three-asset path crossing two pools."""
    return [WETH, USDC, DAI]


@pytest.fixture
def path_pricer(reference_book: ReserveBook) -> PathPricer:
    """Path pricer over the reference reserves."""
    return PathPricer(reference_book)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client for the API."""
    # Ensure dependency overrides are cleared after test
    yield TestClient(app)
    app.dependency_overrides.clear()
