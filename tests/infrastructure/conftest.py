"""Fixtures for the HTTP API and CLI tests: the real app, fake storage."""

import pytest
from fastapi.testclient import TestClient

from ims.infrastructure.api.app import create_app
from ims.infrastructure.api.dependencies import (
    get_order_repository,
    get_product_repository,
    get_supplier_repository,
)
from ims.infrastructure.config import Settings
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeSupplierRepository,
)


@pytest.fixture
def repos():
    return FakeOrderRepository(), FakeProductRepository(), FakeSupplierRepository()


@pytest.fixture
def app(repos):
    orders, products, suppliers = repos
    app = create_app(Settings())
    app.dependency_overrides[get_order_repository] = lambda: orders
    app.dependency_overrides[get_product_repository] = lambda: products
    app.dependency_overrides[get_supplier_repository] = lambda: suppliers
    return app


@pytest.fixture
def api_client(app):
    return TestClient(app)
