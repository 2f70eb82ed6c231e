"""Tests for the click CLI, run against in-memory repositories."""

import pytest
from click.testing import CliRunner

from ims.application.create_order import CreateOrderHandler
from ims.application.dto import OrderItemSpec
from ims.domain.exceptions import PersistenceError
from ims.domain.model.product import Product
from ims.domain.model.supplier import Contact, Supplier
from ims.domain.model.value_objects import Money
from ims.infrastructure.cli import order_commands, product_commands, server_commands
from ims.infrastructure.cli.main import cli


@pytest.fixture
def seeded(repos, monkeypatch):
    orders, products, suppliers = repos
    supplier = Supplier.create("Acme", Contact.of("sales@acme.com"))
    suppliers.add(supplier)
    widget = Product.create("WID-1", "Widget", Money.of("19.99"), stock=100)
    products.add(widget)
    order = CreateOrderHandler(orders, products, suppliers).handle(
        supplier.id, [OrderItemSpec(widget.id, 5, "19.99")]
    )

    monkeypatch.setattr(product_commands, "product_repository", lambda: products)
    monkeypatch.setattr(order_commands, "order_repository", lambda: orders)
    monkeypatch.setattr(order_commands, "product_repository", lambda: products)
    monkeypatch.setattr(order_commands, "supplier_repository", lambda: suppliers)
    return order, widget, products


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestProductCommands:

    def test_list(self, seeded):
        result = _run("product", "list")
        assert result.exit_code == 0
        assert "WID-1" in result.output
        assert "$19.99" in result.output

    def test_list_no_match(self, seeded):
        result = _run("product", "list", "--search", "nothing")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_stock_add(self, seeded):
        _, widget, products = seeded
        result = _run("product", "stock", "--id", widget.id, "--operation", "add", "--quantity", "5")
        assert result.exit_code == 0
        assert "WID-1: stock is now 105" in result.output
        assert products.get_by_id(widget.id).stock == 105

    def test_stock_insufficient(self, seeded):
        _, widget, _ = seeded
        result = _run(
            "product", "stock", "--id", widget.id, "--operation", "subtract", "--quantity", "101"
        )
        assert result.exit_code != 0
        assert "Insufficient stock" in result.output

    def test_stock_rejects_negative_quantity(self, seeded):
        _, widget, _ = seeded
        result = _run("product", "stock", "--id", widget.id, "--operation", "add", "--quantity", "-1")
        assert result.exit_code == 2


class TestOrderCommands:

    def test_show(self, seeded):
        order, _, _ = seeded
        result = _run("order", "show", "--id", order.id)
        assert result.exit_code == 0
        assert "status=pending" in result.output
        assert "Acme" in result.output
        assert "99.95" in result.output

    def test_show_unknown(self, seeded):
        result = _run("order", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "Order not found" in result.output

    def test_status_then_process(self, seeded):
        order, widget, products = seeded
        result = _run("order", "status", "--id", order.id, "--status", "delivered")
        assert result.exit_code == 0
        assert "is now delivered" in result.output

        result = _run("order", "process", "--id", order.id)
        assert result.exit_code == 0
        assert "WID-1" in result.output
        assert products.get_by_id(widget.id).stock == 105

        result = _run("order", "process", "--id", order.id)
        assert result.exit_code == 1
        assert "already been processed" in result.output

    def test_process_pending_order(self, seeded):
        order, _, _ = seeded
        result = _run("order", "process", "--id", order.id)
        assert result.exit_code == 1
        assert "must be delivered" in result.output

    def test_status_choice_is_enforced(self, seeded):
        order, _, _ = seeded
        result = _run("order", "status", "--id", order.id, "--status", "lost")
        assert result.exit_code == 2


class TestServerCommands:

    def test_init_db(self, monkeypatch):
        calls = []
        monkeypatch.setattr(server_commands.bootstrap, "init_database", lambda: calls.append(1))
        result = _run("init-db")
        assert result.exit_code == 0
        assert calls == [1]
        assert "Indexes ensured" in result.output

    def test_init_db_failure(self, monkeypatch):
        def fail():
            raise PersistenceError("Database error: no servers")

        monkeypatch.setattr(server_commands.bootstrap, "init_database", fail)
        result = _run("init-db")
        assert result.exit_code == 1
        assert "no servers" in result.output

    def test_serve_runs_app_factory(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(
            server_commands.uvicorn, "run", lambda app, **kw: captured.update(app=app, **kw)
        )
        result = _run("serve", "--port", "8123")
        assert result.exit_code == 0
        assert captured["app"] == "ims.infrastructure.api.app:create_app"
        assert captured["factory"] is True
        assert captured["port"] == 8123
