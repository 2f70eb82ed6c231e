"""Integration tests for the CreateOrder and UpdateOrder use cases.

Uses in-memory fake repositories — no database.
"""

from decimal import Decimal

import pytest

from ims.application.create_order import CreateOrderHandler
from ims.application.dto import OrderItemSpec
from ims.application.update_order import UpdateOrderHandler
from ims.domain.exceptions import (
    EntityNotFoundError,
    ReferenceNotFoundError,
    ValidationError,
)
from ims.domain.model.order import OrderStatus
from ims.domain.model.product import Product
from ims.domain.model.supplier import Contact, Supplier
from ims.domain.model.value_objects import Money
from ims.domain.repository.query import PageRequest, SortSpec
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeSupplierRepository,
)


def _setup():
    """Build fake repos holding one supplier and two products."""
    supplier = Supplier.create("Acme", Contact.of("sales@acme.com"))
    p1 = Product.create("P-1", "Widget", Money.of("21.00"), stock=100)
    p2 = Product.create("P-2", "Gadget", Money.of("30.00"), stock=50)
    repos = (
        FakeOrderRepository(),
        FakeProductRepository([p1, p2]),
        FakeSupplierRepository([supplier]),
    )
    return repos, supplier, p1, p2


class TestCreateOrderHappyPath:

    def test_creates_pending_order_with_exact_total(self):
        repos, supplier, p1, p2 = _setup()
        dto = CreateOrderHandler(*repos).handle(supplier.id, [
            OrderItemSpec(p1.id, 5, 19.99),
            OrderItemSpec(p2.id, 3, "29.99"),
        ])
        assert dto.total_amount == Decimal("189.92")
        assert dto.status == "pending"
        assert dto.processed_at is None
        assert dto.supplier.name == "Acme"
        assert [i.line_total for i in dto.items] == [Decimal("99.95"), Decimal("89.97")]

    def test_line_price_is_callers_snapshot(self):
        repos, supplier, p1, _ = _setup()
        dto = CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, 1, "18.00")])
        assert dto.items[0].price == Decimal("18.00")
        assert dto.items[0].product.price == Decimal("21.00")

    def test_persists_order(self):
        repos, supplier, p1, _ = _setup()
        dto = CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, 1, 1)])
        assert repos[0].get_by_id(dto.id) is not None

    def test_qty_given_as_string_is_accepted(self):
        repos, supplier, p1, _ = _setup()
        dto = CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, "2", 1)])
        assert dto.items[0].qty == 2

    def test_does_not_touch_stock(self):
        repos, supplier, p1, _ = _setup()
        CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, 5, 1)])
        assert repos[1].get_by_id(p1.id).stock == 100


class TestCreateOrderValidation:

    def test_empty_items_rejected(self):
        repos, supplier, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderHandler(*repos).handle(supplier.id, [])

    def test_missing_supplier_id_rejected(self):
        repos, _, p1, _ = _setup()
        with pytest.raises(ValidationError, match="Supplier ID is required"):
            CreateOrderHandler(*repos).handle(None, [OrderItemSpec(p1.id, 1, 1)])

    def test_unknown_supplier_rejected(self):
        repos, _, p1, _ = _setup()
        with pytest.raises(ReferenceNotFoundError, match="Supplier not found"):
            CreateOrderHandler(*repos).handle("f" * 24, [OrderItemSpec(p1.id, 1, 1)])

    def test_unknown_product_rejected_and_nothing_written(self):
        repos, supplier, p1, _ = _setup()
        with pytest.raises(ReferenceNotFoundError, match="Product with ID missing not found"):
            CreateOrderHandler(*repos).handle(supplier.id, [
                OrderItemSpec(p1.id, 1, 1),
                OrderItemSpec("missing", 1, 1),
            ])
        assert repos[0].search(None, None, SortSpec("createdAt"), PageRequest())[1] == 0

    @pytest.mark.parametrize("qty", [0, -1, "abc"])
    def test_bad_quantity_rejected(self, qty):
        repos, supplier, p1, _ = _setup()
        with pytest.raises(ValidationError):
            CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, qty, 1)])

    def test_negative_price_rejected(self):
        repos, supplier, p1, _ = _setup()
        with pytest.raises(ValidationError, match="negative"):
            CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, 1, -2)])

    def test_incomplete_item_rejected(self):
        repos, supplier, p1, _ = _setup()
        with pytest.raises(ValidationError, match="productId, qty, and price"):
            CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(p1.id, 1, None)])


class TestUpdateOrder:

    def _create(self, repos, supplier, product):
        return CreateOrderHandler(*repos).handle(supplier.id, [OrderItemSpec(product.id, 2, "10.00")])

    def test_replacing_items_recomputes_total(self):
        repos, supplier, p1, p2 = _setup()
        order = self._create(repos, supplier, p1)
        dto = UpdateOrderHandler(*repos).handle(order.id, item_specs=[OrderItemSpec(p2.id, 3, "1.50")])
        assert dto.total_amount == Decimal("4.50")
        assert dto.items[0].product_id == p2.id

    def test_status_only(self):
        repos, supplier, p1, _ = _setup()
        order = self._create(repos, supplier, p1)
        dto = UpdateOrderHandler(*repos).handle(order.id, status="shipped")
        assert dto.status == "shipped"
        assert dto.total_amount == Decimal("20.00")

    def test_change_supplier(self):
        repos, supplier, p1, _ = _setup()
        other = Supplier.create("Globex", Contact.of("x@globex.com"))
        repos[2].add(other)
        order = self._create(repos, supplier, p1)
        dto = UpdateOrderHandler(*repos).handle(order.id, supplier_id=other.id)
        assert dto.supplier.name == "Globex"

    def test_unknown_supplier_rejected(self):
        repos, supplier, p1, _ = _setup()
        order = self._create(repos, supplier, p1)
        with pytest.raises(ReferenceNotFoundError):
            UpdateOrderHandler(*repos).handle(order.id, supplier_id="nope")

    def test_empty_items_rejected(self):
        repos, supplier, p1, _ = _setup()
        order = self._create(repos, supplier, p1)
        with pytest.raises(ValidationError, match="at least one item"):
            UpdateOrderHandler(*repos).handle(order.id, item_specs=[])

    def test_invalid_status_rejected(self):
        repos, supplier, p1, _ = _setup()
        order = self._create(repos, supplier, p1)
        with pytest.raises(ValidationError, match="Invalid status"):
            UpdateOrderHandler(*repos).handle(order.id, status="lost")

    def test_items_update_keeps_concurrent_status_change(self):
        repos, supplier, p1, p2 = _setup()
        order = self._create(repos, supplier, p1)
        orders = repos[0]
        real_get = orders.get_by_id

        def get_then_ship(order_id):
            snapshot = real_get(order_id)
            orders._store[order_id].status = OrderStatus.SHIPPED
            return snapshot

        orders.get_by_id = get_then_ship
        UpdateOrderHandler(*repos).handle(order.id, item_specs=[OrderItemSpec(p2.id, 1, "2.00")])

        stored = real_get(order.id)
        assert stored.status == OrderStatus.SHIPPED
        assert stored.total_amount == Money.of("2.00")

    def test_unknown_order_checked_first(self):
        repos, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            UpdateOrderHandler(*repos).handle("nope", item_specs=[])

