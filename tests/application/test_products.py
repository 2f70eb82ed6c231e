"""Integration tests for the product use cases.

Uses in-memory fake repositories — no database.
"""

from decimal import Decimal

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.adjust_stock import AdjustStockHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.show_product import FindProductBySkuHandler, ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import ConflictError, EntityNotFoundError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup() -> tuple[FakeProductRepository, Product, Product]:
    widget = Product.create("WID-1", "Widget", Money.of("15.00"), stock=10)
    gadget = Product.create("GAD-1", "Gadget", Money.of("25.00"), stock=4)
    repo = FakeProductRepository([widget, gadget])
    return repo, widget, gadget


class _CreditAfterReadRepository(FakeProductRepository):
    """Shares another fake's store; the first read of ``product_id`` is
    followed by a stock credit, as if an order were processed meanwhile."""

    def __init__(self, inner: FakeProductRepository, product_id: str, delta: int) -> None:
        super().__init__()
        self._store = inner._store
        self._pending = (product_id, delta)

    def get_by_id(self, product_id):
        product = super().get_by_id(product_id)
        if self._pending and self._pending[0] == product_id:
            self.increment_stock(*self._pending)
            self._pending = None
        return product


class TestAddProduct:

    def test_adds_product_with_zero_default_stock(self):
        repo, _, _ = _setup()
        product = AddProductHandler(repo).handle("new-1", "Doohickey", "9.99")
        assert product.id is not None
        assert product.sku == "NEW-1"
        assert product.stock == 0
        assert repo.get_by_id(product.id).price == Money.of("9.99")

    def test_missing_fields_rejected(self):
        repo, _, _ = _setup()
        with pytest.raises(ValidationError, match="SKU, name, and price are required"):
            AddProductHandler(repo).handle("X", None, "1")

    def test_duplicate_sku_ignores_case(self):
        repo, _, _ = _setup()
        with pytest.raises(ConflictError, match="SKU already exists"):
            AddProductHandler(repo).handle("wid-1", "Other", "1")

    def test_negative_price_rejected(self):
        repo, _, _ = _setup()
        with pytest.raises(ValidationError, match="negative"):
            AddProductHandler(repo).handle("X", "Thing", "-5")

    def test_over_precise_price_rejected(self):
        repo, _, _ = _setup()
        with pytest.raises(ValidationError, match="too many digits"):
            AddProductHandler(repo).handle("X", "Thing", "0.12345678901234567890123456789012345678")


class TestUpdateProduct:

    def test_updates_only_given_fields(self):
        repo, widget, _ = _setup()
        updated = UpdateProductHandler(repo).handle(widget.id, price="17.50")
        assert updated.price == Money.of("17.50")
        assert updated.name == "Widget"
        assert updated.stock == 10

    def test_sku_taken_by_other_product_rejected(self):
        repo, widget, _ = _setup()
        with pytest.raises(ConflictError):
            UpdateProductHandler(repo).handle(widget.id, sku="gad-1")

    def test_keeping_own_sku_is_fine(self):
        repo, widget, _ = _setup()
        updated = UpdateProductHandler(repo).handle(widget.id, sku="wid-1", name="Widget 2")
        assert updated.name == "Widget 2"

    def test_unknown_product(self):
        repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            UpdateProductHandler(repo).handle("nope", name="x")

    def test_rename_keeps_stock_credited_after_read(self):
        repo, widget, _ = _setup()
        racing = _CreditAfterReadRepository(repo, widget.id, 5)
        updated = UpdateProductHandler(racing).handle(widget.id, name="Renamed")
        assert repo.get_by_id(widget.id).stock == 15
        assert repo.get_by_id(widget.id).name == "Renamed"
        assert updated.stock == 15

    def test_explicit_stock_overrides_concurrent_credit(self):
        repo, widget, _ = _setup()
        racing = _CreditAfterReadRepository(repo, widget.id, 5)
        UpdateProductHandler(racing).handle(widget.id, stock=1)
        assert repo.get_by_id(widget.id).stock == 1


class TestShowAndDeleteProduct:

    def test_show(self):
        repo, widget, _ = _setup()
        assert ShowProductHandler(repo).handle(widget.id).sku == "WID-1"

    def test_find_by_sku_ignores_case(self):
        repo, widget, _ = _setup()
        assert FindProductBySkuHandler(repo).handle(" wid-1 ").id == widget.id

    def test_delete(self):
        repo, widget, _ = _setup()
        DeleteProductHandler(repo).handle(widget.id)
        assert repo.get_by_id(widget.id) is None

    def test_delete_unknown(self):
        repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(repo).handle("nope")


class TestListProducts:

    def test_default_sort_is_name_ascending(self):
        repo, _, _ = _setup()
        page = ListProductsHandler(repo).handle()
        assert [p.name for p in page.items] == ["Gadget", "Widget"]
        assert page.total == 2
        assert page.total_pages == 1
        assert page.current_page == 1

    def test_search_matches_name_or_sku(self):
        repo, _, _ = _setup()
        assert [p.name for p in ListProductsHandler(repo).handle(search="gad").items] == ["Gadget"]
        assert [p.name for p in ListProductsHandler(repo).handle(search="wid-").items] == ["Widget"]

    def test_sort_by_stock_descending(self):
        repo, _, _ = _setup()
        page = ListProductsHandler(repo).handle(sort_by="stock", sort_order="desc")
        assert [p.stock for p in page.items] == [10, 4]

    def test_paging(self):
        repo, _, _ = _setup()
        page = ListProductsHandler(repo).handle(page=2, limit=1)
        assert [p.name for p in page.items] == ["Widget"]
        assert page.total_pages == 2

    def test_unknown_sort_field_rejected(self):
        repo, _, _ = _setup()
        with pytest.raises(ValidationError, match="Cannot sort by"):
            ListProductsHandler(repo).handle(sort_by="secret")


class TestAdjustStock:

    @pytest.mark.parametrize(
        "operation, quantity, expected",
        [("add", 5, 15), ("subtract", 4, 6), ("set", 2, 2), ("subtract", 10, 0)],
    )
    def test_operations(self, operation, quantity, expected):
        repo, widget, _ = _setup()
        product = AdjustStockHandler(repo).handle(widget.id, operation, quantity)
        assert product.stock == expected
        assert repo.get_by_id(widget.id).stock == expected

    def test_subtract_below_zero_rejected(self):
        repo, widget, _ = _setup()
        with pytest.raises(ValidationError, match="Insufficient stock"):
            AdjustStockHandler(repo).handle(widget.id, "subtract", 11)
        assert repo.get_by_id(widget.id).stock == 10

    def test_unknown_operation_rejected(self):
        repo, widget, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid operation"):
            AdjustStockHandler(repo).handle(widget.id, "multiply", 2)

    def test_missing_quantity_rejected(self):
        repo, widget, _ = _setup()
        with pytest.raises(ValidationError, match="Operation and quantity are required"):
            AdjustStockHandler(repo).handle(widget.id, "add", None)

    def test_negative_quantity_rejected(self):
        repo, widget, _ = _setup()
        with pytest.raises(ValidationError, match="negative"):
            AdjustStockHandler(repo).handle(widget.id, "add", -1)

    def test_unknown_product(self):
        repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            AdjustStockHandler(repo).handle("nope", "add", 1)

    def test_price_untouched(self):
        repo, widget, _ = _setup()
        AdjustStockHandler(repo).handle(widget.id, "add", 1)
        assert repo.get_by_id(widget.id).price.amount == Decimal("15.00")

    def test_add_then_subtract_restores_stock(self):
        repo, widget, _ = _setup()
        handler = AdjustStockHandler(repo)
        handler.handle(widget.id, "add", 7)
        assert handler.handle(widget.id, "SUBTRACT", 7).stock == 10
