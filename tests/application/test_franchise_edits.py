"""Integration tests for the load -> edit -> save use cases.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from franchises.application.add_branch import AddBranchHandler
from franchises.application.add_product import AddProductHandler
from franchises.application.delete_product import DeleteProductHandler
from franchises.application.rename_branch import RenameBranchHandler
from franchises.application.set_product_stock import SetProductStockHandler
from franchises.application.update_franchise import (
    RenameFranchiseHandler,
    SetAddressHandler,
    SetDescriptionHandler,
)
from franchises.application.update_product import (
    RenameProductHandler,
    SetProductPriceHandler,
)
from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Branch, Product
from tests.fakes import (
    FailingFranchiseRepository,
    FailingSaveRepository,
    FakeFranchiseRepository,
    sample_franchise,
)


def _setup() -> FakeFranchiseRepository:
    return FakeFranchiseRepository([sample_franchise()])


class TestFranchiseFieldEdits:

    def test_rename_persists(self):
        repo = _setup()
        updated = RenameFranchiseHandler(repo).handle("f-1", "New Name")
        assert updated.name == "New Name"
        assert repo.get_by_id("f-1").name == "New Name"
        assert updated.branches == sample_franchise().branches

    def test_set_address(self):
        repo = _setup()
        assert SetAddressHandler(repo).handle("f-1", "2 High St").address == "2 High St"

    def test_set_description(self):
        repo = _setup()
        assert SetDescriptionHandler(repo).handle("f-1", "Now with salads").description == (
            "Now with salads"
        )

    def test_id_never_changes(self):
        repo = _setup()
        assert RenameFranchiseHandler(repo).handle("f-1", "Other").id == "f-1"


class TestMissingFranchise:

    @pytest.mark.parametrize(
        "call",
        [
            lambda r: RenameFranchiseHandler(r).handle("nope", "X"),
            lambda r: AddBranchHandler(r).handle("nope", Branch("C")),
            lambda r: AddProductHandler(r).handle("nope", "A", Product("p")),
            lambda r: SetProductStockHandler(r).handle("nope", "A", "p1", 1),
        ],
    )
    def test_returns_none_without_saving(self, call):
        repo = _setup()
        assert call(repo) is None
        assert repo.save_count == 0


class TestMissingSubEntity:

    def test_add_product_to_unknown_branch_returns_franchise_unchanged(self):
        repo = _setup()
        updated = AddProductHandler(repo).handle("f-1", "Nowhere", Product("p9", 1))
        assert updated == sample_franchise()
        assert [b.name for b in updated.branches] == ["A", "B"]

    def test_set_stock_on_unknown_product_still_saves(self):
        repo = _setup()
        updated = SetProductStockHandler(repo).handle("f-1", "A", "ghost", 5)
        assert updated == sample_franchise()
        assert repo.save_count == 1


class TestBranchEdits:

    def test_add_branch(self):
        repo = _setup()
        updated = AddBranchHandler(repo).handle("f-1", Branch("C", (Product("p9", 2),)))
        assert [b.name for b in repo.get_by_id("f-1").branches] == ["A", "B", "C"]
        assert updated.branches[-1].products == (Product("p9", 2),)

    def test_rename_branch_renames_all_duplicates(self):
        repo = _setup()
        AddBranchHandler(repo).handle("f-1", Branch("A"))
        updated = RenameBranchHandler(repo).handle("f-1", "A", "Alpha")
        assert [b.name for b in updated.branches] == ["Alpha", "B", "Alpha"]


class TestProductEdits:

    def test_add_product(self):
        repo = _setup()
        updated = AddProductHandler(repo).handle("f-1", "B", Product("p5", 11, 2.5))
        assert updated.branches[1].products[-1] == Product("p5", 11, 2.5)

    def test_delete_product(self):
        repo = _setup()
        updated = DeleteProductHandler(repo).handle("f-1", "A", "p2")
        assert [p.name for p in updated.branches[0].products] == ["p1"]

    def test_set_stock_twice_keeps_last_value(self):
        repo = _setup()
        handler = SetProductStockHandler(repo)
        handler.handle("f-1", "A", "p1", 20)
        updated = handler.handle("f-1", "A", "p1", 30)
        assert updated.branches[0].products[0].stock == 30

    def test_rename_product(self):
        repo = _setup()
        updated = RenameProductHandler(repo).handle("f-1", "B", "p4", "shake")
        assert [p.name for p in updated.branches[1].products] == ["p3", "shake"]

    def test_set_price(self):
        repo = _setup()
        updated = SetProductPriceHandler(repo).handle("f-1", "B", "p4", 1.99)
        assert updated.branches[1].products[1].price == 1.99


class TestStoreFailures:

    def test_load_failure_propagates(self):
        with pytest.raises(StoreError):
            RenameFranchiseHandler(FailingFranchiseRepository()).handle("f-1", "X")

    def test_save_failure_propagates(self):
        repo = FailingSaveRepository([sample_franchise()])
        with pytest.raises(StoreError, match="disk full"):
            AddBranchHandler(repo).handle("f-1", Branch("C"))
        assert repo.get_by_id("f-1") == sample_franchise()
