"""Tests for the JSON catalog loader and the in-memory credential store."""

import json

import pytest

from smartcart.domain.exceptions import EntityNotFoundError, ValidationError
from smartcart.domain.model.product import Category
from smartcart.domain.model.value_objects import Money
from smartcart.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from smartcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

CATALOG = [
    {"id": "E101", "name": "Galaxy Buds", "price": "249", "category": "Electronics"},
    {"id": "c201", "name": "T-Shirt", "price": 99, "category": "clothing"},
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


class TestJsonProductRepository:

    def test_loads_in_file_order(self, catalog_file):
        products = JsonProductRepository(catalog_file).list_all()
        assert [p.id for p in products] == ["E101", "C201"]
        assert products[0].price == Money.of("249")
        assert products[1].category == Category.CLOTHING

    def test_get_by_id_is_case_insensitive(self, catalog_file):
        repo = JsonProductRepository(catalog_file)
        assert repo.get_by_id("c201").name == "T-Shirt"
        assert repo.get_by_id("X1") is None

    def test_list_by_category(self, catalog_file):
        repo = JsonProductRepository(catalog_file)
        assert [p.id for p in repo.list_by_category(Category.ELECTRONICS)] == ["E101"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(EntityNotFoundError, match="Catalog file not found"):
            JsonProductRepository(tmp_path / "nope.json").list_all()

    def test_unknown_category(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps([{"id": "F1", "name": "Apple", "price": "1", "category": "Food"}]),
            encoding="utf-8",
        )
        with pytest.raises(ValidationError, match="Unknown category"):
            JsonProductRepository(path).list_all()


class TestInMemoryUserRepository:

    def test_from_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"username": "user", "password": "user123"}]))
        repo = InMemoryUserRepository.from_json(path)
        assert repo.exists("user")
        assert repo.get_password("user") == "user123"

    def test_missing_seed_file_gives_empty_store(self, tmp_path):
        repo = InMemoryUserRepository.from_json(tmp_path / "users.json")
        assert not repo.exists("user")

    def test_add(self):
        repo = InMemoryUserRepository()
        repo.add("bob", "pw")
        assert repo.get_password("bob") == "pw"
        assert repo.get_password("alice") is None
