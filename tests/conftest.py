"""
Shared fixtures for the cart service tests.

The motor collections are swapped for in-memory fakes that answer the same
awaitable calls the data-access modules make, so the whole app runs through
FastAPI's TestClient without a MongoDB server.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from server import app


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length):
        return self.docs if length is None else self.docs[:length]


class FakeCollection:
    """Keeps documents by _id and hands out copies, like a real round trip would."""

    def __init__(self):
        self.docs = {}

    async def find_one(self, query):
        doc = self.docs.get(query["_id"])
        return copy.deepcopy(doc) if doc else None

    def find(self, query):
        ids = query["_id"]["$in"]
        return FakeCursor([copy.deepcopy(self.docs[id]) for id in ids if id in self.docs])

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs[doc["_id"]] = copy.deepcopy(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def update_one(self, query, update):
        doc = self.docs.get(query["_id"])
        if doc:
            doc.update(copy.deepcopy(update["$set"]))
        return SimpleNamespace(matched_count=1 if doc else 0, modified_count=1 if doc else 0)


@pytest.fixture
def carts(monkeypatch):
    collection = FakeCollection()
    monkeypatch.setattr("microservices.cart_microservice.carts_collection", collection)
    return collection


@pytest.fixture
def products(monkeypatch):
    collection = FakeCollection()
    monkeypatch.setattr("microservices.product_microservice.product_collection", collection)
    return collection


@pytest.fixture
def test_client(carts, products):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_product(products):
    """Insert a product straight into the fake collection and return its id as a string."""
    def _make_product(stock, name="Product"):
        product_id = ObjectId()
        products.docs[product_id] = {"_id": product_id, "name": name, "price": 10.0, "stock": stock}
        return str(product_id)
    return _make_product


@pytest.fixture
def stock_of(products):
    def _stock_of(product_id):
        return products.docs[ObjectId(product_id)]["stock"]
    return _stock_of


@pytest.fixture
def new_cart(test_client):
    def _new_cart():
        response = test_client.post("/api/carts/")
        assert response.status_code == 201
        return response.json()["_id"]
    return _new_cart
