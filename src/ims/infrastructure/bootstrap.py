"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database

from ims.infrastructure.config import Settings, load_settings
from ims.infrastructure.persistence.mongo_order_repository import (
    MongoOrderRepository,
)
from ims.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from ims.infrastructure.persistence.mongo_supplier_repository import (
    MongoSupplierRepository,
)
from ims.infrastructure.persistence.mongo_support import (
    ORDERS,
    PRODUCTS,
    SUPPLIERS,
    ensure_indexes,
)


@lru_cache(maxsize=None)
def settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=None)
def mongo_client() -> MongoClient:
    # MongoClient is thread-safe and pools connections; share one per process.
    cfg = settings()
    return MongoClient(
        cfg.mongodb_uri,
        serverSelectionTimeoutMS=cfg.mongodb_timeout_ms,
        tz_aware=True,
    )


def database() -> Database:
    return mongo_client()[settings().mongodb_database]


def init_database() -> None:
    ensure_indexes(database())


def product_repository() -> MongoProductRepository:
    return MongoProductRepository(database()[PRODUCTS])


def supplier_repository() -> MongoSupplierRepository:
    return MongoSupplierRepository(database()[SUPPLIERS])


def order_repository() -> MongoOrderRepository:
    return MongoOrderRepository(database()[ORDERS])
