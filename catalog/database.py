# catalog/database.py
import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from .config import SEED_PRODUCTS
from .models import Product, ProductIn

# This file holds the in-memory product store and its lock.

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Many concurrent readers, or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ProductStore:
    """Authoritative set of products, keyed by id.

    Reads hand out copies; "not found" is a regular return value.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._products: Dict[str, Product] = {}

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        store = cls()
        with store._lock.write():
            for raw in SEED_PRODUCTS:
                pid = _new_id()
                store._products[pid] = Product.from_input(pid, ProductIn(**raw))
        logger.debug("seeded %d products", len(SEED_PRODUCTS))
        return store

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._products)

    def list(self) -> List[Product]:
        with self._lock.read():
            return [p.model_copy() for p in self._products.values()]

    def get(self, product_id: str) -> Tuple[Optional[Product], bool]:
        with self._lock.read():
            p = self._products.get(product_id)
            if p is None:
                return None, False
            return p.model_copy(), True

    def create(self, payload: ProductIn) -> Product:
        with self._lock.write():
            pid = _new_id()
            product = Product.from_input(pid, payload)
            # New products always start in stock, whatever the client sent.
            product.in_stock = True
            self._products[pid] = product
            logger.debug("created product %s", pid)
            return product.model_copy()

    def update(self, product_id: str, payload: ProductIn) -> Tuple[Optional[Product], bool]:
        with self._lock.write():
            if product_id not in self._products:
                return None, False
            product = Product.from_input(product_id, payload)
            self._products[product_id] = product
            logger.debug("updated product %s", product_id)
            return product.model_copy(), True

    def delete(self, product_id: str) -> bool:
        with self._lock.write():
            if product_id not in self._products:
                return False
            del self._products[product_id]
            logger.debug("deleted product %s", product_id)
            return True


def _new_id() -> str:
    return str(uuid.uuid4())
