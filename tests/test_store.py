# tests/test_store.py
import threading

from catalog.database import ProductStore, ReadWriteLock
from catalog.models import ProductIn


def test_seed_store_has_five_unique_products():
    store = ProductStore.with_seed_data()
    products = store.list()
    assert len(products) == 5
    assert len({p.id for p in products}) == 5
    assert all(p.id for p in products)


def test_seed_ids_are_fresh_each_time():
    a = {p.id for p in ProductStore.with_seed_data().list()}
    b = {p.id for p in ProductStore.with_seed_data().list()}
    assert a.isdisjoint(b)


def test_create_ignores_client_in_stock():
    store = ProductStore()
    created = store.create(ProductIn(name="X", price=10, category="C", in_stock=False))
    assert created.in_stock is True
    fetched, found = store.get(created.id)
    assert found
    assert fetched.in_stock is True


def test_reads_return_copies():
    store = ProductStore()
    created = store.create(ProductIn(name="X", price=10, category="C"))
    created.name = "mutated"
    fetched, _ = store.get(created.id)
    fetched.price = 999
    store.list()[0].category = "mutated"
    again, _ = store.get(created.id)
    assert (again.name, again.price, again.category) == ("X", 10.0, "C")


def test_update_never_upserts():
    store = ProductStore()
    product, found = store.update("ghost", ProductIn(name="Y", price=1, category="Z"))
    assert (product, found) == (None, False)
    assert len(store) == 0


def test_update_keeps_id():
    store = ProductStore()
    created = store.create(ProductIn(name="X", price=10, category="C"))
    updated, found = store.update(created.id, ProductIn(name="Y", price=5, category="Z", in_stock=False))
    assert found
    assert updated.id == created.id
    assert updated.to_json() == {"id": created.id, "name": "Y", "price": 5.0, "category": "Z", "inStock": False}


def test_delete_reports_presence():
    store = ProductStore()
    created = store.create(ProductIn(name="X", price=10, category="C"))
    assert store.delete(created.id) is True
    assert store.delete(created.id) is False
    assert store.get(created.id) == (None, False)


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=2)
    errors = []

    def read():
        with lock.read():
            try:
                both_inside.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=read) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(5)
    assert not errors


def test_writer_waits_for_readers_and_blocks_them():
    lock = ReadWriteLock()
    writer_in = threading.Event()
    writer_release = threading.Event()
    reader_in = threading.Event()

    def write():
        with lock.write():
            writer_in.set()
            writer_release.wait(5)

    def read():
        with lock.read():
            reader_in.set()

    with lock.read():
        w = threading.Thread(target=write)
        w.start()
        assert not writer_in.wait(0.2)
    assert writer_in.wait(2)

    r = threading.Thread(target=read)
    r.start()
    assert not reader_in.wait(0.2)
    writer_release.set()
    assert reader_in.wait(2)
    w.join(5)
    r.join(5)
