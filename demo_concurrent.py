import asyncio
from sdk.pycatalog import CatalogAPIError, CatalogClient

async def reader(base_url, rounds):
    client = CatalogClient(base_url=base_url)
    torn = 0
    for _ in range(rounds):
        products = await asyncio.to_thread(client.list_products)
        for p in products:
            if set(p) != {"id", "name", "price", "category", "inStock"}:
                torn += 1
    return torn

async def writer(base_url, n):
    client = CatalogClient(base_url=base_url)
    try:
        created = await asyncio.to_thread(client.create_product, f"Widget {n}", 10 + n, "Demo")
        await asyncio.to_thread(client.update_product, created["id"], f"Widget {n} v2", 20 + n, "Demo", False)
        await asyncio.to_thread(client.delete_product, created["id"])
        print(f"✅ writer {n}: create/update/delete ok ({created['id']})")
    except CatalogAPIError as e:
        print(f"❌ writer {n} failed: {e}")

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:8081")
    before = len(c.list_products())
    print(f"\n📦 Catalog size before: {before}")

    print("\n⚡ Running concurrent readers and writers...")
    results = await asyncio.gather(
        *(reader(c.base_url, 20) for _ in range(4)),
        *(writer(c.base_url, n) for n in range(8)),
    )
    torn = sum(r for r in results if isinstance(r, int))

    after = len(c.list_products())
    print(f"\n📦 Catalog size after: {after} (expected {before})")
    print(f"🔍 Incomplete records observed: {torn}")

if __name__ == "__main__":
    asyncio.run(main())
