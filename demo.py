#!/usr/bin/env python
from sdk.pycatalog import CatalogAPIError, CatalogClient

def main():
    c = CatalogClient(base_url="http://127.0.0.1:8081")

    # -----------------------------
    # Health
    # -----------------------------
    print("Checking health...")
    print(c.health())

    # -----------------------------
    # Seed catalog
    # -----------------------------
    print("\nListing seeded products...")
    for p in c.list_products():
        print(p)

    # -----------------------------
    # Create product (inStock is always forced to true)
    # -----------------------------
    print("\nCreating a product...")
    created = c.create_product("Noise Cancelling Headphones", 199.99, "Audio")
    print(created)
    pid = created["id"]

    # -----------------------------
    # Rejected create
    # -----------------------------
    print("\nCreating a product with no name...")
    try:
        c.create_product("", 5, "Audio")
    except CatalogAPIError as e:
        print(e)

    # -----------------------------
    # Get / update
    # -----------------------------
    print("\nFetching it back...")
    print(c.get_product(pid))

    print("\nMarking it out of stock...")
    print(c.update_product(pid, "Noise Cancelling Headphones", 179.99, "Audio", False))

    # -----------------------------
    # Delete (twice: second one is a 404)
    # -----------------------------
    print("\nDeleting it...")
    print(c.delete_product(pid))
    try:
        c.delete_product(pid)
    except CatalogAPIError as e:
        print(e)

if __name__ == "__main__":
    main()
