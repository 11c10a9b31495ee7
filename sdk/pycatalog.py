# sdk/pycatalog.py
import requests
import httpx
from typing import Any, Dict, List, Optional


class CatalogAPIError(Exception):
    """Raised for any HTTP error status; carries the server's error message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8081", timeout: int = 10, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        # Anything with requests' get/post/put/delete surface works here,
        # e.g. FastAPI's TestClient.
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    def _unwrap(self, r) -> Any:
        if r.status_code >= 400:
            try:
                message = r.json().get("error", r.text)
            except ValueError:
                message = r.text
            raise CatalogAPIError(r.status_code, message)
        return r.json()

    # Health
    def health(self) -> Dict[str, Any]:
        r = self.session.get(self._url("/health"), timeout=self.timeout)
        return self._unwrap(r)

    # Products
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/products"), timeout=self.timeout)
        return self._unwrap(r)

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)

    def create_product(self, name: str, price: float, category: str) -> Dict[str, Any]:
        r = self.session.post(self._url("/products"), json={
            "name": name, "price": price, "category": category
        }, timeout=self.timeout)
        return self._unwrap(r)

    def update_product(self, product_id: str, name: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
        # Updates replace the whole record, so every field is sent.
        r = self.session.put(self._url(f"/products/{product_id}"), json={
            "name": name, "price": price, "category": category, "inStock": in_stock
        }, timeout=self.timeout)
        return self._unwrap(r)

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(self._url(f"/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)

    # Async listing (example)
    async def list_products_async(self) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(self._url("/products"))
            return self._unwrap(r)
