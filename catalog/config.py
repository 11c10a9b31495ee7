# catalog/config.py
from typing import Any, Dict, List

# Fixed listen address; the catalog is not configured from the environment.
HOST = "0.0.0.0"
PORT = 8081

API_PREFIX = "/api"
PRODUCTS_PATH = f"{API_PREFIX}/products"
HEALTH_PATH = f"{API_PREFIX}/health"

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# Recreated on every start with fresh ids.
SEED_PRODUCTS: List[Dict[str, Any]] = [
    {"name": "Wireless Mouse", "price": 29.99, "category": "Electronics", "inStock": True},
    {"name": "Mechanical Keyboard", "price": 89.99, "category": "Electronics", "inStock": True},
    {"name": "USB-C Cable", "price": 12.99, "category": "Accessories", "inStock": False},
    {"name": "Laptop Stand", "price": 45.00, "category": "Accessories", "inStock": True},
    {"name": "Webcam HD", "price": 79.99, "category": "Electronics", "inStock": True},
]
