# catalog/server.py
import logging

import uvicorn
from rich.logging import RichHandler

from .config import HEALTH_PATH, HOST, PORT, PRODUCTS_PATH
from .database import ProductStore
from .main import create_app

logger = logging.getLogger("catalog")


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main() -> None:
    setup_logging()
    store = ProductStore.with_seed_data()
    app = create_app(store)

    logger.info("Server starting on http://localhost:%d", PORT)
    logger.info("%d mock products loaded", len(store))
    logger.info("Available endpoints:")
    for method, path in [
        ("GET", HEALTH_PATH),
        ("GET", PRODUCTS_PATH),
        ("GET", PRODUCTS_PATH + "/:id"),
        ("POST", PRODUCTS_PATH),
        ("PUT", PRODUCTS_PATH + "/:id"),
        ("DELETE", PRODUCTS_PATH + "/:id"),
    ]:
        logger.info("  %-6s %s", method, path)

    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
