# cli.py
import argparse
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pycatalog import CatalogAPIError, CatalogClient

console = Console()
c = CatalogClient(base_url="http://127.0.0.1:8081")

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Product Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=36)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            f"${p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            stock
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Errors are shown in a status panel and turned into None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Input helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([p["id"] for p in product_cache if p.get("id")], ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ PyCatalog SDK",
        "[bold blue]Product Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in [
            ("1", "📦 List products", "4", "✏️ Update product"),
            ("2", "ℹ️ Get product by ID", "5", "🗑️ Delete product"),
            ("3", "➕ Create product", "6", "❤️ Health check"),
            ("", "", "q", "👋 Quit"),
        ]:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "3":
            name = prompt_with_autocomplete("Enter product name")
            price = ask_float("💰 Price", default=10.0)
            category = prompt_with_autocomplete("🏷️ Category", default="General")
            resp = try_api(c.create_product, name, price, category,
                           success_msg=f"Product '{name}' created successfully")
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                product_cache = try_api(c.list_products) or []

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if not current:
                continue
            name = prompt_with_autocomplete("Name", default=current["name"])
            price = ask_float("💰 Price", default=current["price"])
            category = prompt_with_autocomplete("🏷️ Category", default=current["category"])
            in_stock = Confirm.ask("In stock?", default=current["inStock"])
            resp = try_api(c.update_product, pid, name, price, category, in_stock,
                           success_msg=f"Product {pid} updated")
            if resp:
                show_products([resp])
                product_cache = []

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    product_cache = []

        elif choice == "6":
            resp = try_api(c.health)
            if resp:
                when = datetime.fromtimestamp(resp["timestamp"]).strftime("%Y-%m-%d %H:%M:%S")
                console.print(Panel.fit(f"[green]{resp['status']}[/green] at {when}", title="❤️ Health"))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


# ---------------------------
# One-shot commands
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8081", help="Catalog API base URL")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("interactive", help="Interactive menu (default)")
    subparsers.add_parser("health", help="Check server health")
    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--category", required=True, help="Product category")

    up = subparsers.add_parser("update-product", help="Replace a product's fields")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name", required=True, help="Product name")
    up.add_argument("--price", type=float, required=True, help="Price")
    up.add_argument("--category", required=True, help="Product category")
    up.add_argument("--out-of-stock", action="store_true", help="Mark the product as out of stock")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")
    return parser


def main(argv: Optional[List[str]] = None):
    global c
    args = build_parser().parse_args(argv)
    c = CatalogClient(base_url=args.base_url)

    if args.command in (None, "interactive"):
        try:
            menu()
        except KeyboardInterrupt:
            console.print("\n\n[bold red]Interrupted by user[/bold red]")
            sys.exit(1)
        return

    try:
        run_command(args)
    except CatalogAPIError as e:
        console.print(f"[bold red]{e}[/bold red]")
        sys.exit(1)


def run_command(args: argparse.Namespace):
    if args.command == "health":
        console.print(c.health())
    elif args.command == "list-products":
        show_products(c.list_products())
    elif args.command == "get-product":
        show_products([c.get_product(args.product_id)])
    elif args.command == "create-product":
        console.print(c.create_product(args.name, args.price, args.category))
    elif args.command == "update-product":
        console.print(c.update_product(args.product_id, args.name, args.price, args.category,
                                       not args.out_of_stock))
    elif args.command == "delete-product":
        console.print(c.delete_product(args.product_id))


if __name__ == "__main__":
    main()
