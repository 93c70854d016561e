"""A shopping cart, its printed invoice, and interchangeable ways of saving it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

RULE = "-" * 29


@dataclass
class Product:
    """An item for sale."""

    name: str = ""
    price: float = 0.0


class ShoppingCart:
    """Products in the order they were added."""

    def __init__(self) -> None:
        self._products: list[Product] = []

    def add_product(self, product: Product) -> None:
        """Put a product in the cart."""
        self._products.append(product)

    def products(self) -> list[Product]:
        """A copy of the cart's products in insertion order."""
        return list(self._products)

    def total(self) -> float:
        """Sum of the prices of all products."""
        return sum((product.price for product in self._products), 0.0)

    def __len__(self) -> int:
        return len(self._products)


def format_item(product: Product) -> str:
    """One product as an invoice line: name, currency and price."""
    return f"{product.name:<10}{'Rs ':>10}{product.price:.2f}"


class Invoice:
    """Printable invoice for a cart."""

    def __init__(self, cart: ShoppingCart) -> None:
        self.cart = cart

    def render(self) -> str:
        """The invoice as text."""
        lines = ["Invoice", f"{'Item Name':<15}{'Price':>10}", RULE]
        lines.extend(format_item(product) for product in self.cart.products())
        lines.append(RULE)
        lines.append(f"{'Total:':<15}{self.cart.total():>10.2f}")
        return "\n".join(lines)


class CartStore:
    """Saves a cart, reporting what was written."""

    banner = "Shopping Cart saved to DB"
    lists_items = True

    def save(self, cart: ShoppingCart) -> str:
        """Save the cart and return a description of the save."""
        lines = [self.banner]
        if self.lists_items:
            lines.extend(format_item(product) for product in cart.products())
        return "\n".join(lines)


class SqlCartStore(CartStore):
    banner = "Save via SQL"
    lists_items = False


class MongoCartStore(CartStore):
    banner = "Save via MongoDB"
    lists_items = False


class FileCartStore(CartStore):
    banner = "Save via File"
    lists_items = False


def main(argv: list[str] | None = None) -> int:
    """Build a sample cart, print its invoice and save it every way."""
    parser = argparse.ArgumentParser(description="Shopping cart demo.")
    parser.parse_args(argv)

    cart = ShoppingCart()
    for name, price in (("Shirt", 100.0), ("Cup", 55.50), ("Mouse", 650.0)):
        cart.add_product(Product(name, price))

    print(Invoice(cart).render())
    for store in (CartStore(), SqlCartStore(), MongoCartStore(), FileCartStore()):
        print(store.save(cart))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())