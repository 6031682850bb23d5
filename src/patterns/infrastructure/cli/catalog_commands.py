"""Interactive shell for the product catalog."""

from __future__ import annotations

import click

from patterns.application.catalog_facade import CatalogFacade
from patterns.infrastructure.bootstrap import catalog_facade
from patterns.infrastructure.cli.menu import prompt_text, run_menu


class CatalogShell:

    def __init__(self, facade: CatalogFacade) -> None:
        self._facade = facade

    def run(self) -> None:
        run_menu({
            "Add Product": self.add_product,
            "Add Product Bundle": self.add_bundle,
            "Add Discount": self.add_discount,
            "Get All Products": self.show_products,
            "Get All Bundles": self.show_bundles,
            "Get All Discounts": self.show_discounts,
        })

    # --- Commands -------------------------------------------------------------

    def add_product(self) -> None:
        name = prompt_text("Product Name?")
        code = prompt_text("Product Code?")
        price = prompt_text("Product Price?")

        item = self._facade.add_product(name, code, price)
        click.echo(f"Product {item.code} '{item.name}' added at {item.price}")

    def add_bundle(self) -> None:
        name = prompt_text("Bundle Name?")
        code = prompt_text("Bundle Code?")
        child_codes = self._ask_for_product_codes()

        bundle = self._facade.add_bundle(name, code, child_codes)
        click.echo(
            f"Bundle {bundle.code} '{bundle.name}' added with "
            f"{len(bundle.children)} product(s) at {bundle.price}"
        )

    def add_discount(self) -> None:
        offer = prompt_text("Offer Name?")
        rate = prompt_text("Discount rate?")
        code = prompt_text("Product Code?")

        adapter = self._facade.add_discount(offer, rate, code)
        if adapter is not None:
            click.echo(f"Offer '{offer}' added on {code}, now {adapter.price}")

    def _ask_for_product_codes(self) -> list[str]:
        """Collect product codes until an empty entry."""
        codes: list[str] = []
        while True:
            code = prompt_text("Product Code? (empty to finish)", allow_empty=True)
            if not code:
                return codes
            codes.append(code)

    # --- Listings -------------------------------------------------------------

    def show_products(self) -> None:
        lines = self._facade.list_products()
        if not lines:
            click.echo("No products found.")
            return

        click.echo(f"{'Code':<10} {'Name':<24} {'Price':>12}")
        click.echo("-" * 48)
        for line in lines:
            click.echo(f"{line.code:<10} {line.name:<24} {line.price:>12}")

    def show_bundles(self) -> None:
        lines = self._facade.list_bundles()
        if not lines:
            click.echo("No bundles found.")
            return

        click.echo(f"{'Code':<10} {'Name':<24} {'Items':>6} {'Price':>12}")
        click.echo("-" * 55)
        for line in lines:
            click.echo(
                f"{line.code:<10} {line.name:<24} {line.item_count:>6} {line.price:>12}"
            )
        for line in lines:
            click.echo()
            click.echo(line.details)

    def show_discounts(self) -> None:
        lines = self._facade.list_discounts()
        if not lines:
            click.echo("No discounts found.")
            return

        for line in lines:
            click.echo(f"{line.details}  ->  {line.price}")


@click.command("catalog")
def catalog() -> None:
    """Manage products, bundles and special offers interactively."""
    CatalogShell(catalog_facade()).run()
