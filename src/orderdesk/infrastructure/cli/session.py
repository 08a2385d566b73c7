"""Interactive order session.

The session owns one in-memory order collection for its whole lifetime and
reads operator commands from the prompt until ``quit`` or end of input.
"""

from __future__ import annotations

from pathlib import Path

import click

from orderdesk.application.commit_order import CommitOrderHandler
from orderdesk.application.delete_order import DeleteOrderHandler
from orderdesk.application.dto import OrderDTO
from orderdesk.application.export_order import ExportOrderHandler
from orderdesk.application.search_orders import SearchOrdersHandler
from orderdesk.application.show_order import ShowOrderHandler
from orderdesk.application.start_draft import StartDraftHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.customer import PersonType
from orderdesk.domain.model.draft import DraftState, OrderDraft
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.customer_validation import (
    REQUIRED_FIELDS_BY_PERSON_TYPE,
    missing_fields,
)
from orderdesk.infrastructure.bootstrap import Settings
from orderdesk.infrastructure.export.text_renderer import render_text, write_text_export

HELP = """\
Commands:
  new               create an order
  edit <id>         edit an order
  delete <id>       delete an order
  list              list all orders
  search <text>     find orders by id or customer name
  show <id>         show an order
  export <id> [dir] print an order, or write it to a file in <dir>
  help              show this text
  quit              leave the session"""

LINE_HELP = "Lines: add | edit <n> | del <n> | back | save | cancel"

SHARED_PROMPTS = (
    "name",
    "telephone",
    "email",
    "zip_code",
    "address",
    "number",
    "complement",
    "neighborhood",
    "city",
    "state",
    "reference_point",
)

FIELD_LABELS = {
    "person_type": "Person type",
    "name": "Name",
    "telephone": "Telephone",
    "email": "Email",
    "zip_code": "Zip code",
    "address": "Address",
    "number": "Number",
    "complement": "Complement",
    "neighborhood": "Neighborhood",
    "city": "City",
    "state": "State",
    "reference_point": "Reference point",
    "cpf": "CPF",
    "government_id": "ID number",
    "date_of_birth": "Date of birth",
    "gender": "Gender",
    "cnpj": "CNPJ",
    "company_name": "Company name",
    "business_name": "Business name",
}


class OrderSession:

    def __init__(self, order_repo: OrderRepository, settings: Settings) -> None:
        self._order_repo = order_repo
        self._settings = settings

    def run(self) -> None:
        click.echo("Type 'help' to see commands. Type 'quit' to leave.")
        while True:
            try:
                line = click.prompt("orders", default="", show_default=False,
                                    prompt_suffix="> ")
                if not self.handle(line.strip()):
                    break
            except click.Abort:
                # end of input; an open draft is simply dropped
                click.echo()
                break

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the session should end."""
        command, _, arg = line.partition(" ")
        arg = arg.strip()

        try:
            if command in ("quit", "exit"):
                return False
            if command == "":
                pass
            elif command == "help":
                click.echo(HELP)
            elif command == "new":
                self._run_draft(StartDraftHandler(self._order_repo).handle())
            elif command == "edit" and arg:
                self._run_draft(StartDraftHandler(self._order_repo).handle(arg))
            elif command == "delete" and arg:
                self._delete(arg)
            elif command == "list":
                self._list("")
            elif command == "search":
                self._list(arg)
            elif command == "show" and arg:
                _display_order(ShowOrderHandler(self._order_repo).handle(arg))
            elif command == "export" and arg:
                self._export(*arg.split(maxsplit=1))
            else:
                click.echo(f"Unknown command '{line}'. Type 'help'.")
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        return True

    # --- Collection commands --------------------------------------------------

    def _list(self, query: str) -> None:
        rows = SearchOrdersHandler(self._order_repo).handle(query)
        if not rows:
            click.echo("No orders found")
            return
        click.echo(f"{'ID':<10} {'Name':<20} {'Date':<10} {'Total':>10}")
        click.echo("-" * 53)
        for row in rows:
            click.echo(
                f"{row.id:<10} {row.customer_name:<20} {row.date:<10} {row.total:>10}"
            )

    def _delete(self, order_id: str) -> None:
        if not click.confirm(f"Delete order {order_id}?", default=False):
            return
        if DeleteOrderHandler(self._order_repo).handle(order_id):
            click.echo(f"Order {order_id} deleted.")
        else:
            click.echo(f"Order {order_id} not found.")

    def _export(self, order_id: str, directory: str | None = None) -> None:
        handler = ExportOrderHandler(
            self._order_repo,
            currency=self._settings.currency,
            total_currency=self._settings.total_currency,
        )
        fields = handler.handle(order_id)
        if directory is None:
            for text in render_text(fields):
                click.echo(text)
        else:
            path = write_text_export(fields, Path(directory))
            click.echo(f"Order {order_id} exported to {path}")

    # --- Draft flow -----------------------------------------------------------

    def _run_draft(self, draft: OrderDraft) -> None:
        click.echo("Edit Order" if draft.is_edit else "New Order")
        while draft.is_open:
            if draft.state == DraftState.LINES:
                self._lines_step(draft)
            else:
                self._customer_step(draft)

    def _customer_step(self, draft: OrderDraft) -> None:
        current = draft.customer.value_of("person_type") or None
        person_type = click.prompt(
            FIELD_LABELS["person_type"],
            type=click.Choice([p.value for p in PersonType]),
            default=current,
        )
        draft.update_customer_field("person_type", person_type)

        names = SHARED_PROMPTS + REQUIRED_FIELDS_BY_PERSON_TYPE[PersonType(person_type)]
        for name in names:
            value = click.prompt(
                FIELD_LABELS[name],
                default=draft.customer.value_of(name),
                show_default=bool(draft.customer.value_of(name)),
            )
            draft.update_customer_field(name, value)

        if draft.advance_step():
            return
        missing = ", ".join(FIELD_LABELS[n] for n in missing_fields(draft.customer))
        click.echo(f"Missing: {missing}")
        if not click.confirm("Fill in again?", default=True):
            draft.discard()

    def _lines_step(self, draft: OrderDraft) -> None:
        _display_lines(draft)
        command, _, arg = click.prompt(LINE_HELP, prompt_suffix="\n> ").strip().partition(" ")

        if command == "add":
            self._prompt_line(draft)
        elif command == "edit" and arg.isdigit():
            if draft.start_line_edit(int(arg) - 1):
                self._prompt_line(draft)
            else:
                click.echo(f"No line {arg}.")
        elif command == "del" and arg.isdigit():
            if not draft.remove_line(int(arg) - 1):
                click.echo(f"No line {arg}.")
        elif command == "back":
            draft.go_back()
        elif command == "save":
            self._save(draft)
        elif command == "cancel":
            draft.discard()
            click.echo("Discarded.")
        else:
            click.echo(f"Unknown command '{command}'.")

    def _prompt_line(self, draft: OrderDraft) -> None:
        buffer = draft.buffer
        name = click.prompt("Product", default=buffer.name, show_default=bool(buffer.name))
        price = click.prompt("Price", default=buffer.unit_price,
                             show_default=bool(buffer.unit_price))
        quantity = click.prompt("Quantity", default=buffer.quantity,
                                show_default=bool(buffer.quantity))
        try:
            changed = draft.add_or_update_line(name, price, quantity)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
            return
        if not changed:
            click.echo("Product, price and quantity are all required.")

    def _save(self, draft: OrderDraft) -> None:
        handler = CommitOrderHandler(self._order_repo, id_prefix=self._settings.id_prefix)
        order = handler.handle(draft)
        if order is None:
            click.echo("Order not ready: complete the customer and add at least one product.")
            return
        click.echo(f"Order {order.id} saved  (total {order.total})")


def _display_lines(draft: OrderDraft) -> None:
    click.echo(f"  {'#':>3} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for i, line in enumerate(draft.lines, start=1):
        marker = "*" if draft.editing_index == i - 1 else " "
        click.echo(
            f" {marker}{i:>3} {line.name:<20} {line.quantity.value:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<27} {str(draft.total):>24}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  ({dto.person_type})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Address:  {dto.address}")
    click.echo(f"Date:     {dto.date}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")
