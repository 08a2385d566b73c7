"""Unit tests for the two-step order draft."""

from datetime import timedelta

import pytest

from orderdesk.domain.exceptions import InvalidNumericInput, UnknownCustomerFieldError
from orderdesk.domain.model.draft import DraftState, LineBuffer, OrderDraft
from orderdesk.domain.model.value_objects import Money
from tests.fakes import ORDER_DATE, make_individual, make_line, make_order

TODAY = ORDER_DATE


def _lines_draft() -> OrderDraft:
    """A new draft with a complete customer, already on the lines step."""
    draft = OrderDraft()
    draft.customer = make_individual()
    draft.state = DraftState.CUSTOMER
    assert draft.advance_step()
    return draft


class TestCustomerStep:

    def test_new_draft_is_empty(self):
        draft = OrderDraft()
        assert draft.state == DraftState.EMPTY
        assert not draft.is_edit
        assert draft.lines == []

    def test_first_field_change_starts_customer_step(self):
        draft = OrderDraft()
        assert draft.update_customer_field("name", "Alice")
        assert draft.state == DraftState.CUSTOMER
        assert draft.customer.name == "Alice"

    def test_unknown_field_raises(self):
        with pytest.raises(UnknownCustomerFieldError):
            OrderDraft().update_customer_field("nickname", "Al")

    def test_advance_blocked_while_incomplete(self):
        draft = OrderDraft()
        draft.update_customer_field("name", "Alice")
        assert not draft.advance_step()
        assert draft.state == DraftState.CUSTOMER

    def test_advance_once_complete(self):
        draft = OrderDraft()
        for name in make_individual().field_names():
            draft.update_customer_field(name, make_individual().value_of(name))
        assert draft.advance_step()
        assert draft.state == DraftState.LINES

    def test_going_back_keeps_everything(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        assert draft.go_back()
        assert draft.state == DraftState.CUSTOMER
        assert draft.customer == make_individual()
        assert len(draft.lines) == 1

    def test_go_back_only_from_lines(self):
        assert not OrderDraft().go_back()


class TestLineEditing:

    def test_add_appends(self):
        draft = _lines_draft()
        assert draft.add_or_update_line("Widget", "10.00", "3")
        assert draft.add_or_update_line("Gadget", "5.50", "2")
        assert [line.name for line in draft.lines] == ["Widget", "Gadget"]
        assert draft.total == Money.of("41.00")

    @pytest.mark.parametrize("args", [
        ("", "10.00", "3"),
        ("Widget", "", "3"),
        ("Widget", "10.00", ""),
    ])
    def test_blank_input_is_a_no_op(self, args):
        draft = _lines_draft()
        assert not draft.add_or_update_line(*args)
        assert draft.lines == []

    def test_non_numeric_price_raises_and_keeps_draft(self):
        draft = _lines_draft()
        with pytest.raises(InvalidNumericInput):
            draft.add_or_update_line("Widget", "ten", "3")
        assert draft.lines == []

    def test_non_numeric_quantity_raises(self):
        draft = _lines_draft()
        with pytest.raises(InvalidNumericInput):
            draft.add_or_update_line("Widget", "10.00", "3.5")

    def test_lines_only_on_lines_step(self):
        draft = OrderDraft()
        assert not draft.add_or_update_line("Widget", "10.00", "3")

    def test_start_edit_loads_buffer(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        assert draft.start_line_edit(0)
        assert draft.buffer == LineBuffer("Widget", "10.00", "3")
        assert draft.editing_index == 0

    def test_commit_replaces_target_in_place(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.add_or_update_line("Gadget", "5.50", "2")
        draft.start_line_edit(0)
        assert draft.add_or_update_line("Widget", "10.00", "5")
        assert [line.name for line in draft.lines] == ["Widget", "Gadget"]
        assert draft.lines[0].line_total == Money.of("50.00")
        assert draft.buffer == LineBuffer()
        assert draft.editing_index is None

    def test_buffer_shows_plain_decimal_price(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "1e2", "1")
        draft.start_line_edit(0)
        assert draft.buffer.unit_price == "100"

    def test_start_edit_out_of_range(self):
        draft = _lines_draft()
        assert not draft.start_line_edit(0)
        assert draft.editing_index is None

    def test_remove_line(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.add_or_update_line("Gadget", "5.50", "2")
        assert draft.remove_line(0)
        assert [line.name for line in draft.lines] == ["Gadget"]

    def test_remove_out_of_range_is_a_no_op(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        assert not draft.remove_line(1)
        assert not draft.remove_line(-1)
        assert len(draft.lines) == 1

    def test_removing_edit_target_clears_buffer_and_next_add_appends(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.add_or_update_line("Gadget", "5.50", "2")
        draft.start_line_edit(1)

        draft.remove_line(1)
        assert draft.buffer == LineBuffer()
        assert draft.editing_index is None

        draft.add_or_update_line("Gizmo", "1.00", "1")
        assert [line.name for line in draft.lines] == ["Widget", "Gizmo"]

    def test_removing_line_before_target_keeps_target(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.add_or_update_line("Gadget", "5.50", "2")
        draft.start_line_edit(1)

        draft.remove_line(0)
        assert draft.editing_index == 0
        draft.add_or_update_line("Gadget", "5.50", "4")
        assert len(draft.lines) == 1
        assert draft.lines[0].line_total == Money.of("22.00")


class TestFinalize:

    def test_new_order_gets_id_and_date(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.add_or_update_line("Gadget", "5.50", "2")
        order = draft.finalize("ORD-001", TODAY)
        assert order.id == "ORD-001"
        assert order.date == TODAY
        assert order.total == Money.of("41.00")
        assert draft.state == DraftState.SAVED

    def test_not_ready_without_lines(self):
        draft = _lines_draft()
        assert not draft.is_ready
        assert draft.finalize("ORD-001", TODAY) is None
        assert draft.state == DraftState.LINES

    def test_not_ready_on_customer_step(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.go_back()
        assert draft.finalize("ORD-001", TODAY) is None

    def test_saved_draft_ignores_further_changes(self):
        draft = _lines_draft()
        draft.add_or_update_line("Widget", "10.00", "3")
        draft.finalize("ORD-001", TODAY)
        assert not draft.update_customer_field("name", "Bob")
        assert not draft.add_or_update_line("Gadget", "1", "1")
        assert draft.finalize("ORD-002", TODAY) is None

    def test_discard(self):
        draft = _lines_draft()
        draft.discard()
        assert draft.state == DraftState.DISCARDED
        assert not draft.is_open


class TestEditDraft:

    def test_starts_on_lines_step_prefilled(self):
        order = make_order(lines=[make_line("Widget", "10.00", 3)])
        draft = OrderDraft(original=order)
        assert draft.is_edit
        assert draft.state == DraftState.LINES
        assert draft.customer == order.customer
        assert draft.lines == list(order.products)

    def test_edit_keeps_id_and_date(self):
        order = make_order(lines=[make_line("Widget", "10.00", 3)])
        assert order.total == Money.of("30.00")

        draft = OrderDraft(original=order)
        draft.start_line_edit(0)
        draft.add_or_update_line("Widget", "10.00", "5")
        edited = draft.finalize("ORD-999", order.date + timedelta(days=1))

        assert edited.total == Money.of("50.00")
        assert edited.id == order.id
        assert edited.date == order.date

    def test_editing_draft_leaves_original_untouched(self):
        order = make_order(lines=[make_line("Widget", "10.00", 3)])
        draft = OrderDraft(original=order)
        draft.remove_line(0)
        assert len(order.products) == 1
