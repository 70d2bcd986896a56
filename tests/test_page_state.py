"""Listing/Editing state of the list pages, driven through Streamlit's AppTest."""

import pytest
from streamlit.testing.v1 import AppTest

from core.query_view import ASC, DESC


def _render_page(name):
    import importlib

    importlib.import_module(f"page_modules.{name}").render()


def _page(name):
    return AppTest.from_function(_render_page, args=(name,), default_timeout=30)


def _subheaders(at):
    return [s.value for s in at.subheader]


def _clients(at):
    return at.session_state["stores"]["clients"]


@pytest.fixture
def clients_page():
    at = _page("clients")
    at.run()
    assert not at.exception
    return at


class TestEditingState:
    def test_starts_in_listing(self, clients_page):
        assert "New client" not in _subheaders(clients_page)
        assert len(_clients(clients_page)) == 3

    def test_new_opens_empty_editor(self, clients_page):
        at = clients_page
        next(b for b in at.button if b.label == "➕ New client").click().run()

        assert at.session_state["clients_mode"] == "editing"
        assert at.session_state["clients_editing_id"] is None
        assert _subheaders(at) == ["New client"]
        assert at.text_input(key="clients_form_name").value == ""

    def test_cancel_returns_to_listing_without_changes(self, clients_page):
        at = clients_page
        next(b for b in at.button if b.label == "➕ New client").click().run()
        at.text_input(key="clients_form_name").input("Ana Lima")
        at.button(key="clients_form_cancel").click().run()

        assert not at.exception
        assert at.session_state["clients_mode"] == "listing"
        assert "clients_form_name" not in at.session_state
        assert [c.name for c in _clients(at)] == ["João Silva", "Maria Santos", "Pedro Costa"]

    def test_submit_creates_and_returns_to_listing(self, clients_page):
        at = clients_page
        next(b for b in at.button if b.label == "➕ New client").click().run()
        at.text_input(key="clients_form_name").input("Ana Lima")
        at.text_input(key="clients_form_email").input("ana@email.com")
        at.text_input(key="clients_form_phone").input("(11) 91234-5678")
        at.text_input(key="clients_form_address").input("Rua Nova, 10")
        at.button(key="clients_form_submit").click().run()

        assert not at.exception
        assert at.session_state["clients_mode"] == "listing"
        created = _clients(at).records[-1]
        assert (created.id, created.name) == (4, "Ana Lima")
        assert at.session_state["notifications"][-1][0] == "Client created"

    def test_missing_required_field_keeps_editor_open(self, clients_page):
        at = clients_page
        next(b for b in at.button if b.label == "➕ New client").click().run()
        at.text_input(key="clients_form_name").input("Ana Lima")
        at.button(key="clients_form_submit").click().run()

        assert at.session_state["clients_mode"] == "editing"
        assert len(at.error) == 1
        assert len(_clients(at)) == 3

    def test_edit_prefills_and_updates_in_place(self, clients_page):
        at = clients_page
        at.button(key="client_edit_2").click().run()

        assert _subheaders(at) == ["Edit client"]
        assert at.text_input(key="clients_form_name").value == "Maria Santos"

        at.text_input(key="clients_form_name").input("Maria S. Oliveira")
        at.button(key="clients_form_submit").click().run()

        assert at.session_state["clients_mode"] == "listing"
        assert [c.id for c in _clients(at)] == [1, 2, 3]
        assert _clients(at).get(2).name == "Maria S. Oliveira"


class TestStaleEditTarget:
    @pytest.mark.parametrize("page", ["clients", "products", "orders"])
    def test_missing_record_returns_to_listing(self, page):
        at = _page(page)
        at.session_state[f"{page}_mode"] = "editing"
        at.session_state[f"{page}_editing_id"] = 99
        at.run()

        assert not at.exception
        assert at.session_state[f"{page}_mode"] == "listing"
        assert f"{page}_editing_id" not in at.session_state
        assert not any(s.startswith("New") for s in _subheaders(at))
        title, _, severity = at.session_state["notifications"][-1]
        assert title.endswith("not found")
        assert severity == "error"

    def test_store_is_untouched(self):
        at = _page("clients")
        at.session_state["clients_mode"] = "editing"
        at.session_state["clients_editing_id"] = 99
        at.run()

        assert [c.id for c in _clients(at)] == [1, 2, 3]


class TestSortState:
    def test_same_key_twice_flips_direction(self, clients_page):
        at = clients_page
        assert at.session_state["clients_sort"].direction == ASC

        at.button(key="clients_sort_name").click().run()
        assert at.session_state["clients_sort"].direction == DESC

        at.button(key="clients_sort_name").click().run()
        assert at.session_state["clients_sort"].direction == ASC

    def test_other_key_starts_ascending(self, clients_page):
        at = clients_page
        at.button(key="clients_sort_name").click().run()
        at.button(key="clients_sort_email").click().run()

        sort = at.session_state["clients_sort"]
        assert (sort.key, sort.direction) == ("email", ASC)


class TestSessionStores:
    def test_seeded_once_per_session(self, clients_page):
        at = clients_page
        at.button(key="client_del_1").click().run()
        assert len(_clients(at)) == 2

        at.run()
        assert [c.id for c in _clients(at)] == [2, 3]
        assert at.session_state["notifications"][-1][0] == "Client removed"
