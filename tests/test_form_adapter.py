"""Tests for form state, coercion and submission."""

from dataclasses import asdict
from datetime import date

import pytest

from core.entities import CLIENTS, ORDERS, PRODUCTS, seed_clients, seed_orders, seed_products
from core.errors import ValidationFailed
from core.form_adapter import FormAdapter


def _fixed_today():
    return date(2024, 6, 1)


class TestInitialValues:
    def test_defaults_for_new_order(self):
        adapter = FormAdapter(ORDERS.form_fields, today=_fixed_today)
        assert adapter.values == {
            "client_name": "",
            "date": "2024-06-01",
            "total": 0.0,
            "status": "pending",
        }
        assert adapter.record_id is None
        assert not adapter.is_edit

    def test_defaults_for_new_product(self):
        adapter = FormAdapter(PRODUCTS.form_fields)
        assert adapter.values["price"] == 0.0
        assert adapter.values["stock"] == 0
        assert adapter.values["description"] == ""

    def test_loads_existing_record(self):
        client = seed_clients()[1]
        adapter = FormAdapter(CLIENTS.form_fields, client)
        assert adapter.values["email"] == "maria@email.com"
        assert adapter.record_id == 2


class TestCoercion:
    def test_invalid_numbers_become_zero(self):
        adapter = FormAdapter(PRODUCTS.form_fields)
        assert adapter.set("price", "abc") == 0.0
        assert adapter.set("stock", "") == 0
        assert adapter.set("stock", None) == 0

    def test_valid_numbers_parse(self):
        adapter = FormAdapter(PRODUCTS.form_fields)
        assert adapter.set("price", "7.5") == 7.5
        assert adapter.set("stock", "12") == 12
        assert adapter.set("stock", 3.0) == 3

    def test_date_objects_become_iso_strings(self):
        adapter = FormAdapter(ORDERS.form_fields)
        assert adapter.set("date", date(2024, 2, 29)) == "2024-02-29"

    def test_no_format_validation(self):
        adapter = FormAdapter(CLIENTS.form_fields)
        adapter.update({"name": "X", "email": "not-an-email", "phone": "abc", "address": "?"})
        assert adapter.submit().draft["email"] == "not-an-email"


class TestSubmit:
    def test_round_trip_yields_original_fields(self):
        for config, record in (
            (CLIENTS, seed_clients()[0]),
            (PRODUCTS, seed_products()[0]),
            (ORDERS, seed_orders()[0]),
        ):
            intent = FormAdapter(config.form_fields, record).submit()
            expected = asdict(record)
            record_id = expected.pop("id")
            assert intent.action == "update"
            assert intent.record_id == record_id
            assert intent.draft == expected

    def test_create_intent(self):
        adapter = FormAdapter(CLIENTS.form_fields)
        adapter.update({"name": "Ana", "email": "ana@email.com", "phone": "1", "address": "Rua D"})
        intent = adapter.submit()
        assert intent.action == "create"
        assert intent.record_id is None
        assert not intent.is_update

    def test_missing_required_fields(self):
        adapter = FormAdapter(CLIENTS.form_fields)
        adapter.update({"name": "   ", "email": "ana@email.com"})
        with pytest.raises(ValidationFailed) as exc:
            adapter.submit()
        assert exc.value.fields == ["name", "phone", "address"]

    def test_optional_field_may_be_empty(self):
        adapter = FormAdapter(PRODUCTS.form_fields)
        adapter.update({"name": "Café", "category": "Alimentos", "price": "9.9", "stock": "4"})
        assert adapter.submit().draft["description"] == ""

    def test_numeric_required_fields_never_block(self):
        adapter = FormAdapter(ORDERS.form_fields, today=_fixed_today)
        adapter.update({"client_name": "Ana", "total": "oops"})
        assert adapter.submit().draft["total"] == 0.0


class TestCancel:
    def test_cancel_discards_edits(self):
        product = seed_products()[2]
        adapter = FormAdapter(PRODUCTS.form_fields, product)
        adapter.update({"name": "Changed", "stock": "999"})

        values = adapter.cancel()

        assert values["name"] == product.name
        assert adapter.values["stock"] == product.stock
