"""Per-entity configuration and seed data.

Each list page is the same store/query/form cycle; what differs is the data
below: which fields are searched, which can be sorted, what the form shows
and what the collection starts with.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

from core.constants import ORDER_STATUSES, PRODUCT_CATEGORIES
from core.entity_store import EntityStore
from core.form_adapter import CHOICE, DATE, FLOAT, INT, TEXT, TEXTAREA, FieldSpec
from core.models import Client, Order, Product, Sale, SaleItem
from core.query_view import ASC, DESC, SortState


@dataclass(frozen=True)
class EntityConfig:
    key: str
    label: str
    record_type: Callable[..., Any]
    searchable: Tuple[str, ...]
    sortable: Tuple[str, ...]
    default_sort: SortState
    form_fields: Tuple[FieldSpec, ...] = ()
    seed: Callable[[], List[Any]] = list

    def new_store(self) -> EntityStore:
        return EntityStore(self.record_type, seed=self.seed(), entity=self.label)


def seed_clients() -> List[Client]:
    return [
        Client(1, "João Silva", "joao@email.com", "(11) 99999-1111", "Rua A, 123"),
        Client(2, "Maria Santos", "maria@email.com", "(11) 99999-2222", "Rua B, 456"),
        Client(3, "Pedro Costa", "pedro@email.com", "(11) 99999-3333", "Rua C, 789"),
    ]


def seed_products() -> List[Product]:
    return [
        Product(1, "Leite Integral 1L", 4.99, 50, "Alimentos", "Leite integral pasteurizado"),
        Product(2, "Pão Francês", 0.80, 100, "Padaria", "Pão francês fresquinho"),
        Product(3, "Detergente 500ml", 3.50, 25, "Limpeza", "Detergente líquido para louças"),
        Product(4, "Refrigerante Cola 2L", 8.90, 30, "Bebidas", "Refrigerante sabor cola"),
        Product(5, "Açúcar Crystal 1kg", 4.20, 5, "Alimentos", "Açúcar cristal refinado"),
        Product(6, "Shampoo 400ml", 12.90, 15, "Higiene", "Shampoo para todos os tipos de cabelo"),
    ]


def seed_orders() -> List[Order]:
    return [
        Order(1, "João Silva", "2024-01-15", 85.50, "completed"),
        Order(2, "Maria Santos", "2024-01-16", 142.30, "processing"),
        Order(3, "Pedro Costa", "2024-01-16", 67.80, "pending"),
    ]


def seed_sales() -> List[Sale]:
    return [
        Sale(
            1,
            "Maria Silva",
            [SaleItem("Leite Integral 1L", 2, 4.99), SaleItem("Pão Francês", 10, 0.80)],
            17.98,
            "2024-06-25",
            "10:30",
            "completed",
        ),
        Sale(
            2,
            "João Santos",
            [SaleItem("Refrigerante Cola 2L", 3, 8.90), SaleItem("Detergente 500ml", 2, 3.50)],
            33.70,
            "2024-06-25",
            "10:15",
            "completed",
        ),
        Sale(
            3,
            "Ana Costa",
            [SaleItem("Açúcar Crystal 1kg", 1, 4.20), SaleItem("Shampoo 400ml", 1, 12.90)],
            17.10,
            "2024-06-25",
            "09:45",
            "completed",
        ),
        Sale(
            4,
            "Pedro Lima",
            [SaleItem("Leite Integral 1L", 1, 4.99)],
            4.99,
            "2024-06-24",
            "16:20",
            "cancelled",
        ),
    ]


CLIENTS = EntityConfig(
    key="clients",
    label="Client",
    record_type=Client,
    searchable=("name", "email"),
    sortable=("name", "email"),
    default_sort=SortState("name", ASC),
    form_fields=(
        FieldSpec("name", "Full name", TEXT, required=True, placeholder="Enter the full name"),
        FieldSpec("email", "E-mail", TEXT, required=True, placeholder="Enter the e-mail"),
        FieldSpec("phone", "Phone", TEXT, required=True, placeholder="(11) 99999-9999"),
        FieldSpec("address", "Address", TEXT, required=True, placeholder="Enter the full address"),
    ),
    seed=seed_clients,
)

PRODUCTS = EntityConfig(
    key="products",
    label="Product",
    record_type=Product,
    searchable=("name", "category"),
    sortable=("name", "price", "stock", "category"),
    default_sort=SortState("name", ASC),
    form_fields=(
        FieldSpec("name", "Product name", TEXT, required=True, placeholder="Enter the product name"),
        FieldSpec("price", "Price", FLOAT, required=True),
        FieldSpec("stock", "Stock", INT, required=True),
        FieldSpec("category", "Category", TEXT, required=True, options=tuple(PRODUCT_CATEGORIES)),
        FieldSpec("description", "Description (optional)", TEXTAREA),
    ),
    seed=seed_products,
)

ORDERS = EntityConfig(
    key="orders",
    label="Order",
    record_type=Order,
    searchable=("client_name", "id"),
    sortable=("id", "client_name", "date", "total"),
    default_sort=SortState("date", DESC),
    form_fields=(
        FieldSpec("client_name", "Client name", TEXT, required=True, placeholder="Enter the client name"),
        FieldSpec("date", "Order date", DATE, required=True),
        FieldSpec("total", "Total", FLOAT, required=True),
        FieldSpec("status", "Status", CHOICE, options=tuple(ORDER_STATUSES)),
    ),
    seed=seed_orders,
)

# Sales history is read-only: no form fields
SALES = EntityConfig(
    key="sales",
    label="Sale",
    record_type=Sale,
    searchable=("customer", "id"),
    sortable=("id", "customer", "date", "total"),
    default_sort=SortState("id", ASC),
    seed=seed_sales,
)

ENTITY_CONFIGS: Dict[str, EntityConfig] = {
    config.key: config for config in (CLIENTS, PRODUCTS, ORDERS, SALES)
}
