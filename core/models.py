"""Record types managed by the console."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    email: str
    phone: str
    address: str


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    stock: int
    category: str
    description: str = ""


@dataclass(frozen=True)
class Order:
    """A customer order. `client_name` is a free-text copy, not a link."""

    id: int
    client_name: str
    date: str
    total: float
    status: str = "pending"


@dataclass(frozen=True)
class SaleItem:
    name: str
    quantity: int
    price: float


@dataclass(frozen=True)
class Sale:
    id: int
    customer: str
    items: List[SaleItem] = field(default_factory=list)
    total: float = 0.0
    date: str = ""
    time: str = ""
    status: str = "completed"


@dataclass
class StoreSettings:
    company_name: str = "SuperMercado"
    email: str = "admin@supermercado.com"
    phone: str = "(11) 99999-9999"
    address: str = "Rua das Flores, 123"
    notifications: bool = True
    backup_auto: bool = False
