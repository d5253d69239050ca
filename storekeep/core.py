"""Core records and command descriptors of the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple


class CommandAction(IntEnum):
    """What a command does."""

    GET = 0
    CREATE = 1
    UPDATE = 2
    DELETE = 3
    CHECK = 4
    EXECUTE = 5


class ResourceType(IntEnum):
    """Which kind of record a command works on."""

    CUSTOMER = 0
    ORDER = 1
    PRODUCT = 2
    BATCH = 3


@dataclass
class Command:
    """An action applied to a kind of resource."""

    action: CommandAction
    resource_type: ResourceType


@dataclass
class BatchCore:
    """A batch of one product bought from a supplier."""

    id: str = ""
    product_id: str = ""
    supplier_id: str = ""
    export_date: str = ""
    import_date: str = ""
    expired_date: str = ""
    import_price: float = 0.0
    export_price: float = 0.0
    original_quantity: int = 0
    remaining_quantity: int = 0
    note: str = ""


class DebtType(IntEnum):
    """How an order's debt accrues."""

    NONE = 0
    MONTH = 1
    SEASON = 2


@dataclass
class OrderCore:
    """A sale order."""

    id: str = ""
    sale_date: str = ""
    payment_history: Tuple[str, float] = field(default_factory=lambda: ("", 0.0))
    total_price: float = 0.0
    note: str = ""


@dataclass
class ProductCore:
    """A product offered for sale."""

    id: str = ""
    name: str = ""
    price: float = 0.0
    note: str = ""