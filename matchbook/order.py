"""Order and trade records shared by the order books."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Order:
    """A limit order.

    ``quantity`` is the open quantity and shrinks as the order is filled.
    ``timestamp`` gives time priority among orders at the same price.
    """

    id: str
    is_buy: bool
    price: float
    quantity: int
    timestamp: int = 0
    symbol: str = ""
    canceled: bool = False


@dataclass(frozen=True)
class Trade:
    """One execution between a buy order and a sell order."""

    buy_id: str
    sell_id: str
    price: float
    quantity: int