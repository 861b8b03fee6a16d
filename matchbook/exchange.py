"""A collection of order books, one per symbol."""

from __future__ import annotations

from typing import Dict, List, Optional, TextIO

from matchbook.book import OrderBook
from matchbook.order import Order, Trade


class Exchange:
    """Routes orders to the book of their symbol, creating books on demand."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self._books: Dict[str, OrderBook] = {}

    def book(self, symbol: str) -> OrderBook:
        """The book for ``symbol``; an empty one is created if none exists."""
        existing = self._books.get(symbol)
        if existing is None:
            existing = self._books[symbol] = OrderBook(self._out)
        return existing

    def add_order(self, order: Order) -> List[Trade]:
        """Send ``order`` to its symbol's book and return the trades made."""
        return self.book(order.symbol).add_order(order)

    def cancel_order(self, symbol: str, order_id: str) -> bool:
        """Cancel an order in ``symbol``'s book; False if it is unknown."""
        return self.book(symbol).cancel_order(order_id)

    def modify_order(
        self, symbol: str, order_id: str, new_price: float, new_qty: int
    ) -> bool:
        """Cancel-replace an order in ``symbol``'s book."""
        return self.book(symbol).modify_order(order_id, new_price, new_qty)

    def print_order_book(self, symbol: str) -> None:
        """Write a heading and the state of ``symbol``'s book."""
        print(f"\n📘 OrderBook for {symbol}:", file=self._out, flush=True)
        self.book(symbol).show()