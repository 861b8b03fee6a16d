"""A price-time priority order book that keeps a trade log and can print itself."""

from __future__ import annotations

from typing import Any, List, Optional, TextIO

from matchbook.managed_book import ManagedOrderBook
from matchbook.order import Order, Trade


class OrderBook(ManagedOrderBook):
    """Order book with cancel, cancel-replace and a log of every trade.

    Matching follows price-time priority and executes at the resting sell
    price. Cancels are lazy, as in :class:`ManagedOrderBook`.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        super().__init__(out)
        self._trade_log: List[Trade] = []

    def add_order(self, order: Order) -> List[Trade]:
        """Register and rest ``order``, match, log and return the trades made."""
        trades = super().add_order(order)
        self._trade_log.extend(trades)
        return trades

    def cancel_order(self, order_id: str) -> Any:
        """Mark the order ``order_id`` as canceled."""
        return super().cancel_order(order_id)

    def modify_order(self, order_id: str, new_price: float, new_qty: int) -> Any:
        """Cancel ``order_id`` and replace it with a new price and quantity."""
        return super().modify_order(order_id, new_price, new_qty)

    def bids(self) -> List[Order]:
        """Live buy orders, best first."""
        return list(super().bids())

    def asks(self) -> List[Order]:
        """Live sell orders, best first."""
        return list(super().asks())

    @property
    def trade_log(self) -> List[Trade]:
        """Every trade this book has made, oldest first."""
        return list(self._trade_log)

    def format(self) -> str:
        """Render live bids, live asks and the trade log as text."""
        lines = ["Buy Orders:"]
        lines.extend(
            f"  [BUY]  {o.id} @{o.price:g} x {o.quantity}" for o in self.bids()
        )
        lines.append("Sell Orders:")
        lines.extend(
            f"  [SELL] {o.id} @{o.price:g} x {o.quantity}" for o in self.asks()
        )
        lines.append("Trade Log:")
        lines.extend(
            f"  [TRADE] {t.buy_id} x {t.sell_id} @{t.price:g} x {t.quantity}"
            for t in self._trade_log
        )
        return "\n".join(lines) + "\n"

    def show(self) -> None:
        """Write :meth:`format` to the book's output stream."""
        print(self.format(), end="", file=self._out, flush=True)