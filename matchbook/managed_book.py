"""An order book with price-time priority, cancel and modify."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, TextIO, Tuple

from matchbook.order import Order, Trade


class ManagedOrderBook:
    """Price-time priority book that supports cancel and cancel-replace.

    Cancels are lazy: a canceled order stays in the book until it reaches
    the top during matching, where it is dropped.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self._bids: List[Tuple[float, int, int, Order]] = []
        self._asks: List[Tuple[float, int, int, Order]] = []
        self._orders: Dict[str, Order] = {}
        self._seq = itertools.count()

    def add_order(self, order: Order) -> List[Trade]:
        """Register and rest ``order``, match, and return the trades made."""
        self._orders[order.id] = order
        seq = next(self._seq)
        if order.is_buy:
            heapq.heappush(self._bids, (-order.price, order.timestamp, seq, order))
        else:
            heapq.heappush(self._asks, (order.price, order.timestamp, seq, order))
        return self._match()

    def cancel_order(self, order_id: str) -> bool:
        """Mark the order canceled; False if the id is unknown."""
        order = self._orders.get(order_id)
        if order is None:
            return False
        order.canceled = True
        self._say(f"[CANCEL] Order {order_id} marked as canceled.")
        return True

    def modify_order(self, order_id: str, new_price: float, new_qty: int) -> bool:
        """Cancel the order and enter a replacement keeping its time priority.

        Returns False if the id is unknown or the order is filled or canceled.
        """
        old = self._orders.get(order_id)
        if old is None:
            return False
        if old.quantity == 0 or old.canceled:
            self._say(f"[MODIFY-FAIL] Order {order_id} already filled or canceled.")
            return False
        old.canceled = True
        self._say(f"[MODIFY] Canceling and replacing Order {order_id}")
        self.add_order(
            Order(order_id, old.is_buy, new_price, new_qty, old.timestamp, old.symbol)
        )
        return True

    def bids(self) -> List[Order]:
        """Live buy orders, best first."""
        return self._live(self._bids)

    def asks(self) -> List[Order]:
        """Live sell orders, best first."""
        return self._live(self._asks)

    @staticmethod
    def _live(side: List[Tuple[float, int, int, Order]]) -> List[Order]:
        return [
            order
            for *_, order in sorted(side)
            if not order.canceled and order.quantity > 0
        ]

    def _say(self, line: str) -> None:
        print(line, file=self._out, flush=True)

    def _match(self) -> List[Trade]:
        trades: List[Trade] = []
        while self._bids and self._asks:
            buy = self._bids[0][-1]
            sell = self._asks[0][-1]
            if buy.canceled:
                heapq.heappop(self._bids)
                continue
            if sell.canceled:
                heapq.heappop(self._asks)
                continue
            if buy.price < sell.price:
                break
            qty = min(buy.quantity, sell.quantity)
            self._say(f"[MATCH] {buy.id} x {sell.id} @ {sell.price:g} x {qty}")
            trades.append(Trade(buy.id, sell.id, sell.price, qty))
            buy.quantity -= qty
            sell.quantity -= qty
            if buy.quantity == 0:
                heapq.heappop(self._bids)
            if sell.quantity == 0:
                heapq.heappop(self._asks)
        return trades