"""An order book with price priority and no order management."""

from __future__ import annotations

import heapq
import itertools
from typing import List, Optional, TextIO, Tuple

from matchbook.order import Order, Trade


class SimpleOrderBook:
    """Matches crossing buy and sell orders at the resting sell price.

    Orders rank by price only; equal prices keep arrival order. A partly
    filled order goes back into the book as a fresh order for the remainder.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self._bids: List[Tuple[float, int, Order]] = []
        self._asks: List[Tuple[float, int, Order]] = []
        self._seq = itertools.count()

    def add_order(self, order: Order) -> List[Trade]:
        """Rest ``order`` in the book, match, and return the trades made."""
        self._push(order)
        return self._match()

    def bids(self) -> List[Order]:
        """Resting buy orders, best first."""
        return [order for *_, order in sorted(self._bids)]

    def asks(self) -> List[Order]:
        """Resting sell orders, best first."""
        return [order for *_, order in sorted(self._asks)]

    def _push(self, order: Order) -> None:
        seq = next(self._seq)
        if order.is_buy:
            heapq.heappush(self._bids, (-order.price, seq, order))
        else:
            heapq.heappush(self._asks, (order.price, seq, order))

    def _match(self) -> List[Trade]:
        trades: List[Trade] = []
        while self._bids and self._asks:
            buy = self._bids[0][-1]
            sell = self._asks[0][-1]
            if buy.price < sell.price:
                break
            qty = min(buy.quantity, sell.quantity)
            print(
                f"[MATCH] {buy.id} x {sell.id} @ {sell.price:g} x {qty}",
                file=self._out,
                flush=True,
            )
            trades.append(Trade(buy.id, sell.id, sell.price, qty))
            heapq.heappop(self._bids)
            heapq.heappop(self._asks)
            if buy.quantity > qty:
                self._push(Order(buy.id, True, buy.price, buy.quantity - qty))
            if sell.quantity > qty:
                self._push(Order(sell.id, False, sell.price, sell.quantity - qty))
        return trades