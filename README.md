# matchbook

Limit-order matching in plain Python:

- `matchbook.order`: the `Order` dataclass holds a limit order. Its fields are
  `id`, `is_buy`, `price`, `quantity`, `timestamp`, `symbol` and `canceled`.
  `quantity` is the open quantity. The frozen `Trade` dataclass records one
  execution, with `buy_id`, `sell_id`, `price` and `quantity`.
- `matchbook.simple_book.SimpleOrderBook`: ranks orders by price only. It has
  no cancel or modify.
- `matchbook.managed_book.ManagedOrderBook`: uses price-time priority. It can
  cancel an order, or modify one by cancelling it and entering a replacement.
- `matchbook.book.OrderBook`: the managed book, with a trade log and a text view
  of the book added.
- `matchbook.exchange.Exchange`: keeps one `OrderBook` per symbol.
- `matchbook.tsqueue.ThreadSafeQueue`: a blocking FIFO queue that threads can
  share.

There are no third-party dependencies. Python 3.10 or newer is required.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Matching rules

On every book, `add_order(order)` rests the order and then matches. It returns
the list of `Trade`s that the order produced.

- The best bid and the best ask trade when the bid price is at or above the ask
  price.
- The trade price is the price of the best ask. The quantity is the smaller of
  the two open quantities.
- `SimpleOrderBook` does not use timestamps. Orders at one price fill in the
  order they arrived. After a partial fill, the remainder goes back into the
  book as a new order.
- `ManagedOrderBook` and `OrderBook` fill orders at one price by lowest
  `timestamp` first. A partly filled order keeps its place, and its `quantity`
  goes down.
- `cancel_order(order_id)` marks the order as canceled and returns `True`. It
  returns `False` for an unknown id. A canceled order is dropped when matching
  reaches it at the top of the book.
- `modify_order(order_id, new_price, new_qty)` cancels the order and adds a
  replacement with the new price and quantity. The replacement keeps the old
  timestamp and symbol. The method returns `False` if the id is unknown, or if
  the order is already filled or canceled.

`bids()` and `asks()` list the resting orders, best first. The managed books
leave out canceled and filled orders.

Each book writes its messages to the `out` stream given to its constructor, or
to standard output when none is given:

```
[MATCH] A1 x A2 @ 149 x 4
[CANCEL] Order A1 marked as canceled.
[MODIFY] Canceling and replacing Order T1
[MODIFY-FAIL] Order G2 already filled or canceled.
```

## Using the exchange

```python
from matchbook.exchange import Exchange
from matchbook.order import Order

exchange = Exchange()
exchange.add_order(Order(id="A1", symbol="AAPL", is_buy=True, price=150.0, quantity=10, timestamp=1))
exchange.add_order(Order(id="A2", symbol="AAPL", is_buy=False, price=149.0, quantity=4, timestamp=2))

exchange.cancel_order("AAPL", "A1")
exchange.print_order_book("AAPL")
```

The exchange sends each order to the book for its `symbol`, and creates that
book the first time the symbol is used. `Exchange.book(symbol)` returns that
`OrderBook`. On an `OrderBook`:

- `trade_log` is a list of every trade, oldest first.
- `format()` returns the text view. It lists the buy orders, then the sell
  orders, then the trade log.
- `show()` writes that text to the book's output stream.

## Feeding a book from threads

- `ThreadSafeQueue.push(item)` appends an item and wakes one waiting consumer.
- `ThreadSafeQueue.pop(timeout=None)` waits until an item is available and
  returns the oldest one. If a timeout is given and it runs out first, it raises
  `queue.Empty`.
- `len(queue)` gives the number of items waiting.

## Commands

| Command | What it runs |
| --- | --- |
| `matchbook [exchange\|management\|streaming\|queue\|multi] [--no-delay]` | One of the demonstrations below. The default is `exchange`. `--no-delay` skips the simulated delays in the threaded demos. |
| `matchbook-exchange-demo` | Adds AAPL, TSLA and GOOG orders to one exchange, cancels and modifies some of them, then prints each book. |
| `matchbook-management-demo` | Adds six orders to one managed book, then cancels and modifies some of them. |
| `matchbook-streaming-demo [--no-delay]` | A producer thread sends five buy orders and then five sell orders through a queue. A consumer feeds them into a `SimpleOrderBook`. |
| `matchbook-queue-demo [basic\|multi] [--no-delay] [--orders N] [--producers N] [--consumers N]` | `basic` runs one producer and one consumer, which pass five orders. `multi` shares `--orders` orders (default 1000) among `--producers` producer threads (default 4) and `--consumers` consumer threads (default 2). |

In `multi` mode, each consumer takes `orders // consumers` orders. Choose counts
that divide evenly, so that no order is left in the queue.

## What it does not do

- All orders are limit orders. There are no market or stop orders.
- Books live in memory only. Nothing is saved.
- There is no network interface and no live order entry. The commands run fixed,
  scripted demonstrations.