# patternkit

Small algorithms and textbook design patterns. Each one lives in its own
self-contained module that you can import and use directly. The package
depends only on the standard library.

## Installation

```
pip install patternkit
```

To run the test suite:

```
pip install "patternkit[test]"
pytest
```

## Algorithms

```python
from patternkit.three_way import three_way_sort
from patternkit.articulation import find_articulation_points
from patternkit.lru import LRUCache
from patternkit.smallest_range import smallest_range
from patternkit.subarray_min import sum_subarray_mins
from patternkit.stack_sort import sort_stack

three_way_sort([0, -1, 2, 0, -3, 1, 0, -2])
# a new list: negatives, then zeros, then positives (input left untouched)

find_articulation_points(5, [(0, 1), (1, 2), (2, 0), (1, 3), (3, 4)])
# vertices in discovery order; ValueError for a vertex outside 0..n-1

cache = LRUCache(2)        # ValueError if capacity < 1
cache.put(1, 10)
cache.get(1)               # 10
cache.get(99)              # -1 (patternkit.lru.MISSING) when the key is absent
len(cache)                 # 1

smallest_range([[1, 2, 3], [4, 5], [1, 2]])   # a (start, end) tuple
sum_subarray_mins([3, 1, 2, 4])               # 17, taken modulo 10**9 + 7

stack = [3, 1, 4, 2, 1]    # the last element is the top
sort_stack(stack)          # sorted in place, largest on top
```

`smallest_range` raises `ValueError` when it gets no lists or an empty list.
`patternkit.stack_sort.insert_sorted(stack, value)` pushes one value onto a
stack that is already sorted and keeps it sorted.

## Design patterns

| Module | Pattern | Main names |
| --- | --- | --- |
| `patternkit.weights` | Adapter | `WeightMachine`, `PoundsWeightMachine`, `KilogramAdapter` |
| `patternkit.student` | Builder | `StudentBuilder`, `Student` |
| `patternkit.logchain` | Chain of responsibility | `LogLevel`, `Handler`, `build_chain` |
| `patternkit.filesystem` | Composite | `Entry`, `File`, `Directory` |
| `patternkit.pizza` | Decorator | `PlainPizza`, `Margherita`, `Cheese`, `Pepperoni`, `Veggie` |
| `patternkit.glyphs` | Flyweight | `Glyph`, `GlyphFactory`, `render_text` |
| `patternkit.auction` | Mediator | `Auction`, `Bidder` |
| `patternkit.memento` | Memento | `Rectangle`, `History`, `Snapshot` |
| `patternkit.observer` | Observer | `StockObservable`, `EmailObserver`, `MobileObserver` |
| `patternkit.pool` | Object pool / singleton | `ConnectionPool`, `Client`, `PoolExhaustedError` |
| `patternkit.dbproxy` | Proxy | `DatabaseProxy`, `Database`, `Role`, `AccessDenied` |
| `patternkit.rooms` | Visitor | `SingleRoom`, `DoubleRoom`, `SuiteRoom`, `PriceVisitor`, `MaintenanceVisitor` |
| `patternkit.vehicles` | Strategy | `Passenger`, `Sports`, `OffRoad`, `NormalDrive`, `SportsDrive` |
| `patternkit.vending` | State | `VendingMachine`, `Item`, `IdleState` and the other states |

Some examples:

```python
from patternkit.pizza import Margherita, Cheese, Pepperoni
Cheese(Pepperoni(Cheese(Margherita()))).cost()   # 10.0

from patternkit.student import StudentBuilder
student = StudentBuilder().with_name("John Doe").with_roll_no(12345).with_age(20) \
    .add_subject("Mathematics").build()
print(student.render())

from patternkit.filesystem import Directory, File
root = Directory("root")
root.add(File("file1.txt"))
root.ls()   # ["|->Directory: root", "|->->File: file1.txt"]

from patternkit.dbproxy import DatabaseProxy, Role, AccessDenied
proxy = DatabaseProxy()
proxy.get(Role.ADMIN, 1)   # "Data for ID: 1"
proxy.get(Role.USER, 1)    # raises AccessDenied
```

Notes on behaviour:

- `build_chain(stream)` returns a debug, info, warning, error chain. Each
  handler writes `"<Level>: <message>"` to the stream, or to standard output
  when no stream is given. `handle` returns whether a handler wrote the
  message.
- `Bidder` and the observers write their lines to an optional stream.
  Bidders also keep what they receive in `inbox`, and observers keep what
  they send in `sent`.
- `StockObservable.set_state` only takes a change from zero to non-zero or
  from non-zero to zero. It returns whether it notified the observers.
- `ConnectionPool.instance()` returns a shared pool that starts with 2
  connections and allows at most 4. `acquire` raises `PoolExhaustedError`
  when every connection is in use. `release` raises `ValueError` for a
  connection that was not checked out.
- `Rectangle.restore()` returns `None` and leaves the dimensions as they are
  when nothing has been saved. `History.pop()` raises `IndexError` when it
  is empty.
- `VendingMachine` records every message it produces in `messages` and keeps
  the items it has handed out in `dispensed`. Button presses go to
  `machine.state`.
- `Rectangle`, `ConnectionPool`, `Database` and `VendingMachine` also report
  through the standard `logging` module.

## Small systems

- `patternkit.shortener`: `UrlShortener(length=5)` hands out codes of the
  given length in a fixed order. `resolve` returns the long URL and counts a
  visit, and raises `KeyError` for an unknown code. `delete` frees a code so
  it can be reused once all fresh codes are gone. `CodePool` raises
  `IndexError` when it has no codes left.
- `patternkit.logs`: `ErrorLog`, `WarningLog` and `NormalLog` keep formatted
  lines per file name (`add`, `entries`). `Client` is a plain record of a
  name, an e-mail address and a phone number.
- `patternkit.atm`: `ATM`, `Account` and `Card` model a simple cash machine.
  `ATM` takes an optional `read` callable for input lines and an optional
  `output` stream.

The ATM also runs as an interactive console session:

```
patternkit-atm [--username NAME] [--balance AMOUNT]
```

The command creates an account with one card. It asks for the PIN, which
starts as `patternkit.atm.DEFAULT_PIN`. It then offers withdraw, deposit,
balance, PIN change and exit until you choose exit or enter an invalid
option.

## What it does not do

Everything is kept in memory.

- `DatabaseProxy`, `Database` and `ConnectionPool` do not connect to any real
  database. They only record and log the operations.
- `UrlShortener` is a plain object. It does not run a web server and does
  not redirect.
- The observers and `patternkit.logs` do not send e-mails or text messages.
  They do not write log files, and they do not deliver notifications.
- Accounts, cards and balances are not stored between runs of
  `patternkit-atm`.