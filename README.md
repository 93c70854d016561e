# bookingkit

A small collection of booking and business components, each with a short
command-line demonstration.

## Modules

- **`bookingkit.seating`**: seat allocation for a bus with seats numbered
  from 1 to a capacity (100 by default).
  - `SeatAllocator` keeps the set of allocated seats. `occupied()` lists
    them in order, `occupied_ranges()` groups consecutive seats into
    `(first, last)` pairs, `format_occupied()` renders them as
    `2-5, 35, 100`, and `status()` gives `Total Allocated: 8/100`.
  - `BitSeatAllocator` keeps the same state as the bits of one integer.
    `report()` lists the seats separated by spaces followed by a line
    `Total N seats occupied.`
  - Seat numbers outside the bus raise `InvalidSeatError`, allocating a
    taken seat raises `SeatOccupiedError`, and freeing a free seat raises
    `SeatAlreadyFreeError`; all are subclasses of `SeatError` and carry the
    offending number in `seat`. A capacity below 1 raises `ValueError`.
- **`bookingkit.cinema`**: a `Cinema` hall of rows and columns, addressed
  from 1. `book_seat`, `unbook_seat` and `is_booked` act on one seat;
  `book_group(row, count)` books the leftmost run of `count` free seats in
  the row and returns its first and last column. `layout()` draws the hall
  with `O` for free and `X` for booked seats. Failures raise
  `InvalidPositionError`, `SeatBookedError`, `SeatAvailableError` or
  `NoConsecutiveSeatsError`, all subclasses of `CinemaError`.
- **`bookingkit.library`**: a `Library` of `Book` records kept in the order
  they were added. `add_book`, `borrow_book` and `return_book` return the
  affected `Book`; `find_by_title` returns the first match or `None`,
  `find_by_author` returns every match, `books()` lists all books and
  `listing()` renders the catalogue. Failures raise `BookExistsError`,
  `BookNotFoundError` (also a `KeyError`), `BookBorrowedError` or
  `BookNotBorrowedError`, all subclasses of `LibraryError`.
- **`bookingkit.accounts`**: `SavingAccount` and `CurrentAccount` are
  `WithdrawableAccount`s; `FixedDepositAccount` accepts deposits only and
  its `withdraw` raises `WithdrawalNotAllowedError`. Withdrawing more than
  the balance raises `InsufficientBalanceError`. `deposit` and `withdraw`
  return the new balance. `Client(withdrawable, non_withdrawable)` runs a
  round of deposits and withdrawals (1000 in and 600 out of each
  withdrawable account, 2000 into each other account, all adjustable by
  keyword) and `process_transactions()` returns a log of lines.
- **`bookingkit.cart`**: `Product`, `ShoppingCart` (`add_product`,
  `products`, `total`), an `Invoice` whose `render()` returns the invoice
  text, `format_item` for a single invoice line, and `CartStore` with the
  variants `SqlCartStore`, `MongoCartStore` and `FileCartStore`.
- **`bookingkit.users`**: a `UserService` that stores users through any
  `Database` implementation, such as `MySQLDatabase` or `MongoDBDatabase`;
  `store_user` returns the command the database reports.
- **`bookingkit.strategies`**: payment strategies (`CreditCardPayment`,
  `UpiPayment`) used through a `PaymentContext`, and route strategies
  (`BikeRoute`, `CarRoute`, `BusRoute`) used through a `RouteContext`.
  The `strategy` attribute of a context can be replaced at any time.

## Installation

```
pip install .
```

The package has no runtime dependencies and needs Python 3.10 or later.

## Commands

```
bookingkit-seating      # allocate, free and list bus seats
bookingkit-cinema       # interactive cinema reservation menu
bookingkit-library      # add, borrow, return and search books
bookingkit-accounts     # deposits and withdrawals across account types
bookingkit-cart         # build a cart, print its invoice and "save" it
bookingkit-users        # store users through different databases
bookingkit-strategies   # pay and plan routes with swappable strategies
```

`bookingkit-seating` takes `--seats N` for the capacity and `--bits` to use
`BitSeatAllocator`. `bookingkit-cinema` takes `--rows` and `--columns`
(10 each by default) and reads its menu choices from standard input:

1. Book a seat (row and seat number)
2. Unbook a seat (row and seat number)
3. Book a group of consecutive seats (row and count)
4. Show the seating layout
5. Exit

## Errors

Operations that cannot be carried out raise an exception instead of
returning a status. The seating, cinema and library modules each have a
base class, so callers can catch one family of errors at a time:

```python
from bookingkit.seating import SeatError
from bookingkit.cinema import CinemaError
from bookingkit.library import LibraryError
```

## What the package does not do

Nothing is stored anywhere. All state lives in memory for the life of the
objects. `CartStore` and its variants, and the `Database` implementations in
`bookingkit.users`, do not write to any database or file: they return a
text description of the save they stand for. The payment and route
strategies likewise only return a message; no payment is made and no route
is computed.

## Running the tests

```
pip install .[test]
pytest
```