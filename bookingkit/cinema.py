"""Seat reservation for a cinema hall laid out in rows and columns."""

from __future__ import annotations

import argparse


class CinemaError(Exception):
    """Base class for reservation errors."""


class InvalidPositionError(CinemaError):
    """A row, column or group size lies outside the hall."""


class SeatBookedError(CinemaError):
    """The seat is already booked."""


class SeatAvailableError(CinemaError):
    """The seat is not booked."""


class NoConsecutiveSeatsError(CinemaError):
    """No run of free seats is long enough in the row."""


class Cinema:
    """A hall of rows x columns seats, addressed from 1."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise ValueError("a hall needs at least one row and one column")
        self.rows = rows
        self.columns = columns
        self._seats = [[False] * columns for _ in range(rows)]

    def _validate(self, row: int, column: int) -> None:
        if not (1 <= row <= self.rows and 1 <= column <= self.columns):
            raise InvalidPositionError("Invalid seat position.")

    def is_booked(self, row: int, column: int) -> bool:
        """Whether the seat is booked."""
        self._validate(row, column)
        return self._seats[row - 1][column - 1]

    def book_seat(self, row: int, column: int) -> None:
        """Book one seat."""
        if self.is_booked(row, column):
            raise SeatBookedError("Seat already booked.")
        self._seats[row - 1][column - 1] = True

    def unbook_seat(self, row: int, column: int) -> None:
        """Release one booked seat."""
        if not self.is_booked(row, column):
            raise SeatAvailableError("Seat is already available.")
        self._seats[row - 1][column - 1] = False

    def book_group(self, row: int, count: int) -> tuple[int, int]:
        """Book the leftmost run of ``count`` free seats; return its first and last column."""
        if not 1 <= row <= self.rows or not 1 <= count <= self.columns:
            raise InvalidPositionError("Invalid input.")
        seats = self._seats[row - 1]
        for start in range(self.columns - count + 1):
            if not any(seats[start:start + count]):
                seats[start:start + count] = [True] * count
                return start + 1, start + count
        raise NoConsecutiveSeatsError(
            "No sufficient consecutive seats available in the row."
        )

    def layout(self) -> str:
        """The seating chart, ``O`` for available and ``X`` for booked."""
        lines = [
            "Seating Layout (O = available, X = booked):",
            "    " + "".join(f"{c:2d}" for c in range(1, self.columns + 1)),
        ]
        for number, seats in enumerate(self._seats, start=1):
            marks = "".join(" X" if booked else " O" for booked in seats)
            lines.append(f"Row {number:2d}: {marks}")
        return "\n".join(lines)


MENU = """
--- Cinema Hall Seat Reservation System ---
1. Book a seat
2. Unbook a seat
3. Book a group of seats
4. Show seating layout
5. Exit"""


def _read_ints(prompt: str, count: int) -> list[int]:
    tokens: list[str] = []
    while len(tokens) < count:
        tokens.extend(input(prompt).split())
        prompt = ""
    return [int(token) for token in tokens[:count]]


def main(argv: list[str] | None = None) -> int:
    """Run the interactive reservation menu."""
    parser = argparse.ArgumentParser(description="Cinema hall seat reservation.")
    parser.add_argument("--rows", type=int, default=10)
    parser.add_argument("--columns", type=int, default=10)
    args = parser.parse_args(argv)
    cinema = Cinema(args.rows, args.columns)

    while True:
        print(MENU)
        try:
            choice = input("Enter your choice: ").strip()
            if choice == "1":
                row, seat = _read_ints("Enter row and seat number to book: ", 2)
                cinema.book_seat(row, seat)
                print("Seat booked successfully.")
            elif choice == "2":
                row, seat = _read_ints("Enter row and seat number to unbook: ", 2)
                cinema.unbook_seat(row, seat)
                print("Seat unbooked successfully.")
            elif choice == "3":
                row, count = _read_ints(
                    "Enter row and number of consecutive seats to book: ", 2
                )
                first, last = cinema.book_group(row, count)
                print(f"Group seats booked from seat {first} to {last}.")
            elif choice == "4":
                print()
                print(cinema.layout())
            elif choice == "5":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice. Please try again.")
        except CinemaError as exc:
            print(exc)
        except ValueError:
            print("Invalid input.")
        except EOFError:
            print("Exiting...")
            return 0


if __name__ == "__main__":
    raise SystemExit(main())