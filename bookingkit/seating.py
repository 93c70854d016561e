"""Numbered seat allocation for a bus, with a set-based and a bitmask-based store."""

from __future__ import annotations

import argparse
from itertools import groupby

DEFAULT_CAPACITY = 100


class SeatError(Exception):
    """Base class for seat allocation errors."""

    def __init__(self, seat: int, message: str) -> None:
        super().__init__(message)
        self.seat = seat


class InvalidSeatError(SeatError):
    """The seat number lies outside the bus."""

    def __init__(self, seat: int) -> None:
        super().__init__(seat, f"Invalid seat number : {seat}")


class SeatOccupiedError(SeatError):
    """The seat is already taken."""

    def __init__(self, seat: int) -> None:
        super().__init__(
            seat, f"error : Select another seat. Seat {seat} is already occupied"
        )


class SeatAlreadyFreeError(SeatError):
    """The seat being freed was not taken."""

    def __init__(self, seat: int) -> None:
        super().__init__(seat, "Error : Seat is already free")


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class SeatAllocator:
    """Tracks which of the seats 1..capacity are allocated."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._taken: set[int] = set()

    def _validate(self, seat: int) -> None:
        if not 1 <= seat <= self.capacity:
            raise InvalidSeatError(seat)

    def allocate(self, seat: int) -> None:
        """Mark a seat as allocated."""
        self._validate(seat)
        if seat in self._taken:
            raise SeatOccupiedError(seat)
        self._taken.add(seat)

    def free(self, seat: int) -> None:
        """Release an allocated seat."""
        self._validate(seat)
        if seat not in self._taken:
            raise SeatAlreadyFreeError(seat)
        self._taken.remove(seat)

    def occupied(self) -> list[int]:
        """Allocated seat numbers in ascending order."""
        return sorted(self._taken)

    def occupied_ranges(self) -> list[tuple[int, int]]:
        """Runs of consecutive allocated seats as inclusive (first, last) pairs."""
        ranges = []
        for _, run in groupby(enumerate(self.occupied()), key=lambda p: p[1] - p[0]):
            seats = [seat for _, seat in run]
            ranges.append((seats[0], seats[-1]))
        return ranges

    def format_occupied(self) -> str:
        """Allocated seats as text such as ``2-5, 35, 100``."""
        return ", ".join(
            f"{first}-{last}" if first != last else str(first)
            for first, last in self.occupied_ranges()
        )

    def status(self) -> str:
        """Summary line of allocated seats against capacity."""
        return f"Total Allocated: {len(self._taken)}/{self.capacity}"


class BitSeatAllocator:
    """Tracks allocated seats as bits of a single integer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._bits = 0

    def _mask(self, seat: int) -> int:
        if not 1 <= seat <= self.capacity:
            raise InvalidSeatError(seat)
        return 1 << (seat - 1)

    def allocate(self, seat: int) -> None:
        """Set the seat's bit."""
        mask = self._mask(seat)
        if self._bits & mask:
            raise SeatOccupiedError(seat)
        self._bits |= mask

    def free(self, seat: int) -> None:
        """Clear the seat's bit."""
        mask = self._mask(seat)
        if not self._bits & mask:
            raise SeatAlreadyFreeError(seat)
        self._bits ^= mask

    def occupied(self) -> list[int]:
        """Allocated seat numbers in ascending order."""
        return [seat for seat in range(1, self.capacity + 1) if self._bits >> (seat - 1) & 1]

    def report(self) -> str:
        """Allocated seats separated by spaces, then a total line."""
        seats = self.occupied()
        listed = "".join(f"{seat} " for seat in seats)
        return f"{listed}\nTotal {len(seats)} seats occupied."


def _try(action, seat: int, success: str) -> None:
    try:
        action(seat)
    except SeatError as exc:
        print(exc)
    else:
        print(success)


def main(argv: list[str] | None = None) -> int:
    """Run the seat allocation demonstration."""
    parser = argparse.ArgumentParser(description="Bus seat allocation demo.")
    parser.add_argument("--seats", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument("--bits", action="store_true", help="use the bitmask store")
    args = parser.parse_args(argv)

    allocator = BitSeatAllocator(args.seats) if args.bits else SeatAllocator(args.seats)
    for seat in (3, 4, 3, 2, 5, 35, 100, 0, 101, 36):
        _try(allocator.allocate, seat, f"Seat {seat} Allocated")
    _try(allocator.free, 100, "Seat 100 is freed.")
    _try(allocator.allocate, 100, "Seat 100 Allocated")

    if isinstance(allocator, BitSeatAllocator):
        print(allocator.report())
    else:
        print(allocator.format_occupied())
        print()
        print(allocator.status())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())