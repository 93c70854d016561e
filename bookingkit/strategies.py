"""Interchangeable payment and routing strategies behind a common context."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class PaymentStrategy(ABC):
    """A way of paying an amount."""

    @property
    @abstractmethod
    def method(self) -> str:
        """Name of the payment method."""

    def pay(self, amount: int) -> str:
        """Pay the amount and return a confirmation."""
        return f"Paid {amount} using {self.method}."


class CreditCardPayment(PaymentStrategy):
    method = "Credit Card"


class UpiPayment(PaymentStrategy):
    method = "UPI"


class PaymentContext:
    """Pays through its current strategy, which may be replaced at any time."""

    def __init__(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def pay(self, amount: int) -> str:
        return self.strategy.pay(amount)


class RouteStrategy(ABC):
    """A way of planning a journey."""

    @property
    @abstractmethod
    def vehicle(self) -> str:
        """Name of the vehicle the route is planned for."""

    def decide_route(self, source: str, destination: str) -> str:
        """Plan a route and return a description of it."""
        return f"Deciding route for {self.vehicle} from {source} to {destination}."


class BikeRoute(RouteStrategy):
    vehicle = "Bike"


class CarRoute(RouteStrategy):
    vehicle = "Car"


class BusRoute(RouteStrategy):
    vehicle = "Bus"


class RouteContext:
    """Plans routes through its current strategy, which may be replaced."""

    def __init__(self, strategy: RouteStrategy) -> None:
        self.strategy = strategy

    def decide_route(self, source: str, destination: str) -> str:
        return self.strategy.decide_route(source, destination)


def main(argv: list[str] | None = None) -> int:
    """Pay and plan routes with each strategy in turn."""
    parser = argparse.ArgumentParser(description="Strategy demo.")
    parser.parse_args(argv)

    payment = PaymentContext(CreditCardPayment())
    print(payment.pay(1000))
    payment.strategy = UpiPayment()
    print(payment.pay(2000))

    route = RouteContext(BikeRoute())
    print(route.decide_route("Delhi", "Noida"))
    route.strategy = CarRoute()
    print(route.decide_route("Delhi", "Gurgaon"))
    route.strategy = BusRoute()
    print(route.decide_route("Delhi", "Faridabad"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())