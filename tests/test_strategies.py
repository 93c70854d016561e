import pytest

from bookingkit.strategies import (
    BikeRoute,
    BusRoute,
    CarRoute,
    CreditCardPayment,
    PaymentContext,
    PaymentStrategy,
    RouteContext,
    RouteStrategy,
    UpiPayment,
    main,
)


def test_credit_card_payment():
    assert CreditCardPayment().pay(1000) == "Paid 1000 using Credit Card."


def test_upi_payment_mentions_amount_and_method():
    text = UpiPayment().pay(2000)
    assert "2000" in text
    assert "UPI" in text


def test_bike_route():
    assert (
        BikeRoute().decide_route("Delhi", "Noida")
        == "Deciding route for Bike from Delhi to Noida."
    )


@pytest.mark.parametrize("cls, vehicle", [(CarRoute, "Car"), (BusRoute, "Bus")])
def test_routes_name_vehicle(cls, vehicle):
    text = cls().decide_route("A", "B")
    assert f" {vehicle} " in text
    assert text.endswith("from A to B.")


def test_bases_are_abstract():
    with pytest.raises(TypeError):
        PaymentStrategy()
    with pytest.raises(TypeError):
        RouteStrategy()


def test_payment_context_switches_strategy():
    context = PaymentContext(CreditCardPayment())
    assert context.pay(5) == CreditCardPayment().pay(5)
    context.strategy = UpiPayment()
    assert context.pay(5) == UpiPayment().pay(5)


def test_route_context_switches_strategy():
    context = RouteContext(BikeRoute())
    assert context.decide_route("X", "Y") == BikeRoute().decide_route("X", "Y")
    context.strategy = BusRoute()
    assert context.decide_route("X", "Y") == BusRoute().decide_route("X", "Y")


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == CreditCardPayment().pay(1000)
    assert lines[4] == BusRoute().decide_route("Delhi", "Faridabad")