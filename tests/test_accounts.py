import pytest

from bookingkit.accounts import (
    Client,
    CurrentAccount,
    FixedDepositAccount,
    InsufficientBalanceError,
    SavingAccount,
    WithdrawalNotAllowedError,
    main,
)


@pytest.mark.parametrize("cls", [SavingAccount, CurrentAccount, FixedDepositAccount])
def test_deposit_returns_balance(cls):
    account = cls()
    assert account.deposit(1000) == 1000
    assert account.balance == 1000


def test_initial_balance():
    assert SavingAccount(2000).balance == 2000


@pytest.mark.parametrize("cls", [SavingAccount, CurrentAccount])
def test_withdraw_round_trip(cls):
    account = cls(500)
    account.deposit(1000)
    assert account.withdraw(1000) == 500


@pytest.mark.parametrize("cls", [SavingAccount, CurrentAccount])
def test_overdraw_rejected(cls):
    account = cls(500)
    with pytest.raises(InsufficientBalanceError) as info:
        account.withdraw(600)
    assert account.balance == 500
    assert str(info.value) == f"Insufficient Balance in {account.label}"
    assert info.value.amount == 600


def test_fixed_deposit_refuses_withdrawal():
    account = FixedDepositAccount(2000)
    with pytest.raises(
        WithdrawalNotAllowedError,
        match="Amount cannot be withdrawn from Fixed Deposit Account",
    ):
        account.withdraw(500)
    assert account.balance == 2000


def test_non_withdrawable_only_deposited():
    fixed = FixedDepositAccount(500)
    log = Client([], [fixed]).process_transactions()
    assert log[-1] == "Current Balance in Fixed Deposit = 2500"
    assert fixed.balance == 2500


def test_client_log():
    saving, fixed = SavingAccount(), FixedDepositAccount()
    log = Client([saving], [fixed]).process_transactions()
    assert log[0] == "Current Balance in Saving Account = 1000"
    assert log[1] == "Withdrawn Amount from Saving Account: 600"
    assert log[-1] == "Current Balance in Fixed Deposit = 2000"
    assert saving.balance == 1000 - 600
    assert fixed.balance == 2000


def test_client_insufficient():
    account = CurrentAccount()
    log = Client([account], withdrawal=5000).process_transactions()
    assert "Insufficient Balance in Current Account" in log
    assert account.balance == 1000


def test_client_fixed_deposit_in_withdrawable_list():
    fixed = FixedDepositAccount()
    log = Client([fixed], withdrawal=500).process_transactions()
    assert log[-1] == "Exception Amount cannot be withdrawn from Fixed Deposit Account"
    assert fixed.balance == 1000


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Withdrawn Amount from Current Account: 600" in out
    assert "Current Balance in Fixed Deposit = 2000" in out