"""Bank accounts, some of which allow withdrawals, and a client that transacts on them."""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable


class InsufficientBalanceError(ValueError):
    """A withdrawal exceeds the balance."""

    def __init__(self, account: "Account", amount: int) -> None:
        super().__init__(f"Insufficient Balance in {account.label}")
        self.account = account
        self.amount = amount


class WithdrawalNotAllowedError(RuntimeError):
    """The account does not permit withdrawals."""


class Account(ABC):
    """An account that accepts deposits."""

    label = "Account"

    def __init__(self, balance: int = 0) -> None:
        self.balance = balance

    def deposit(self, amount: int) -> int:
        """Add money and return the new balance."""
        self.balance += amount
        return self.balance

    def __repr__(self) -> str:
        return f"{type(self).__name__}(balance={self.balance})"


class WithdrawableAccount(Account):
    """An account that also allows withdrawals."""

    def withdraw(self, amount: int) -> int:
        """Take money out and return the new balance."""
        if amount > self.balance:
            raise InsufficientBalanceError(self, amount)
        self.balance -= amount
        return self.balance


class SavingAccount(WithdrawableAccount):
    label = "Saving Account"


class CurrentAccount(WithdrawableAccount):
    label = "Current Account"


class FixedDepositAccount(Account):
    """A deposit-only account."""

    label = "Fixed Deposit"

    def withdraw(self, amount: int) -> int:
        """Always refused."""
        raise WithdrawalNotAllowedError(
            "Amount cannot be withdrawn from Fixed Deposit Account"
        )


class Client:
    """Deposits into every account and withdraws from those that allow it."""

    def __init__(
        self,
        withdrawable: Iterable[Account],
        non_withdrawable: Iterable[Account] = (),
        *,
        deposit: int = 1000,
        withdrawal: int = 600,
        fixed_deposit: int = 2000,
    ) -> None:
        self.withdrawable = list(withdrawable)
        self.non_withdrawable = list(non_withdrawable)
        self.deposit_amount = deposit
        self.withdrawal_amount = withdrawal
        self.fixed_deposit_amount = fixed_deposit

    def process_transactions(self) -> list[str]:
        """Run the transactions and return a log of what happened."""
        log = []
        for account in self.withdrawable:
            balance = account.deposit(self.deposit_amount)
            log.append(f"Current Balance in {account.label} = {balance}")
            try:
                balance = account.withdraw(self.withdrawal_amount)
            except InsufficientBalanceError as exc:
                log.append(str(exc))
                log.append(f"Current Balance in {account.label} = {account.balance}")
            except WithdrawalNotAllowedError as exc:
                log.append(f"Exception {exc}")
            else:
                log.append(
                    f"Withdrawn Amount from {account.label}: {self.withdrawal_amount}"
                )
                log.append(f"Current Balance in {account.label} = {balance}")
        for account in self.non_withdrawable:
            balance = account.deposit(self.fixed_deposit_amount)
            log.append(f"Current Balance in {account.label} = {balance}")
        return log


def main(argv: list[str] | None = None) -> int:
    """Run the account transaction demonstration."""
    client = Client([SavingAccount(), CurrentAccount()], [FixedDepositAccount()])
    for line in client.process_transactions():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())