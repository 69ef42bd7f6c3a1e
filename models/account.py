# models/account.py
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
# Transaction and account models for the finance demo.

@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Decimal
    category: str


class InsufficientFundsError(ValueError):
    def __init__(self, balance: Decimal, amount: Decimal):
        self.balance = balance
        self.amount = amount
        super().__init__(f"Insufficient funds: balance {balance}, requested {amount}")


class Account:
    def __init__(self, account_number: str, initial_balance: Decimal):
        self.account_number = account_number
        self.balance = initial_balance

    def apply_transaction(self, transaction: Transaction) -> None:
        self.balance -= transaction.amount


class SavingsAccount(Account):
    # A savings account never goes below zero.

    def apply_transaction(self, transaction: Transaction) -> None:
        if transaction.amount > self.balance:
            raise InsufficientFundsError(self.balance, transaction.amount)
        super().apply_transaction(transaction)
