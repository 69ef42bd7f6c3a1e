# services/finance_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List

from models.account import InsufficientFundsError, SavingsAccount, Transaction

logger = logging.getLogger("warehouse.finance")


class TransactionProcessor(ABC):
    #Abstract base class for all payment channels.
    #Each processor handles one transaction before it hits the account.

    @abstractmethod
    def process(self, transaction: Transaction) -> None:
        pass


class BankTransferProcessor(TransactionProcessor):
    def process(self, transaction):
        logger.info(f"Processing bank transfer: ${transaction.amount} for {transaction.category}")


class MobileMoneyProcessor(TransactionProcessor):
    def process(self, transaction):
        logger.info(f"Processing mobile money: ${transaction.amount} for {transaction.category}")


class CryptoWalletProcessor(TransactionProcessor):
    def process(self, transaction):
        logger.info(f"Processing crypto transaction: ${transaction.amount} for {transaction.category}")


class FinanceApp:
    # Runs the sample transactions through their processors and applies
    # them to a savings account. Every processed transaction is recorded,
    # including ones the account rejected.

    def __init__(self):
        self.transactions: List[Transaction] = []

    def apply(self, account: SavingsAccount, processor: TransactionProcessor,
              transaction: Transaction) -> bool:
        processor.process(transaction)
        self.transactions.append(transaction)
        try:
            account.apply_transaction(transaction)
        except InsufficientFundsError as e:
            logger.warning(f"Transaction {transaction.id} rejected: {e}")
            return False
        logger.info(f"Applied transaction {transaction.id}. New balance: ${account.balance}")
        return True

    def run(self, now: datetime | None = None) -> SavingsAccount:
        now = now or datetime.now()
        account = SavingsAccount("SAV-12345", Decimal("1000"))
        logger.info(f"Initial balance: ${account.balance}")

        transactions = [
            Transaction(1, now, Decimal("150"), "Groceries"),
            Transaction(2, now, Decimal("75"), "Utilities"),
            Transaction(3, now, Decimal("200"), "Entertainment"),
        ]
        processors: List[TransactionProcessor] = [
            MobileMoneyProcessor(),
            BankTransferProcessor(),
            CryptoWalletProcessor(),
        ]

        for transaction, processor in zip(transactions, processors):
            self.apply(account, processor, transaction)

        logger.info(f"Final balance: ${account.balance}")
        return account
