from enum import Enum


class TransactionType(Enum):
    """Kind of money movement a parsed alert describes."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    # Credit-card spend; settles against a card limit rather than a balance
    CREDIT = "CREDIT"
    TRANSFER = "TRANSFER"
    INVESTMENT = "INVESTMENT"
