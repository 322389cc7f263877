from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class MandateInfo:
    """An upcoming or newly created recurring debit.

    Kept out of the transaction stream; subscription trackers consume it.
    ``date_format`` is the issuer's format for ``next_deduction_date``.
    """

    amount: Decimal
    next_deduction_date: Optional[str]
    merchant: str
    umn: Optional[str] = None
    date_format: str = "dd/MM/yy"


@dataclass(frozen=True)
class BalanceUpdateInfo:
    """A balance-only notification: no money moved."""

    bank_name: str
    account_last4: Optional[str]
    balance: Decimal
    as_of_date: Optional[datetime] = None
