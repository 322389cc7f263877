from typing import Optional, Sequence

from smsledger.bank.regions.region import Region
from smsledger.cascade import DecisionTable, contains_any, when
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.constants import Constants
from smsledger.transaction_type import TransactionType


class MobileMoneyRegion(Region):
    """Wallet operators (M-PESA, Tigo Pesa, Selcom, Telebirr).

    Receipts are "Confirmed"/"Accepted" notices keyed by a transaction
    code. A wallet has no account number, so ``account_last4`` falls back
    to a fixed sentinel unless the message names a linked card.
    """

    RECEIPT_CUES = ("confirmed", "accepted", "successful", "thank you for using")
    TRANSACTION_VERBS = (
        "paid to", "sent to", "received", "withdrawn", "withdraw", "you have sent",
        "you have paid", "you have transferred", "cash-in", "bought", "new balance",
        "balance is",
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "you have received", "cash-in", "deposited to your", "received"),
        when(
            TransactionType.EXPENSE,
            "paid to", "sent to", "you have sent", "you have paid", "you have transferred",
            "withdrawn", "withdraw", "bought",
        ),
    )

    CLEANUPS = tuple(p for p in Region.CLEANUPS if p is not CompiledPatterns.Cleaning.LTD)

    def __init__(self, currency: str, wallet: str = Constants.MobileMoney.WALLET):
        super().__init__(currency)
        self.wallet = wallet

    def is_transaction_message(self, message: str, verbs: Sequence[str] = ()) -> bool:
        lower = message.lower()
        if contains_any(lower, self.OTP_PHRASES) or contains_any(lower, self.PROMO_PHRASES):
            return False
        if not contains_any(lower, self.RECEIPT_CUES):
            return False
        return contains_any(lower, self.TRANSACTION_VERBS) or contains_any(lower, verbs)

    def extract_account_last4(self, message: str) -> Optional[str]:
        card = super().extract_account_last4(message)
        return card if card is not None else self.wallet

    def is_balance_update_notification(self, message: str) -> bool:
        return False
