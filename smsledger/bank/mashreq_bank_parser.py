import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import GULF
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, contains_any, group, label, rule, to_decimal, when
from smsledger.transaction_type import TransactionType

_CARD = ("debit card", "credit card")
_STATES_AMOUNT = re.compile(r"for\s+[A-Z]{3}\s+[0-9,]+", re.IGNORECASE)


def _unmasked_digits(match) -> Optional[str]:
    digits = match.group(1).upper().replace("X", "")
    return digits if any(c.isdigit() for c in digits) else None


def _masked_balance(match) -> Optional[Decimal]:
    # "AED XX,XXX.50" hides leading digits
    return to_decimal(match.group(1).upper().replace("X", "0"))


class MashreqBankParser(BankParser):
    """
    Parser for Mashreq Bank - UAE.

    NEO card alerts name the currency before the amount and may mask part of
    the available balance with ``X``.
    """

    region = GULF
    senders = Senders(exact=("MASHREQ", "MSHREQ"), contains=("MASHREQ",), dlt_codes=("MASHREQ", "MSHREQ"))

    CARD_CUES = (
        "neo visa debit card", "neo debit card", "debit card card ending", "credit card card ending",
        "card ending", "mashreq card",
    )
    EXTRA_VERBS = CARD_CUES[:4] + ("thank you for using", "available balance is")
    NOT_TRANSACTIONS = (
        "otp", "one time password", "verification code", "do not share", "activation",
        "has been blocked", "has been activated", "card request", "card application",
        "limit change", "pin change", "failed transaction", "transaction declined", "insufficient balance",
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, _STATES_AMOUNT, all_of=("debit card",)),
        when(TransactionType.CREDIT, _STATES_AMOUNT, all_of=("credit card",)),
        when(TransactionType.EXPENSE, "withdrawn", all_of=("atm",)),
        when(TransactionType.INCOME, "deposited", all_of=("atm",)),
        when(TransactionType.TRANSFER, "transfer"),
        when(TransactionType.INCOME, "credited"),
        when(TransactionType.EXPENSE, "debited"),
    ) + GULF.TYPES

    MERCHANT = Cascade(
        group(r"\bat\s+([^,\n]+?)\s+on\s+\d{1,2}-[A-Z]{3}-\d{4}", requires=(_CARD,)),
        label(r"withdrawn", "ATM Withdrawal", requires=("atm",)),
        label(r"transfer", "Transfer"),
    )

    ACCOUNT = Cascade(
        rule(r"Card\s+ending\s+([X\d]{4})", _unmasked_digits),
        rule(r"card\s+(?:no\.|number)\s+([X\d]{4})", _unmasked_digits),
        rule(r"account\s+(?:no\.|number)?\s*([X\d]{4})", _unmasked_digits),
    )

    BALANCE = Cascade(
        rule(r"Available\s+Balance\s+is\s+[A-Z]{3}\s+([X0-9,]+(?:\.\d{2})?)", _masked_balance),
        rule(r"Avl\.?\s*Bal\.?\s+[A-Z]{3}\s+([X0-9,]+(?:\.\d{2})?)", _masked_balance),
        rule(r"Balance:?\s+[A-Z]{3}\s+([X0-9,]+(?:\.\d{2})?)", _masked_balance),
    )

    REFERENCE = Cascade(group(r"(\d{1,2}-[A-Z]{3}-\d{4}\s+\d{1,2}:\d{2}\s+[AP]M)"))

    def get_bank_name(self) -> str:
        return "Mashreq Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)

    def detect_is_card(self, message: str) -> bool:
        return contains_any(message.lower(), self.CARD_CUES) or super().detect_is_card(message)
