import hashlib
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType

_CENT = Decimal("0.01")

_TXN_TIME = Cascade(
    group(r"\bat\s+(\d{1,2}:\d{2}(?::\d{2})?)"),
    rule(r"\bon\s+(\d{1,2}-\w{3}-\d{2,4})\s+at\s+(\d{1,2}:\d{2})", lambda m: m.group(1) + " " + m.group(2)),
    group(r"\bon\s+(\d{1,2}-\w{3}-\d{2,4})"),
)

_TAX = ("tin/tax information", "tin/tax informat")

# Fragments of the "by <narration>" trailer, checked in order
_NARRATIONS = (
    ("INDIAN CLEARING CORPO", "Indian Clearing Corporation"),
    ("CLEARING CORPO", "Clearing Corporation"),
    ("NSE CLEARING", "NSE Clearing"),
    ("BSE CLEARING", "BSE Clearing"),
    ("NEFT", "NEFT Transfer"),
    ("IMPS", "IMPS Transfer"),
    ("ETFR", "Transfer"),
)


def _narration(match) -> Optional[str]:
    text = match.group(1).strip()
    upper = text.upper()
    if "CHRGS" in upper or "CHARGES" in upper:
        return None
    if "RTGS" in upper and "CLEARING" not in upper:
        return "RTGS Transfer"
    for fragment, name in _NARRATIONS:
        if fragment in upper:
            return name
    if "MTFR" in upper:
        payee = re.search(r"mTFR/\d+/(.+)", text, re.IGNORECASE)
        return payee.group(1).strip() if payee else "Mobile Transfer"
    if "TIN" in upper:
        return "Tax Information Network"
    return text.split("/")[0]


def _towards(match) -> str:
    text = match.group(1).strip()
    return "Tax Information Network" if contains_any(text.lower(), _TAX) else text


def _upi_handle(match) -> Optional[str]:
    name = match.group(1).split("@")[0]
    return name if name and name.lower() != "upi" else None


class JKBankParser(BankParser):
    """
    Jammu & Kashmir Bank (JK Bank) specific parser.

    JK Bank resends the same alert with small wording changes, so its
    records carry a ``transaction_hash`` built from the amount and the
    reference number (or the transaction time and balance when there is
    no reference) instead of the message text.
    """

    region = INDIA
    senders = Senders(
        exact=("JKBANK", "JKB", "JKBANKL", "JKBNK"),
        patterns=(r"^[A-Z]{2}-JKB", r"^JKBANK-[A-Z]+$", r"^JKB-[A-Z]+$"),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "withdrawn", "spent", "charged", "paid", "purchase", "transferred"),
        when(TransactionType.INCOME, "credited", "deposited", "received", "refund"),
        when(TransactionType.INCOME, "cashback", unless=("earn cashback",)),
    )

    MERCHANT = Cascade(
        group(r"Amt\s+received\s+from\s+(.+?)(?:\s+having\s+A/C|$)", requires=("imps fund transfer",)),
        group(r"received\s+from\s+([^.\n]+?)(?:\s+having|\s+with|$)", requires=("imps fund transfer",)),
        label(r"imps\s+fund\s+transfer", "IMPS Transfer"),
        label(r"tin/tax\s+informat", "Tax Information Network"),
        label(r"atm\s+recovery", "ATM Recovery Charge"),
        rule(r"towards\s+([^.\n]+?)(?:\.\s*Avl|\.\s*Available|\.\s*To\s+dispute|$)", _towards),
        rule(
            r"(?:Debited|Credited)\s+by\s+INR\s+[\d,]+(?:\.\d{2})?\s+at\s+[\d:]+\s+by\s+([^.\n]+?)(?:\.|Available|$)",
            _narration,
        ),
        group(r"\bby\s+(?!INR)([^.\n]+?)(?:\.|Available|$)"),
        group(r"via\s+UPI\s+from\s+([^.\n]+?)\s+on"),
        group(r"mTFR/\d+/([^.\n]+?)(?:\.|A/C|$)"),
        rule(r"\bto\s+([^@\s]+@\S+)", _upi_handle, requires=("via upi",)),
        group(r"\bto\s+([^.\n]+?)\s+via\s+UPI"),
        label(r"via\s+upi", "UPI"),
        label(r"\bATM\b|withdrawn", "ATM"),
        group(r"\bto\s+([^.\n]+?)\s+via"),
        group(r"\bfrom\s+([^.\n]+?)(?:\s+on|\s+Ref|$)"),
        group(r"\bat\s+([^.\n]+?)(?:\s+on|\s+Ref|$)"),
        group(r"\bfor\s+([^.\n]+?)(?:\s+on|\s+Ref|$)"),
    )

    REFERENCE = Cascade(
        group(r"RRN\s+No\.?\s*(\d+)"),
        group(r"UPI\s+Ref[:\s]+(\d+)"),
        group(r"txn\s+Ref[:\s]+([A-Z0-9]+)"),
        group(r"Reference[:\s]+([A-Z0-9]+)"),
        group(r"Ref\s+No[:\s]+([A-Z0-9]+)"),
    )

    ACCOUNT = Cascade(
        group(r"Your\s+A/c\s+X+(\d{4})"),
        group(r"JK\s+Bank\s+A/c\s+no\.\s+X+(\d{4})"),
        group(r"A/c\s+X*(\d{4})"),
        group(r"Account\s+X+(\d{4})"),
        group(r"A/c\s+ending\s+(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Available\s+Bal\s+is\s+INR\s*" + NUMBER),
        amount(r"A/C\s+Bal\s+is\s+INR\s*" + NUMBER),
        amount(r"Avl\s+Bal[:\s]+Rs\.?\s*" + NUMBER),
        amount(r"Balance[:\s]+Rs\.?\s*" + NUMBER),
        amount(r"\bBal\s+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "JK Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, ("your rtgs txn", "your neft txn", "your imps txn")) and "has been credited" in lower:
            return False
        return super().is_transaction_message(message)

    def transaction_hash(self, message: str, sender: str, amount: Decimal) -> Optional[str]:
        parts = ["JKBANK", str(amount.quantize(_CENT, rounding=ROUND_HALF_UP))]
        reference = self.extract_reference(message)
        txn_time = _TXN_TIME(message)
        balance = self.extract_balance(message)

        if reference is not None:
            parts.append("REF:" + reference)
            if txn_time is not None:
                parts.append("TIME:" + txn_time)
        elif txn_time is not None:
            parts.append("TIME:" + txn_time)
            if balance is not None:
                parts.append("BAL:" + str(balance.quantize(_CENT, rounding=ROUND_HALF_UP)))
        elif balance is not None:
            parts.extend([sender, "BAL:" + str(balance.quantize(_CENT, rounding=ROUND_HALF_UP))])
        else:
            return None
        return hashlib.md5("|".join(parts).encode("utf-8")).hexdigest()
