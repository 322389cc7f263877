import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import NEPAL
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, rule, when
from smsledger.transaction_type import TransactionType

# Branch code that appears in place of a counterpart
_BRANCH = "UJJ SH"
_NARRATION = re.compile(r"For:\s*([^.]+?)(?:\.\s|$)", re.IGNORECASE)


def _counterpart(narration: str) -> Optional[str]:
    """Counterpart named in a ``For:`` narration such as ``IPS/RAM SHARMA,UJJ SH``."""
    if narration.lower().startswith("cwdr/"):
        return "ATM Withdrawal"
    if "/" not in narration or "," not in narration:
        return narration or None

    before, after = [part.strip() for part in narration.split(",")[:2]]
    if "/" in before:
        name = before.split("/")[1].strip()
        if name and not name[0].isdigit():
            return name
    if after and after != _BRANCH:
        return after

    for part in narration.replace(",", "/").split("/"):
        part = part.strip()
        if part and not part[0].isdigit() and part != _BRANCH:
            return part
    return None


def _narration_reference(match) -> Optional[str]:
    narration = match.group(1).strip()
    if "CWDR/" in narration:
        parts = narration.split("/")
        if len(parts) >= 3:
            return parts[1] + "/" + parts[2]
    number = re.search(r"(\d{6,})", narration)
    return number.group(1) if number else None


def _account(match) -> Optional[str]:
    value = match.group(1).strip()
    return value[-4:] if value != "{Account}" and len(value) >= 4 else None


class EverestBankParser(BankParser):
    """
    Parser for Everest Bank (Nepal) - handles NPR currency transactions.

    Alerts also arrive from bare phone numbers, so any 7-10 digit sender is
    accepted.
    """

    region = NEPAL
    senders = Senders(
        exact=("EVEREST", "UJJ SH", "CWRD"),
        contains=("EVERESTBANK",),
        patterns=(r"^\d{7,10}$",),
        dlt_codes=("EVEREST",),
    )

    EXTRA_VERBS = (
        "dear customer", "your a/c", "is debited", "is credited", "debited by", "credited by", "for:",
        "never share password", "npr",
    )

    AMOUNT = Cascade(
        amount(r"NPR\s+" + NUMBER + r"(?:\s|$)"),
        amount(r"(?:debited|credited)\s+by\s+NPR\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "is debited", "debited by"),
        when(TransactionType.INCOME, "is credited", "credited by"),
    )

    MERCHANT = Cascade(rule(_NARRATION, lambda m: _counterpart(m.group(1).strip())))

    ACCOUNT = Cascade(rule(r"A/c\s+(\S+)", _account))

    REFERENCE = Cascade(rule(_NARRATION, _narration_reference))

    def get_bank_name(self) -> str:
        return "Everest Bank"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        narration = _NARRATION.search(message)
        if narration is not None:
            found = _counterpart(narration.group(1).strip())
            return self.clean_merchant_name(found) if found else None
        return super().extract_merchant(message, sender)
