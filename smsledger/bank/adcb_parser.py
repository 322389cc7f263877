import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.fab_parser import FABParser, coded_amount
from smsledger.bank.regions import GULF
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, contains_any, group, label, rule, scan, when
from smsledger.transaction_type import TransactionType

_ISO_AMOUNT = r"([A-Z]{3})\s*" + NUMBER


def _atm_withdrawal(match) -> Optional[str]:
    name = re.sub(r"\s+", " ", match.group(1)).strip()
    name = re.sub(r"^\d+", "", name).replace(".", "").strip()
    return "ATM Withdrawal: " + name if name else None


def _linked_account(match) -> str:
    return match.group(2) or match.group(1)


class ADCBParser(FABParser):
    """
    Parser for Abu Dhabi Commercial Bank (ADCB).

    Shares FAB's multi-currency handling. Account numbers are masked to six
    visible digits on most templates and are reported as written.
    """

    senders = Senders(exact=("ADCBALERT",), contains=("ADCB", "ADCBANK"))

    NOT_TRANSACTIONS = tuple(re.compile(p) for p in (
        "could not be completed", "insufficient funds", "do not share your otp", "otp for transaction",
        "activation key", "do not share with anyone", "has been de-activated", "has been activated",
        "congratulations on the first usage", "digital card assigned to", "pin change/setup was successful",
        "request for pin change/setup", "we have updated your emirates id", r"confirmation recd\. from",
        r"sr no\.", "for clarifications please call", "for assistance please call",
    ))
    CONFIRMATIONS = tuple(re.compile(p) for p in (
        "your debit card", "your credit card", "used for", "withdrawn from", "deposited via atm",
        "transferred via", r"cr\. ?transaction", r"dr\. ?transaction", r"transaction.*was successful",
        "touchpoints redemption", r"account number xxx.*was successful",
    ))

    AMOUNT = Cascade(
        scan(r"used\s+for\s+" + _ISO_AMOUNT, coded_amount),
        scan(r"\b" + _ISO_AMOUNT + r"\s+withdrawn\s+from", coded_amount),
        scan(r"\b" + _ISO_AMOUNT + r"\s+has\s+been\s+deposited\s+via\s+ATM", coded_amount),
        scan(r"\b" + _ISO_AMOUNT + r"\s+transferred\s+via", coded_amount),
        scan(r"(?:Cr|Dr)\.?\s*transaction\s+of\s+" + _ISO_AMOUNT, coded_amount),
        scan(r"Transaction\s+of\s+" + _ISO_AMOUNT, coded_amount),
        scan(r"Amount\s+Paid:\s*" + _ISO_AMOUNT, coded_amount),
        scan(r"used\s+for[\s\S]*?" + _ISO_AMOUNT, coded_amount, flags=0),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "used for"),
        when(TransactionType.EXPENSE, "withdrawn from", all_of=("atm",)),
        when(TransactionType.INCOME, "deposited via atm"),
        when(TransactionType.TRANSFER, "transferred via"),
        when(TransactionType.INCOME, "cr. transaction"),
        when(TransactionType.EXPENSE, "dr. transaction"),
        when(TransactionType.EXPENSE, "touchpoints redemption"),
    ) + GULF.TYPES

    MERCHANT = Cascade(
        group(r"\bat\s+([^,\n]+),\s*[A-Z]{2}", requires=("used for",)),
        label(r"touchpoints\s+redemption", "TouchPoints Redemption"),
        rule(
            r"withdrawn\s+from[\s\S]*\bat\s+ATM[- ]([\s\S]+?)(?:\s+Avl\.Bal|Available\s+balance|$)",
            _atm_withdrawal,
        ),
        rule(r"deposited\s+via\s+ATM[\s\S]*?\bat\s+([^.\n]+)", lambda m: "ATM Deposit: " + m.group(1).strip()),
        label(r"transferred\s+via", "Transfer via ADCB Banking"),
        label(r"Cr\.\s+transaction", "Account Credit"),
        label(r"Dr\.\s+transaction", "Account Debit"),
    ) + FABParser.MERCHANT

    ACCOUNT = Cascade(
        rule(r"debit\s+card\s+[X*]+(\d{4})\s+linked\s+to\s+acc\.?\s*[X*]+(\d{6})", _linked_account),
        group(r"linked\s+to\s+acc\.?\s*[X*]+(\d{6})"),
        group(r"withdrawn\s+from\s+acc\.?\s*[X*]+(\d{6})"),
        group(r"in\s+your\s+account\s+[X*]+(\d{6})"),
        group(r"from\s+acc\.?\s*no\.?\s*[X*]+(\d{6})"),
        group(r"account\s+(?:number\s*)?[X*]+(\d{6})"),
        rule(r"debit\s+card\s+[X*]+(\d{4})\s+linked\s+to\s+acc\.?\s*[X*]+(\d{4})", _linked_account),
        group(r"withdrawn\s+from\s+acc\.?\s*[X*]+(\d{4})"),
        group(r"in\s+your\s+account\s+[X*]+(\d{4})"),
        group(r"from\s+acc\.?\s*no\.?\s*[X*]+(\d{4})"),
        group(r"account\s+(?:number\s*)?[X*]+(\d{4})"),
        group(r"Card\s+[X*]+(\d{4})"),
    )

    BALANCE = Cascade(
        scan(r"Avl\.?\s*bal\.?\s*([A-Z]{3})\s*" + NUMBER, coded_amount),
        scan(r"Available\s+balance\s+is\s+([A-Z]{3})\s*" + NUMBER, coded_amount),
    )

    REFERENCE = Cascade(
        group(r"\bon\s+(\w{3}\s+\d{1,2}\s+\d{4}\s+\d{1,2}:\d{2}[AP]M)", flags=0),
        group(r"(\d{2}/\d{2}/\d{2}\s+\d{2}:\d{2})", flags=0),
    )

    def get_bank_name(self) -> str:
        return "Abu Dhabi Commercial Bank"

    def is_card_purchase(self, message: str) -> bool:
        return "used for" in message.lower()

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message, accept=lambda value: value > Decimal("0.01"))

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message, fallback=self.region.extract_account_last4)

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        if contains_any(lower, self.CONFIRMATIONS):
            return True
        return super().is_transaction_message(message)
