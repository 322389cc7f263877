import re
from decimal import Decimal
from typing import Optional, Tuple

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import GULF
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, contains_any, group, label, rule, scan, to_decimal
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.constants import Constants

_MASKED_NUMBER = r"(\*?[\d*,]+(?:\.\d{2})?)"


def masked_number(raw: str) -> Optional[Decimal]:
    """Amount whose leading digits the bank starred out: ``*123.45``, ``***.50``."""
    raw = raw.replace(",", "")
    if "*" not in raw:
        return to_decimal(raw)
    if re.match(r"\*+\d", raw):
        return to_decimal(raw.replace("*", ""))
    if re.match(r"\*+\.\d{2}", raw):
        return to_decimal("0" + raw[raw.find("."):])
    digits = re.search(r"\d+(?:\.\d{2})?", raw)
    return to_decimal(digits.group(0)) if digits else None


def coded_amount(match) -> Optional[Decimal]:
    if match.group(1).upper() not in Constants.Currency.KNOWN:
        return None
    return masked_number(match.group(2))


def _digits_only(match) -> Optional[str]:
    return match.group(1).replace("X", "").replace("x", "") or None


def _recipient(match) -> Optional[str]:
    recipient = match.group(1)
    if "*" in recipient:
        visible = "".join(filter(str.isdigit, recipient))
    else:
        visible = "".join(c for c in recipient if c.isdigit() or c == "X")
    return "Transfer to " + visible[-4:] if visible else None


class FABParser(BankParser):
    """
    Parser for First Abu Dhabi Bank (FAB).

    Card purchases put the merchant on its own line under the amount, and
    amounts or balances may be partly starred out (``AED *123.45``). Funds
    transfer requests carry both endpoints, which are reported as
    ``from_account``/``to_account``.
    """

    region = GULF
    senders = Senders(contains=("FAB", "FABBANK", "ADFAB"))

    NOT_TRANSACTIONS = tuple(re.compile(p) for p in (
        "declined due to insufficient balance", "transaction has been declined", "address update request",
        "statement request", "stamped statement", "cannot process your", "amazing rate",
        "request has been logged", "reference number", "beneficiary creation/modification request",
        "funds transfer request is under process", "has been resolved", "funds transfer request has failed",
        "card has been successfully activated", "temporarily blocked", "never share credit/debit card",
        r"debit card.*replacement request", "card will be ready for dispatch",
        "replacement request has been registered", "otp", "activation", "thank you for activating",
        "do not disclose your otp", r"atyourservice@bankfab\.com", "has been blocked on",
    ))
    MARKETING = ("bit.ly", "conditions apply", "instalments at 0% interest")
    CONFIRMATIONS = (
        "credit card purchase", "debit card purchase", "inward remittance", "outward remittance",
        "atm cash withdrawal", "payment instructions", "has been processed",
        "has been credited to your fab account", "cash deposit", "cheque credited", "cheque returned",
    )

    AMOUNT = Cascade(
        scan(r"funds\s+transfer\s+request\s+of\s+([A-Z]{3})\s+" + _MASKED_NUMBER, coded_amount),
        scan(r"\bfor\s+([A-Z]{3})\s+" + _MASKED_NUMBER, coded_amount),
        scan(r"\b([A-Z]{3})\s+" + _MASKED_NUMBER, coded_amount),
        scan(r"Amount\s*([A-Z]{3})\s+" + _MASKED_NUMBER, coded_amount),
    )

    CARD_PURCHASE_MERCHANT = Cascade(
        rule(
            r"(?:Credit|Debit)\s+Card\s+Purchase\s+Card\s+No\s+[X\d]+\s+[A-Z]{3}\s+[\d,.]+\s+([^0-9]+?)\s+\d{2}/\d{2}/\d{2}",
            lambda m: m.group(1).replace("*", "").strip() or None,
        ),
    )
    WEBSITE = re.compile(r"([A-Z]+\.(?:COM|NET|ORG|IN)[^\n]*)", re.IGNORECASE)

    MERCHANT = Cascade(
        rule(r"\bto\s+(\S+)", _recipient, requires=("payment instructions",)),
        label(r"^(?![\s\S]*unsuccessful\s+transaction)[\s\S]*has\s+been\s+credited\s+to\s+your\s+fab\s+account", "Account Credited"),
        label(r"ATM\s+Cash\s+withdrawal", "ATM Withdrawal"),
        label(r"Inward\s+Remittance", "Inward Remittance"),
        label(r"Outward\s+Remittance", "Outward Remittance"),
        label(r"Cash\s+Deposit", "Cash Deposit"),
        label(r"Cheque\s+Credited", "Cheque Credited"),
        label(r"Cheque\s+Returned", "Cheque Returned"),
        label(r"Cash\s+withdrawal", "Cash Withdrawal"),
        label(r"unsuccessful\s+transaction", "Refund"),
    )

    ACCOUNT = Cascade(
        rule(r"Card\s+No\s+([X\d]{4})", _digits_only),
        rule(r"Account\s+([X\d]{4})\*{0,2}", _digits_only),
        group(r"Account\s+[X*]+(\d{4})"),
    )

    BALANCE = Cascade(
        scan(r"available\s+balance\s+(?:is\s+)?([A-Z]{3})\s*\*{0,}([\d*,]+(?:\.\d{2})?)", coded_amount),
    )

    REFERENCE = Cascade(
        group(r"(\d{2}/\d{2}/\d{2}\s+\d{2}:\d{2})", flags=0),
        group(r"Value\s+Date\s+(\d{2}/\d{2}/\d{4})"),
    )

    FROM_ACCOUNT = Cascade(
        group(r"from\s+account\s+([X\d]{4,})"),
        group(r"from\s+account/card\s+([X\d]{4,})"),
        group(r"from\s+your\s+account/card\s+([X\d]{4,})"),
        group(r"from\s+([X\d]{4,})\s+to\s+account"),
    )
    TO_ACCOUNT = Cascade(
        group(r"to\s+account\s+([X\d]{4,})"),
        group(r"to\s+IBAN/Account/Card\s+([X\d]{4,})"),
        group(r"to\s+([X\d]{4,})\s+from\s+account"),
    )

    def get_bank_name(self) -> str:
        return "First Abu Dhabi Bank"

    def is_card_purchase(self, message: str) -> bool:
        return self.region.is_card_purchase(message)

    def detect_is_card(self, message: str) -> bool:
        return self.is_card_purchase(message)

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        if contains_any(lower, self.MARKETING) and not contains_any(lower, ("purchase", "payment instructions", "remittance")):
            return False
        if "funds transfer request of" in lower and "has been processed" in lower:
            return True
        if contains_any(lower, self.CONFIRMATIONS):
            return True
        if contains_any(lower, ("credit", "debit", "remittance", "available balance")) and self.states_coded_amount(message):
            return True
        return super().is_transaction_message(message)

    def states_coded_amount(self, message: str) -> bool:
        return any(
            match.group(1) in Constants.Currency.KNOWN
            for match in CompiledPatterns.Currency.CODE_BEFORE.finditer(message)
        )

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        if self.is_card_purchase(message):
            merchant = self.card_purchase_merchant(message)
            if merchant:
                return self.clean_merchant_name(merchant)
        if "funds transfer request" in message.lower():
            return self.format_transfer_merchant(self.extract_transfer_accounts(message))
        return super().extract_merchant(message, sender)

    def card_purchase_merchant(self, message: str) -> Optional[str]:
        found = self.CARD_PURCHASE_MERCHANT(message)
        if found:
            return found

        lines = message.split("\n")
        for index, line in enumerate(lines):
            if re.search(r"[A-Z]{3}\s+[\d,]+(?:\.\d{2})?", line, re.IGNORECASE):
                if index + 1 < len(lines):
                    candidate = lines[index + 1].replace("*", "").strip()
                    if candidate and "/" not in candidate:
                        return candidate
                break

        card = re.search(r"Card\s+[X*]+\d{4}", message, re.IGNORECASE)
        if card is not None:
            for index, line in enumerate(lines):
                if card.group(0) in line:
                    if index + 2 < len(lines):
                        candidate = lines[index + 2].strip()
                        if (
                            candidate
                            and "Available Balance" not in candidate
                            and not re.match(r"\d{2}/\d{2}/\d{2}\s+\d{2}:\d{2}", candidate)
                        ):
                            return candidate.replace("*", "").strip()
                    break

        website = self.WEBSITE.search(message)
        if website is not None:
            return website.group(1).replace("*", "").strip()
        return None

    def format_transfer_merchant(self, accounts: Tuple[Optional[str], Optional[str]]) -> str:
        from_account, to_account = accounts
        if from_account and to_account:
            return f"Transfer: {from_account[-3:]} → {to_account[-3:]}"
        if from_account:
            return f"Transfer from {from_account[-3:]}"
        if to_account:
            return f"Transfer to {to_account[-3:]}"
        return "Transfer"

    def extract_account_last4(self, message: str) -> Optional[str]:
        from_account, _ = self.extract_transfer_accounts(message)
        if from_account:
            return from_account
        return super().extract_account_last4(message)

    def extract_transfer_accounts(self, message: str) -> Tuple[Optional[str], Optional[str]]:
        if "funds transfer request" not in message.lower():
            return None, None

        def last_digits(value: Optional[str]) -> Optional[str]:
            return value.replace("X", "").replace("x", "")[-4:] if value else None

        return last_digits(self.FROM_ACCOUNT(message)), last_digits(self.TO_ACCOUNT(message))
