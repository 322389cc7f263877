import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import ETHIOPIA_MOBILE
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType

_ON_DATE = r"\s+on\s+\d{2}/\d{2}/\d{4}"
_MASKED_PHONE = re.compile(r"([A-Za-z\s]+)\((\d+\*+\d+)\)")


def _counterpart(match, any_bracket: bool = False) -> Optional[str]:
    """Names with a masked phone, ``Abebe (2519****1234)``, are kept verbatim."""
    name = _MASKED_PHONE.sub(r"\1 (\2)", match.group(1).strip())
    if "(" in name and (any_bracket or ")" in name):
        return name
    name = ETHIOPIA_MOBILE.clean_merchant_name(name)
    return name if ETHIOPIA_MOBILE.is_valid_merchant_name(name) else None


def _named_bank(match) -> Optional[str]:
    name = match.group(1).strip()
    return name if ETHIOPIA_MOBILE.is_valid_merchant_name(name) else None


def _package(match) -> str:
    package = match.group(1).strip()
    bought_for = re.search(r"purchase\s+made\s+for\s+(\d+)", match.string, re.IGNORECASE)
    if bought_for:
        package += " purchase made for " + bought_for.group(1)
    return package


class TelebirrParser(BankParser):
    """
    Parser for Telebirr - handles ETB currency transactions.

    Moving money between the wallet and a linked saving account reads the
    wrong way round from the wallet's side: a deposit into savings leaves
    the wallet, a withdrawal from savings arrives in it.
    """

    region = ETHIOPIA_MOBILE
    senders = Senders(contains=("127",), patterns=(r"^127-[A-Z0-9]+$", r"^[A-Z0-9]+-127$"), dlt_codes=("127",))

    KEYWORDS = (
        "dear", "you have received", "you have paid", "you have transferred", "current balance",
        "e-money account balance", "telebirr account balance", "thank you for using telebirr", "etb",
        "transaction number",
    )

    AMOUNT = Cascade(
        amount(r"ETB\s+" + NUMBER + r"\s"),
        amount(r"ETB\s*" + NUMBER + r"(?:\s|$|\.)"),
        amount(r"(?:Credited|debited|transfered)\s+(?:with\s+)?ETB\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "deposited etb", all_of=("to your saving account",)),
        when(TransactionType.INCOME, "withdraw etb", all_of=("from your saving account",)),
        when(TransactionType.INCOME, "you have received"),
        when(TransactionType.EXPENSE, "you have paid", "you have transferred"),
    )

    MERCHANT = Cascade(
        group(r"deposited\s+ETB\s+[0-9,]+(?:\.[0-9]{2})?\s+to\s+your\s+(.+?)" + _ON_DATE),
        group(r"withdrawn?\s+ETB\s+[0-9,]+(?:\.[0-9]{2})?\s+from\s+your\s+(.+?)" + _ON_DATE),
        rule(r"from\s+([A-Za-z\s]+Bank)\s+to\s+your", _named_bank),
        group(r"paid\s+ETB\s+[0-9,]+(?:\.[0-9]{2})?\s+to\s+([^,\n]+?)(?=" + _ON_DATE + r"|\.\s+Your\s+transaction|$)"),
        group(r"for\s+goods\s+purchased\s+from\s+([^,\n]+?)(?:" + _ON_DATE + r"|\.\s+Your\s+transaction|$)"),
        rule(r"for\s+package\s+([^,\n]+?)(?:\s+purchase\s+made|" + _ON_DATE + r"|\.\s+Your\s+transaction|$)", _package),
        rule(r"transferred\s+[^,\n]+?\s+to\s+([^,\n]+?)(?:" + _ON_DATE + r"|\.|$)", _counterpart),
        rule(r"from\s+(?!your\s+account)([^,\n]+?)(?:" + _ON_DATE + r"|\s+to\s+your|\.|$)", _counterpart),
        rule(r"\bto\s+([^,\n]+?)(?:" + _ON_DATE + r"|\.|$)", lambda m: _counterpart(m, any_bracket=True)),
    )

    ACCOUNT = Cascade(rule(r"Dear\s+\[([^\]]+)\]", lambda m: "[" + m.group(1) + "]"))

    BALANCE = Cascade(
        amount(r"E-Money\s+Account\s+balance\s+is\s+ETB\s+" + NUMBER),
        amount(r"current\s+balance\s+is\s+ETB\s+" + NUMBER),
        amount(r"telebirr\s+account\s+balance\s+is\s+ETB\s+" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"bank\s+transaction\s+number\s+is\s+([A-Z0-9]+)"),
        group(r"by\s+transaction\s+number\s+([A-Z0-9]+)"),
        group(r"transaction\s+number\s+is\s+([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "Telebirr"

    def is_transaction_message(self, message: str) -> bool:
        return contains_any(message.lower(), self.KEYWORDS) or super().is_transaction_message(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        merchant = self.MERCHANT(message)
        if merchant is not None:
            return merchant
        return self.region.extract_merchant(message, self)
