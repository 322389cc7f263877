from decimal import Decimal

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, group, label, rule, to_decimal, when
from smsledger.transaction_type import TransactionType


def _signed_balance(match) -> Decimal:
    value = to_decimal(match.group(1))
    if value is not None and match.group(2).upper() == "DR":
        return -value
    return value


def _payer(match):
    name = match.group(1).strip()
    # masked account number in place of a name
    return "UPI Transfer" if "X" in name else name


class CentralBankOfIndiaParser(BankParser):
    """
    Parser for Central Bank of India (CBoI) SMS messages.

    Balances carry a CR/DR marker; an overdrawn ``DR`` balance is returned
    as a negative number.
    """

    region = INDIA
    senders = Senders(
        contains=("CENTBK", "CBOI", "CENTRALBANK", "CENTRAL"),
        dlt_codes=("CENTBK", "CBOI"),
    )

    AMOUNT = Cascade(
        rule(r"(?:Credited|Debited)\s+by\s+Rs\.?\s*" + NUMBER, lambda m: to_decimal(m.group(1))),
        rule(r"Rs\.?\s*" + NUMBER + r"\s+(?:credited|debited)", lambda m: to_decimal(m.group(1))),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited", "deposited", "received"),
        when(TransactionType.EXPENSE, "debited", "withdrawn", "paid"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"\bBy[.\s]+(.+?)(?:-CBoI|-CENTBK|$)"),
        rule(r"\bfrom\s+([A-Z0-9]+|\S+?)(?:\s+via|\s+Ref|\s+\.|$)", _payer),
        group(r"\bto\s+(\S+?)(?:\s+via|\s+Ref|\s+\.|$)"),
        label(r"credited.*via\s+upi|via\s+upi.*credited", "UPI Credit"),
        label(r"debited.*via\s+upi|via\s+upi.*debited", "UPI Payment"),
    )

    ACCOUNT = Cascade(
        group(r"account\s+[X*]*(\d{4})"),
        group(r"A/C\s+ending\s+[X*]*(\d{4})"),
    )

    BALANCE = Cascade(
        rule(r"Total\s+Bal\s+Rs\.?\s*" + NUMBER + r"\s+(CR|DR)", _signed_balance),
        rule(r"Clear\s+Bal\s+Rs\.?\s*" + NUMBER + r"\s+(CR|DR)", _signed_balance),
    )

    REFERENCE = Cascade(group(r"Ref\s+No\.?\s*(\w+)"))

    def get_bank_name(self) -> str:
        return "Central Bank of India"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "-cboi" in lower:
            return "credited" in lower or "debited" in lower
        return super().is_transaction_message(message)
