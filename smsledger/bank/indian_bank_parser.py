from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType


class IndianBankParser(BankParser):
    """
    Parser for Indian Bank.
    """

    region = INDIA
    senders = Senders(
        exact=("INDBNK", "INDIAN"),
        contains=("INDIAN BANK", "INDIANBANK", "INDIANBK"),
        dlt_codes=("INDBNK",),
    )

    AMOUNT = Cascade(
        amount(r"(?:debited|credited|withdrawn)\s+Rs\.?\s*" + NUMBER),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+credited\s+to"),
        amount(r"UPI\s+payment\s+of\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "withdrawn"),
        when(TransactionType.EXPENSE, "upi payment", unless=("received",)),
        when(TransactionType.INCOME, "credited", "deposited", "received"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"\bto\s+([^.\n]+?)(?:\.\s*UPI:|UPI:|$)"),
        group(r"\bfrom\s+([^.\n]+?)(?:\.\s*UPI:|UPI:|$)"),
        rule(r"VPA\s+([\w.-]+)@\w+", lambda m: m.group(1)),
        rule(r"\bATM\s+(?:withdrawal\s+)?at\s+([^.\n]+?)(?:\s+on|$)", lambda m: "ATM - " + m.group(1).strip()),
    )

    ACCOUNT = Cascade(
        group(r"A/c\s+\*(\d{4})"),
        group(r"Account\s+X*(\d{4})"),
        group(r"A/c\s+ending\s+(\d{4})"),
    )

    REFERENCE = Cascade(
        group(r"UPI:(\d+)"),
        group(r"UPI\s+Ref\s+no\s+(\d+)"),
        group(r"Ref\s+No\.?\s*(\w+)"),
        group(r"Transaction\s+ID:?\s*(\w+)"),
    )

    BALANCE = Cascade(
        amount(r"\bBal\s+Rs\.?\s*" + NUMBER),
        amount(r"Available\s+Balance:?\s+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Indian Bank"
