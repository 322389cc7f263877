from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, when
from smsledger.transaction_type import TransactionType


class DBSBankParser(BankParser):
    """
    Parser for DBS Bank (Development Bank of Singapore) SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("DBSBNK", "DBS", "DBSBANK"))

    AMOUNT = Cascade(
        amount(r"(?:debited|credited)\s+with\s+INR\s*" + NUMBER),
        amount(r"\bINR\s*" + NUMBER + r"\s+(?:debited|credited)"),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited", "withdrawn"),
        when(TransactionType.INCOME, "credited", "deposited"),
    ) + INDIA.TYPES

    ACCOUNT = Cascade(
        group(r"account\s+no\s+\*+(\d{4})"),
        group(r"a/c\s+\*+(\d{4})"),
        group(r"account\s+\*+(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Current\s+Balance\s+is\s+INR\s*" + NUMBER),
        amount(r"Balance[:\s]+INR\s*" + NUMBER),
        amount(r"Avl\s+Bal[:\s]+INR\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "DBS Bank"
