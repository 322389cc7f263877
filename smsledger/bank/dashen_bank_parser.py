from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import ETHIOPIA
from smsledger.bank.senders import Senders
from smsledger.bank.zemen_bank_parser import BIRR_NUMBER, in_cents
from smsledger.cascade import Cascade, DecisionTable, group, rule, when
from smsledger.transaction_type import TransactionType


class DashenBankParser(BankParser):
    """
    Parser for Dashen Bank - handles ETB currency transactions.
    """

    region = ETHIOPIA
    senders = Senders(exact=("DASHENBANK",))

    AMOUNT = Cascade(rule(r"ETB\s+" + BIRR_NUMBER, in_cents))

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "has been credited", "credited with", "you have received"),
        when(TransactionType.EXPENSE, "has been debited", "debited with", "debited from"),
    ) + ETHIOPIA.TYPES

    MERCHANT = Cascade(
        group(r"credited\s+to\s+the\s+(Telebirr\s+account\s+[+\d]+)"),
        group(r"from\s+([A-Z][A-Z\s]*?)\s+on\s+on"),
        group(r"from\s+(telebirr\s+account\s+number\s+\d+)\s+Ref"),
    )

    ACCOUNT = Cascade(group(r"(\d{4})\*+\d+"))

    BALANCE = Cascade(rule(r"Your\s+(?:current|account)\s+balance\s+is\s+ETB\s+" + BIRR_NUMBER, in_cents))

    REFERENCE = Cascade(
        group(r"(https://receipt\.dashensuperapp\.com/receipt/\S+)"),
        group(r"Ref\s+No:(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "Dashen Bank"
