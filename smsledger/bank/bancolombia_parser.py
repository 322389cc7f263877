from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import COLOMBIA
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, contains_any, label, rule, to_decimal, when
from smsledger.transaction_type import TransactionType

_VERBS = ("transferiste", "compraste", "pagaste", "recibiste")


def _peso_amount(match) -> Optional[Decimal]:
    # 1.250.000,50: dots group thousands, the comma marks cents
    return to_decimal(match.group(1).replace(".", "").replace(",", "."))


class BancolombiaParser(BankParser):
    """
    Parser for Bancolombia (Colombian bank) SMS messages.
    """

    region = COLOMBIA
    senders = Senders(exact=("87400", "85540"))

    AMOUNT = Cascade(rule(r"(?:Transferiste|Compraste|Pagaste|Recibiste)\s+\$?\s*([0-9][0-9.,]*)", _peso_amount))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "transferiste", "compraste", "pagaste"),
        when(TransactionType.INCOME, "recibiste"),
    )

    MERCHANT = Cascade(
        label(r"transferiste", "Transferencia"),
        label(r"compraste", "Compra"),
        label(r"pagaste", "Pago"),
        label(r"recibiste", "Dinero recibido"),
    )

    def get_bank_name(self) -> str:
        return "Bancolombia"

    def is_transaction_message(self, message: str) -> bool:
        return contains_any(message.lower(), _VERBS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message) or "Bancolombia"
