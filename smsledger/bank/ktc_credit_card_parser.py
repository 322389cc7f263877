import dataclasses
from decimal import Decimal

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType


class KTCCreditCardParser(BankParser):
    """
    KTC Credit Card parser for Thai banking SMS messages.

    KTC only issues cards: every record is a card record and carries the
    remaining limit when the message states one.
    """

    region = THAILAND
    senders = Senders(exact=("KTC",), contains=("KRUNGTHAI CARD",))

    def get_bank_name(self) -> str:
        return "KTC"

    def build_transaction(
        self,
        sms_body: str,
        sender: str,
        timestamp: int,
        amount: Decimal,
        txn_type: TransactionType,
    ) -> ParsedTransaction:
        record = super().build_transaction(sms_body, sender, timestamp, amount, txn_type)
        return dataclasses.replace(
            record,
            is_from_card=True,
            credit_limit=self.extract_available_limit(sms_body),
        )
