from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class GSBBankParser(BankParser):
    """
    Government Savings Bank (GSB) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("GSB",), contains=("GOVERNMENT SAVINGS", "GOVT SAVINGS"))

    def get_bank_name(self) -> str:
        return "Government Savings Bank"
