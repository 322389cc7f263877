from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class BangkokBankParser(BankParser):
    """
    Bangkok Bank (BBL) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("BBL",), contains=("BANGKOK BANK", "BANGKOKBANK"))

    def get_bank_name(self) -> str:
        return "Bangkok Bank"
