from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class KrungsriBankParser(BankParser):
    """
    Krungsri (Bank of Ayudhya - BAY) parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("BAY",), contains=("KRUNGSRI", "AYUDHYA"))

    def get_bank_name(self) -> str:
        return "Krungsri"
