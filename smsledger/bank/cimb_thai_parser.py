from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class CIMBThaiParser(BankParser):
    """
    CIMB Thai Bank parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("CIMB",), contains=("CIMB THAI", "CIMBTHAI"))

    def get_bank_name(self) -> str:
        return "CIMB Thai"
