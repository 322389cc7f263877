from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import THAILAND
from smsledger.bank.senders import Senders


class UOBThailandParser(BankParser):
    """
    UOB Thailand parser for Thai banking SMS messages.
    """

    region = THAILAND
    senders = Senders(exact=("UOB",), contains=("UOB THAILAND", "UOBTHAILAND"))

    def get_bank_name(self) -> str:
        return "UOB Thailand"
