import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, amount, group, rule

_LONE_U = re.compile(r"\bu\b", re.IGNORECASE)


def _towards(match) -> Optional[str]:
    """Last readable segment of a ``UPI/123/NAME`` narration."""
    raw = match.group(1).strip()
    if "/" in raw:
        segments = [s.strip() for s in raw.split("/") if s.strip()]
        readable = [
            s for s in segments
            if len(s) >= 2 and any(c.isalpha() for c in s) and s.upper() != "UPI"
        ]
        if readable:
            raw = readable[-1]
        elif segments:
            raw = segments[-1]
    raw = _LONE_U.sub("", raw).strip()
    return "Interest" if raw.lower() == "interest" else raw


class BandhanBankParser(BankParser):
    """
    Parser for Bandhan Bank transaction SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("BANDHAN",), dlt_codes=("BDNSMS", "BANDHN"))

    MERCHANT = Cascade(rule(r"towards\s+([^.\n]+?)(?:\s+Value|\s+on|\s+dt|\s+at|\.|$)", _towards))

    REFERENCE = Cascade(group(r"UPI/[A-Z]{2}/([A-Z0-9]+)"))

    BALANCE = Cascade(amount(r"Clear\s+Bal\s+(?:is\s+)?(?:INR\s*)?" + NUMBER))

    def get_bank_name(self) -> str:
        return "Bandhan Bank"
