import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType

# Card alerts cut the merchant line at a fixed width: "AMAZON PAY" -> "AMAZON Pay"/"Limi"
_TRUNCATED_TAIL = re.compile(r"\s+(?:Limi|Pay|SUPE)$")


def _card_line(match):
    return _TRUNCATED_TAIL.sub("", match.group(1).strip())


def _narration(match):
    value = match.group(1).strip()
    return "Salary" if "salary" in value.lower() else value


def _masked_suffix(match):
    # Axis masks some accounts with letters ("XXab12"); keep those lower-cased
    chars = "".join(filter(str.isalnum, match.group(1)))
    if any(c.islower() for c in chars):
        return chars[-4:].lower()
    digits = "".join(filter(str.isdigit, match.group(1)))
    return digits[-4:] if len(digits) >= 4 else digits or None


_CARD_LINE_END = r"(?:\s*\n|\s*Avl Limit:|\s*Avl Lmt|\s*Not you?)"


class AxisBankParser(BankParser):
    """
    Parser for Axis Bank SMS messages.

    Credit-card alerts are multi-line: the merchant sits on its own line
    after the timestamp, followed by the available limit.
    """

    region = INDIA
    senders = Senders(
        exact=("AXISBK", "AXISBANK", "AXIS"),
        contains=("AXIS BANK", "AXISBANK", "AXISBK", "AXISB"),
        dlt_codes=("AXISBK", "AXISBANK", "AXIS"),
    )

    AMOUNT = Cascade(
        amount(r"\bINR\s+" + NUMBER + r"\s+(?:debited|credited)"),
        amount(r"Payment\s+of\s+INR\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "avl limit", "avl lmt"),
        when(TransactionType.CREDIT, "credit card", " cc ", all_of=(("debited", "spent"),)),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        label(r"debited from a/c no\..*\bon axis bank", "ATM"),
        label(r"\batm\b|cash withdrawal", "ATM", requires=("debited",)),
        group(r"debited from A/c no\. \S+ on ([^0-9]+?)(?:\d{2}-\d{2}-\d{4})"),
        rule(r"Spent[\s\S]*?IST\s*\n\s*([^\n]+?)" + _CARD_LINE_END, _card_line),
        rule(r"Spent[\s\S]*?\d{2}-\d{2}-\d{2}\s+\d{2}:\d{2}:\d{2}\s*\n\s*([^\n]+?)" + _CARD_LINE_END, _card_line),
        group(r"UPI/[^/]+/[^/]+/([^\n]+?)(?:\s*Not you|\s*$)"),
        rule(r"Info\s*[-–]\s*([^.\n]+?)(?:\.\s*Chk|\s*$)", _narration),
    )

    ACCOUNT = Cascade(
        rule(r"A/c\s+no\.\s+([X*x]+[a-zA-Z\d]+)", _masked_suffix),
        rule(r"Card\s+no\.\s+([X*]*\d+)", _masked_suffix),
        rule(r"Credit\s+Card\s+([X*]*\d+)", _masked_suffix),
    )

    REFERENCE = Cascade(group(r"UPI/[^/]+/(\d+)"))

    LIMIT = Cascade(
        amount(r"Avl\s+Limit:?\s*INR\s+" + NUMBER),
        amount(r"Avl\s+Lmt\s+INR\s+" + NUMBER),
        amount(r"Available\s+limit:?\s*INR\s+" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Axis Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "payment" in lower and "has been received" in lower and "towards your axis bank" in lower:
            return False
        return super().is_transaction_message(message)
