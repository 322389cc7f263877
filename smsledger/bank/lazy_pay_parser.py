import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType

# Legal entity names LazyPay prints instead of the storefront
KNOWN_ENTITIES = (
    ("zepto marketplace", "Zepto"),
    ("innovative retail concepts", "BigBasket"),
    ("swiggy", "Swiggy"),
    ("zomato", "Zomato"),
)

_ENTITY_SUFFIX = re.compile(r"\s*(?:Private|Pvt\.?|Ltd\.?|Limited|Inc\.?|LLC|LLP).*$", re.IGNORECASE)
_TRAILING_NUMBER = re.compile(r"\s*\d+$")


def _storefront(match):
    raw = match.group(1).strip()
    lower = raw.lower()
    for entity, storefront in KNOWN_ENTITIES:
        if entity in lower:
            return storefront
    return _TRAILING_NUMBER.sub("", _ENTITY_SUFFIX.sub("", raw)).strip() or None


class LazyPayParser(BankParser):
    """
    Parser for LazyPay pay-later transactions.

    Every LazyPay purchase draws on the pay-later credit line.
    """

    region = INDIA
    senders = Senders(contains=("LZYPAY", "LAZYPAY"))

    FAILURES = ("could not be processed", "due to a failure", "payment failed", "transaction failed", "unsuccessful")
    CONFIRMATIONS = ("payment of", "was successful", "against your lazypay statement", "thanks for your payment")

    AMOUNT = Cascade(amount(r"\bRs\.?\s*" + NUMBER))
    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(
        rule(r"\bon\s+([^.]+?)\s+was\s+successful", _storefront),
        label(r"against your lazypay statement", "LazyPay Repayment"),
    )

    REFERENCE = Cascade(group(r"\btxn\s+([A-Z0-9]+)"))

    def get_bank_name(self) -> str:
        return "LazyPay"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.FAILURES) or contains_any(lower, self.region.OTP_PHRASES):
            return False
        if contains_any(lower, ("offer", "get cashback", "explore more")):
            if "payment of" not in lower and "was successful" not in lower:
                return False
        return contains_any(lower, self.CONFIRMATIONS)

    def extract_merchant(self, message: str, sender: str) -> str:
        return super().extract_merchant(message, sender) or "LazyPay"
