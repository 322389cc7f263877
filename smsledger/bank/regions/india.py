from typing import Optional, Sequence

from smsledger.bank import mandate
from smsledger.bank.regions.region import Region
from smsledger.cascade import Cascade, contains_any, group, label, words
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.mandate_info import MandateInfo


class IndianRegion(Region):
    """INR conventions shared by Indian banks, wallets and card issuers.

    Adds the clearing-house and brokerage vocabulary for investment
    detection, UPI VPA merchants, and the e-mandate / future-debit /
    balance-only notices that every Indian issuer sends alongside real
    transactions.
    """

    INVESTMENT_KEYWORDS = words(
        "iccl", "indian clearing corporation", "nsccl", "nse clearing", "clearing corporation",
        "nach", "ach", "ecs",
        "groww", "zerodha", "upstox", "kite", "kuvera", "paytm money", "etmoney",
        "coin by zerodha", "smallcase", "angel one", "angel broking", "5paisa",
        "icici securities", "icici direct", "hdfc securities", "kotak securities",
        "motilal oswal", "sharekhan", "edelweiss", "axis direct", "sbi securities",
        "mutual fund", "mutual funds", "sip", "elss", "ipo", "folio", "demat", "stockbroker",
        "digital gold", "sovereign gold", "nse", "bse", "cdsl", "nsdl",
    )

    STOP_WORDS = Region.STOP_WORDS | {"UPI", "NEFT", "IMPS", "RTGS", "VPA"}

    MERCHANT = Cascade(
        group(CompiledPatterns.Merchant.VPA_WITH_NAME),
        group(CompiledPatterns.Merchant.VPA_PATTERN),
    ) + Region.MERCHANT

    # Used when nothing names the counterpart
    MERCHANT_LABELS = Cascade(
        label(r"\bATM\b", "ATM"),
        label(r"\b(?:NEFT|IMPS|RTGS)\b", "Fund Transfer"),
        label(r"\bUPI\b", "UPI Transaction"),
    )

    def __init__(self):
        super().__init__("INR")

    def is_transaction_message(self, message: str, verbs: Sequence[str] = ()) -> bool:
        if self.is_mandate_notification(message):
            return False
        # An issuer verb ("NEFT credit of", "UPI Credit:") outranks a balance mention
        if self.is_balance_update_notification(message) and not contains_any(message.lower(), verbs):
            return False
        return super().is_transaction_message(message, verbs)

    def extract_merchant(self, message: str, parser) -> Optional[str]:
        merchant = super().extract_merchant(message, parser)
        if merchant is not None:
            return merchant
        return self.MERCHANT_LABELS(message)

    def is_mandate_notification(self, message: str) -> bool:
        return mandate.is_e_mandate_notification(message) or mandate.is_future_debit_notification(message)

    def parse_mandate_subscription(self, message: str, parser) -> Optional[MandateInfo]:
        return mandate.parse_mandate_subscription(parser, message)


INDIA = IndianRegion()
