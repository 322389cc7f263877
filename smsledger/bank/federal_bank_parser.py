import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType

# VPA fragment -> merchant, checked in order
UPI_BRANDS = (
    ("indigo", "Indigo"), ("spicejet", "SpiceJet"), ("airasia", "AirAsia"), ("vistara", "Vistara"),
    ("airindia", "Air India"), ("uber", "Uber"), ("ola", "Ola"), ("rapido", "Rapido"),
    ("amazon", "Amazon"), ("flipkart", "Flipkart"), ("myntra", "Myntra"), ("meesho", "Meesho"),
    ("paytm", "Paytm"), ("bharatpe", "BharatPe"), ("phonepe", "PhonePe"), ("googlepay", "Google Pay"),
    ("gpay", "Google Pay"), ("swiggy", "Swiggy"), ("zomato", "Zomato"), ("netflix", "Netflix"),
    ("spotify", "Spotify"), ("hotstar", "Disney+ Hotstar"), ("disney", "Disney+ Hotstar"),
    ("prime", "Amazon Prime"), ("pvr", "PVR Inox"), ("inox", "PVR Inox"), ("bookmyshow", "BookMyShow"),
    ("bms", "BookMyShow"), ("jio", "Jio"), ("airtel", "Airtel"), ("vodafone", "Vi"), ("vi", "Vi"),
    ("bsnl", "BSNL"), ("irctc", "IRCTC"), ("redbus", "RedBus"), ("makemytrip", "MakeMyTrip"),
    ("mmt", "MakeMyTrip"), ("goibibo", "Goibibo"), ("oyo", "OYO"), ("airbnb", "Airbnb"),
)
GATEWAYS = ("razorpay", "razorp", "rzp", "payu", "billdesk", "ccavenue")


def upi_merchant(vpa: str) -> str:
    """Readable merchant for a VPA such as ``swiggy.rzp@axisbank``."""
    handle = vpa.split("@")[0].lower()
    for fragment, brand in UPI_BRANDS:
        if fragment in handle:
            return brand
    if contains_any(handle, GATEWAYS):
        return "Online Payment"
    if handle.isdigit():
        return "Individual"
    return vpa.strip()


def _sender_name(match):
    name = match.group(1).strip()
    if re.match(r"^0+$", name) or len(name) <= 4:
        return "Bank Transfer"
    return name


_RECEIVED_FROM_ACCOUNT = re.compile(r"has\s+received\s+rs\s+[\d,.]+\s+from\s+your\s+a/c", re.IGNORECASE)


class FederalBankParser(BankParser):
    """
    Parser for Federal Bank SMS messages.

    "Your available balance for a/c ..." replies are balance observations,
    not transactions. Card alerts (debit and credit) are told apart from
    UPI/IMPS account movements for ``is_from_card``.
    """

    region = INDIA
    senders = Senders(
        contains=("FEDBNK", "FEDERAL", "FEDFIB", "FEDSCP"),
        dlt_codes=("FEDBNK", "FEDSCP", "FEDFIB"),
    )

    EXTRA_VERBS = (
        "sent via upi", "debited via upi", "spent on your credit card", "credit card was successful",
        "payment of", "payment via e-mandate",
    )

    AMOUNT = Cascade(
        amount(r"₹\s*" + NUMBER),
        amount(r"\bINR\s+" + NUMBER + r"\s+spent"),
        amount(r"you've received INR\s+" + NUMBER),
        amount(r"\bRs\s+" + NUMBER + r"\s+(?:debited|sent|credited)"),
        amount(r"has\s+received\s+Rs\s+" + NUMBER + r"\s+from"),
        amount(r"withdrawn\s+Rs\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INVESTMENT, "mutual fund", "gold", "sip", "investment", all_of=(_RECEIVED_FROM_ACCOUNT,)),
        when(TransactionType.EXPENSE, _RECEIVED_FROM_ACCOUNT),
        when(TransactionType.TRANSFER, "received your payment", all_of=("credit card",)),
        when(TransactionType.CREDIT, "spent", "was successful", "txn of", all_of=("credit card",)),
        when(TransactionType.EXPENSE, "e-mandate", "payment of", all_of=("processed successfully",)),
        when(TransactionType.EXPENSE, "sent via upi", "debited", "withdrawn", "paid"),
        when(TransactionType.EXPENSE, "spent", unless=("credit card",)),
        when(TransactionType.INCOME, "credited", "received", "deposited", "refund"),
    ) + INDIA.TYPES

    LEAD_MERCHANT = Cascade(
        label(r"withdrawn", "Cash Withdrawal"),
        group(r"^([A-Z][A-Za-z0-9\s]+?)\s+has\s+received\s+Rs"),
        label(r"credited to your A/c.*via IMPS", "IMPS Credit"),
    )
    CARD_MERCHANT = Cascade(
        group(r"\bat\s+([^.\n]+?)\s+on\s+your"),
        group(r"\bat\s+([^.\n]+?)\s+on\s+\d"),
    )
    MERCHANT = Cascade(
        group(r"payment of\s+[^.]+?\s+for\s+([^.\n]+?)\s+via\s+e-mandate"),
        rule(r"to\s+VPA\s+(\S+?)(?:\.\s*Ref\s+No|\s*Ref\s+No|$)", lambda m: upi_merchant(m.group(1))),
        group(r"\bto\s+(?!VPA\b)([^.\n]+?)(?:\.\s*Ref|Ref\s+No|$)"),
        rule(r"It was sent by\s+([^.\n]+?)(?:\s+on|$)", _sender_name, requires=("you've received",)),
        group(r"\bfrom\s+([^.\n]+?)(?:\.\s*|$)"),
        label(r"cash deposit|deposited|\bcdm\b|cash credited", "Cash Deposit"),
    )

    CARD_ACCOUNT = Cascade(
        group(r"(?:credit|debit)\s+card\s+ending\s+with\s+(\d{4})"),
        group(r"card\s+XX\*\*?(\d{4})"),
    )

    # "Your available balance for a/c FED1234 is INR 5,000.00."
    ACCOUNT = Cascade(group(r"\b[A-Z]{2,3}(\d{4})\s+is\s+INR\s+\d"))
    BALANCE = Cascade(amount(r"\b[A-Z]{2,3}\d{4}\s+is\s+INR\s+" + NUMBER + r"(?=[,.]|\s+\.)"))

    def get_bank_name(self) -> str:
        return "Federal Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if self.is_balance_update_notification(message):
            return False
        if "mandate" in lower and ("successfully created" in lower or "initiated" in lower):
            return False
        if ("e-mandate" in lower or "payment of" in lower) and "declined" in lower:
            return False
        return super().is_transaction_message(message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, ("credit card", "debit card", "card xx**", "card ending with")):
            return True
        if re.search(r"inr\s+[\d,]+(?:\.\d{2})?\s+spent", lower):
            return True
        return " spent " in lower and " at " in lower and " on " in lower

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        options = dict(transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)
        merchant = self.LEAD_MERCHANT(message, **options)
        if merchant is None and self.detect_is_card(message):
            merchant = self.CARD_MERCHANT(message, **options)
        if merchant is not None:
            return merchant
        return super().extract_merchant(message, sender)

    def extract_account_last4(self, message: str) -> Optional[str]:
        if self.detect_is_card(message):
            card = self.CARD_ACCOUNT(message)
            if card is not None:
                return card
        return super().extract_account_last4(message)

    def is_balance_update_notification(self, message: str) -> bool:
        if "your available balance for a/c" in message.lower():
            return True
        return super().is_balance_update_notification(message)
