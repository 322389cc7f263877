from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.regions.region import last4
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.compiled_patterns import CompiledPatterns
from smsledger.transaction_type import TransactionType


def _atm_location(match):
    return "ATM at " + match.group(1).strip()


def _vpa_name(match):
    # "at paytmqr281005050101@paytm by UPI" -> "paytm"
    name = match.group(1).split("@")[0].strip()
    if name.lower().endswith("qr"):
        name = name[:-2]
    return name or None


def _readable_handle(match):
    handle = match.group(1).strip()
    return handle if len(handle) > 3 and not handle.isdigit() else None


class HDFCBankParser(BankParser):
    """
    HDFC Bank specific parser.

    Handles salary credits, "sent from HDFC" UPI debits, blocked-card
    spends (``BLOCK CC``/``BLOCK PCC``) and the ``Info:`` trailer that
    carries the counterpart on NEFT/UPI alerts.
    """

    region = INDIA
    senders = Senders(
        exact=("HDFCBK", "HDFCBANK", "HDFC", "HDFCB"),
        patterns=(r"^[A-Z]{2}-HDFC", r"^HDFC-[A-Z]+$"),
    )

    EXTRA_VERBS = ("sent", "txn")
    NOT_TRANSACTIONS = ("bill alert", "to pay, download", "received towards your credit card")

    MERCHANT = Cascade(
        group(r"\bat\s+(.+?)\s+on\b", requires=("from hdfc bank card",)),
        rule(r"\bAt\s+\+?(.+?)\s+On\b", _atm_location, requires=("withdrawn",)),
        label(r"withdrawn|\bATM\b", "ATM"),
        rule(
            r"\bat\s+([^@\s]+@\S+|[^@\s]+(?:\s+\S+)?)(?=\s+by\s|\s+on\s|$)",
            _vpa_name,
            requires=(("block cc", "block pcc"), "card"),
        ),
        group(r"for\s+[^-]+-[^-]+-[^-]+\s+[A-Z]+\s+SALARY-([^.\n]+)", requires=("salary", "deposited")),
        group(r"SALARY[- ]([^.\n]+?)(?:\s+Info|$)", requires=("salary", "deposited")),
        group(r"Info:\s*(?:UPI/)?(?!UPI\b)([^/.\n]+?)(?:/|$)"),
        group(r"from\s+VPA\s*([^@\s]+)@\S+\s*\(UPI\s+\d+\)", requires=("credited",)),
        group(CompiledPatterns.Merchant.VPA_WITH_NAME),
        rule(CompiledPatterns.Merchant.VPA_PATTERN, _readable_handle),
        group(r"\bat\s+([^.\n]+?)\s+on\s+\d{2}", requires=("spent on card",)),
        group(r"debited\s+for\s+([^.\n]+?)\s+on\s+\d{2}"),
        group(r"\bTo\s+([^\n]+?)\s*(?:\n|\d{2}/\d{2})", requires=("upi mandate",)),
        group(r"towards\s+([^\n]+?)(?:\s+UMRN|\s+ID:|\s+Alert:|$)"),
        group(r"For:\s+([^\n]+?)(?:\s+From|\s+Via|$)"),
    )

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "block cc", "block pcc"),
        when(TransactionType.CREDIT, "spent on card", unless=("block dc",)),
        when(TransactionType.EXPENSE, "payment", "towards", all_of=("credit card",)),
        when(TransactionType.EXPENSE, "sent", all_of=("from hdfc",)),
        when(TransactionType.EXPENSE, "spent", all_of=("from hdfc bank card",)),
        when(TransactionType.EXPENSE, "debited", "withdrawn"),
        when(TransactionType.EXPENSE, "spent", unless=("card",)),
        when(TransactionType.EXPENSE, "charged", "paid", "purchase"),
        when(TransactionType.INCOME, "credited", "deposited", "received", "refund"),
        when(TransactionType.INCOME, "cashback", unless=("earn cashback",)),
    )

    REFERENCE = Cascade(
        group(r"\bRef\s+(\d{9,12})"),
        group(r"UPI\s+Ref\s+No\s+(\d{12})"),
        group(r"\bRef\s+No\.?\s+([A-Z0-9]+)"),
        group(r"(?:Ref|Reference)[:.\s]+([A-Z0-9]{6,})(?:\s*$|\s*Not\s+You)"),
    )

    ACCOUNT = Cascade(
        group(r"Card\s+x(\d{4})"),
        group(r"BLOCK\s+DC\s+(\d{4})"),
        rule(r"HDFC\s+Bank\s+([X*]*\d{3,})", last4),
        rule(r"deposited\s+in\s+(?:HDFC\s+Bank\s+)?A/c\s+(?:XX+)?(\d+)", last4),
        rule(r"from\s+(?:HDFC\s+Bank\s+)?A/c\s+(?:XX+)?(\d+)", last4),
        rule(r"A/c\s+(?:XX+)?(\d+)", last4),
    )

    BALANCE = Cascade(
        amount(r"Avl\s+bal:?\s*INR\s*" + NUMBER),
        amount(r"Available\s+Balance:?\s*INR\s*" + NUMBER),
        amount(r"\bBal\s+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "HDFC Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if self.is_mandate_notification(message):
            return False
        if contains_any(lower, self.NOT_TRANSACTIONS) or ("bill" in lower and "is due on" in lower):
            return False
        if "payment" in lower and "credited to your card" in lower:
            return False
        if "payment alert" in lower and "will be" not in lower:
            return True
        return super().is_transaction_message(message)
