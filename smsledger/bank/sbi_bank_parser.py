import dataclasses
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.regions.region import ascii_fold, last4
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType


def _debit_card(match):
    token = match.group(1)
    digits = "".join(filter(str.isdigit, token))
    return digits[-4:] if len(digits) >= 4 else token


class SBIBankParser(BankParser):
    """
    Parser for State Bank of India (SBI) SMS messages.

    Covers savings-account alerts, YONO cash withdrawals and SBI Card
    credit-card alerts. Card alerts come from the ``SBICRD`` / ``SBI CARDS``
    senders or mention "credit card" and are always marked as card spends.
    """

    region = INDIA
    senders = Senders(
        exact=("SBIBK", "SBIBNK"),
        contains=("SBI", "ATMSBI", "SBI CARDS"),
        dlt_codes=("SBIBK", "SBI"),
    )

    EXTRA_VERBS = ("trf to", "transfer from", "w/d@")
    NOT_TRANSACTIONS = (
        "e-statement of sbi credit card", "is due for", "sbi card application",
        "process your app.no", "track your application status",
    )

    AMOUNT = Cascade(
        amount(r"transaction\s+number\s+\d+\s+for\s+Rs\.?\s*" + NUMBER),
        amount(r"payment\s+of\s+Rs\.?\s*" + NUMBER),
        amount(r"Rs\.?\s*" + NUMBER + r"\s+spent"),
        amount(r"debited\s+by\s+(?:Rs\.?\s*)?" + NUMBER),
        amount(r"credited\s+by\s+Rs\.?\s*" + NUMBER),
        amount(r"(?:Rs\.?|INR)\s*" + NUMBER + r"\s+(?:has\s+been\s+)?(?:debited|credited)"),
        amount(r"(?:withdrawn|transferred)\s+Rs\.?\s*" + NUMBER),
        amount(r"paid\s+to\s+[\w.-]+@\w+\s+Rs\.?\s*" + NUMBER),
        amount(r"ATM\s+withdrawal\s+of\s+Rs\.?\s*" + NUMBER),
        amount(r"Yono\s+Cash\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(
            TransactionType.EXPENSE,
            "withdrawn", "transferred", "paid to", "atm withdrawal", "by sbi debit card", "trf to", "w/d@",
        ),
        when(TransactionType.INCOME, "transfer from"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"done\s+at\s+([^.\n]+?)(?:\s+on\s+|$)"),
        group(r"trf\s+to\s+([^.\n]+?)(?:\s+Ref|$)"),
        group(r"transfer\s+from\s+([^.\n]+?)(?:\s+Ref|$)"),
        group(r"paid\s+to\s+([\w.-]+)@\w+"),
        rule(r"w/d@SBI\s+ATM\s+([A-Z0-9]+)", lambda m: "YONO Cash ATM - " + m.group(1)),
        rule(r"\bATM\s+(?:withdrawal\s+)?(?:at\s+)?([^.\n]+?)(?:\s+on|\s+Avl)", lambda m: "ATM - " + m.group(1).strip()),
        group(r"(?:NEFT|IMPS|RTGS)[^:]*:\s*([^.\n]+?)(?:\s+Ref|\s+on|$)"),
    )

    CARD_MERCHANT = Cascade(group(r"\bat\s+([A-Za-z0-9\s&._-]+?)\s+on\s+\d"))

    ACCOUNT = Cascade(
        rule(r"by\s+SBI\s+Debit\s+Card\s+([\w-]+)", _debit_card),
        rule(r"A/c\s+([X*]*\d+)", last4),
        group(r"A/c\s+ending\s+(\d{4})"),
        group(r"a/c\s+no\.?\s+(?:XX|X\*+)?(\d{4})"),
    )

    CARD_ACCOUNT = Cascade(
        group(r"ending\s+with\s+(\d{4})"),
        group(r"ending\s+(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Your\s+updated\s+available\s+balance\s+is\s+Rs\.?\s*" + NUMBER),
        amount(r"Avl\s+Bal\s+Rs\.?\s*" + NUMBER),
        amount(r"Available\s+Balance:?\s+Rs\.?\s*" + NUMBER),
        amount(r"\bBal:?\s+Rs\.?\s*" + NUMBER),
    )

    LIMIT = Cascade(amount(r"available\s+limit\s+is\s+Rs\.?\s*" + NUMBER))

    REFERENCE = Cascade(
        group(r"transaction\s+number\s+([\w-]+)"),
        group(r"Ref\s+No\.?\s*(\w+)"),
        group(r"Txn#\s*(\w+)"),
        group(r"transaction\s+ID:?\s*(\w+)"),
    )

    def get_bank_name(self) -> str:
        return "State Bank of India"

    def is_credit_card_message(self, sender: str, message: str) -> bool:
        upper = sender.upper()
        return "SBICRD" in upper or "SBI CARDS" in upper or "credit card" in message.lower()

    def parse(self, sms_body: str, sender: str, timestamp: int) -> Optional[ParsedTransaction]:
        return super().parse(ascii_fold(sms_body), sender, timestamp)

    def build_transaction(
        self,
        sms_body: str,
        sender: str,
        timestamp: int,
        amount: Decimal,
        txn_type: TransactionType,
    ) -> ParsedTransaction:
        if not self.is_credit_card_message(sender, sms_body):
            return super().build_transaction(sms_body, sender, timestamp, amount, txn_type)

        lower = sms_body.lower()
        if "payment of" in lower and "credited to your sbi credit card" in lower:
            txn_type = TransactionType.INCOME
        else:
            txn_type = TransactionType.CREDIT

        record = super().build_transaction(sms_body, sender, timestamp, amount, txn_type)
        if "via bbps" in lower:
            merchant = "BBPS Payment"
        else:
            merchant = self.CARD_MERCHANT(
                sms_body, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name
            ) or record.merchant
        limit = self.extract_available_limit(sms_body)
        return dataclasses.replace(
            record,
            account_last4=self.CARD_ACCOUNT(sms_body) or record.account_last4,
            merchant=merchant,
            credit_limit=limit if limit is not None else record.credit_limit,
            is_from_card=True,
        )

    def is_transaction_message(self, message: str) -> bool:
        lower = ascii_fold(message).lower()
        if contains_any(lower, self.NOT_TRANSACTIONS) or self.is_mandate_notification(message):
            return False
        if "by sbi debit card" in lower or ("spent" in lower and "credit card" in lower):
            return True
        return super().is_transaction_message(ascii_fold(message))

    def is_mandate_notification(self, message: str) -> bool:
        lower = message.lower()
        if "e mandate" in lower or ("mandate" in lower and "created" in lower and "upi" in lower):
            return True
        return super().is_mandate_notification(message)
