from decimal import Decimal

import pytest

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import GULF, INDIA, THAILAND
from smsledger.bank.senders import Senders
from smsledger.transaction_type import TransactionType

TIMESTAMP = 1735700000000


class _GulfIssuer(BankParser):
    region = GULF
    senders = Senders(exact=("GULFISSUER",))

    def get_bank_name(self) -> str:
        return "Gulf Issuer"


class _ThaiIssuer(BankParser):
    region = THAILAND
    senders = Senders(exact=("THAIISSUER",))

    def get_bank_name(self) -> str:
        return "Thai Issuer"


class _IndiaIssuer(BankParser):
    region = INDIA
    senders = Senders(exact=("INDIAISSUER",))

    def get_bank_name(self) -> str:
        return "India Issuer"


@pytest.fixture
def gulf():
    return _GulfIssuer()


@pytest.fixture
def thai():
    return _ThaiIssuer()


class TestGulfRegion:
    def test_foreign_card_purchase_keeps_its_currency(self, gulf):
        body = "Credit Card Purchase: USD 25.50 at AMAZON on 05-Jan-25. Avl Limit AED 9,000.00"
        txn = gulf.parse(body, "GULFISSUER", TIMESTAMP)

        assert txn is not None
        assert txn.amount == Decimal("25.50")
        assert txn.type is TransactionType.CREDIT
        assert txn.currency == "USD"
        assert txn.credit_limit == Decimal("9000.00")
        assert txn.merchant == "AMAZON"

    def test_month_abbreviation_is_not_a_currency(self, gulf):
        body = "12 DEC 2024 Debit Card Purchase AED 150.00 at CARREFOUR"
        txn = gulf.parse(body, "GULFISSUER", TIMESTAMP)

        assert txn is not None
        assert txn.amount == Decimal("150.00")
        assert txn.type is TransactionType.EXPENSE
        assert txn.currency == "AED"

    def test_home_currency(self, gulf):
        assert gulf.get_currency() == "AED"


class TestThaiRegion:
    def test_thai_script_debit(self, thai):
        body = "เงินออก 1,250.00 บาท บช X1234 คงเหลือ 5,000.00 บาท"
        txn = thai.parse(body, "THAIISSUER", TIMESTAMP)

        assert txn is not None
        assert txn.amount == Decimal("1250.00")
        assert txn.type is TransactionType.EXPENSE
        assert txn.account_last4 == "1234"
        assert txn.balance == Decimal("5000.00")
        assert txn.currency == "THB"

    def test_ktc_card_spend(self, parse):
        body = "Credit card spending 1,500.00 THB at CENTRAL WORLD Available limit 48,500.00 THB"
        txn = parse("KTC", body)

        assert txn is not None
        assert txn.bank_name == "KTC"
        assert txn.type is TransactionType.CREDIT
        assert txn.is_from_card
        assert txn.credit_limit == Decimal("48500.00")
        assert txn.merchant == "CENTRAL WORLD"


class TestIranianRegion:
    BODY = "برداشت مبلغ ۱۵۰,۰۰۰ ریال از کارت ۶۰۳۷-۹۹۷۱-۱۲۳۴-۵۶۷۸ مانده: ۲,۵۰۰,۰۰۰"

    def test_persian_digits_are_normalized(self, parse):
        txn = parse("MELLI", self.BODY)

        assert txn is not None
        assert txn.bank_name == "Melli Bank"
        assert txn.amount == Decimal("150000")
        assert txn.type is TransactionType.EXPENSE
        assert txn.balance == Decimal("2500000")
        assert txn.currency == "IRR"

    def test_card_number_gives_account_and_merchant(self, parse):
        txn = parse("MELLI", self.BODY)

        assert txn.account_last4 == "5678"
        assert txn.is_from_card
        assert txn.merchant == "Card 6037-9971-1234-5678"


class TestMobileMoneyRegion:
    def test_kenya_payment(self, parse):
        body = (
            "QGH7XK2L9P Confirmed. Ksh1,250.00 paid to JAVA HOUSE. on 5/1/25 at 1:15 PM "
            "New M-PESA balance is Ksh3,400.00."
        )
        txn = parse("MPESA", body)

        assert txn is not None
        assert txn.bank_name == "M-PESA"
        assert txn.amount == Decimal("1250.00")
        assert txn.type is TransactionType.EXPENSE
        assert txn.merchant == "JAVA HOUSE"
        assert txn.balance == Decimal("3400.00")
        assert txn.reference == "QGH7XK2L9P"
        assert txn.account_last4 == "WALLET"
        assert txn.currency == "KES"

    def test_tanzanian_shillings_route_to_tanzania(self, parse):
        body = (
            "RK12ABC345 Confirmed. You have received Tsh50,000.00 from JOHN DOE (255712345678) "
            "on 5/1/25 at 10:00 AM. New M-Pesa balance is Tsh120,000.00."
        )
        txn = parse("MPESA", body)

        assert txn is not None
        assert txn.bank_name == "M-Pesa Tanzania"
        assert txn.amount == Decimal("50000.00")
        assert txn.type is TransactionType.INCOME
        assert txn.merchant == "JOHN DOE"
        assert txn.balance == Decimal("120000.00")
        assert txn.currency == "TZS"

    def test_receipt_cue_is_required(self, parse):
        assert parse("MPESA", "Dial *334# to check your M-PESA statement.") is None


class TestIndianRegion:
    @pytest.mark.parametrize(
        "body",
        [
            "Your OTP for transaction of Rs.500 is 123456. Do not share it.",
            "Rs.500.00 will be debited from your A/c XX1234 on 10-01-25.",
        ],
    )
    def test_gate_rejects_non_transactions(self, body):
        assert _IndiaIssuer().parse(body, "INDIAISSUER", TIMESTAMP) is None

    def test_home_currency(self):
        assert _IndiaIssuer().get_currency() == "INR"
