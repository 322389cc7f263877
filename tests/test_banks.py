from decimal import Decimal

from smsledger.bank.bank_parser_factory import get_parser_by_name
from smsledger.transaction_type import TransactionType


class TestHDFCBank:
    def test_upi_send(self, parse):
        body = "Sent Rs.250.00 From HDFC Bank A/C x5678 To ZOMATO On 05/01/25 Ref 400011112222"
        txn = parse("VM-HDFCBK", body)

        assert txn.bank_name == "HDFC Bank"
        assert txn.amount == Decimal("250.00")
        assert txn.type is TransactionType.EXPENSE
        assert txn.merchant == "ZOMATO"
        assert txn.account_last4 == "5678"
        assert txn.reference == "400011112222"
        assert txn.currency == "INR"
        assert not txn.is_from_card


class TestAmericanExpress:
    def test_card_spend_is_always_credit(self, parse):
        body = "You've spent INR 2,450.00 on your AMEX card ** 12345 at SWIGGY on 5 January 2025 at 09:15 PM IST"
        txn = parse("AMEXIN", body)

        assert txn.bank_name == "American Express"
        assert txn.amount == Decimal("2450.00")
        assert txn.type is TransactionType.CREDIT
        assert txn.is_from_card
        assert txn.merchant == "SWIGGY"
        assert txn.account_last4 == "2345"

    def test_statement_alert_is_skipped(self, parse):
        assert parse("AMEXIN", "Your AMEX card statement for INR 12,000.00 has been generated.") is None


class TestNavyFederal:
    def test_approved_debit_card_transaction(self, parse):
        body = "NFCU: Transaction for $45.67 was approved on debit card 1234 at STARBUCKS at 10:15 EST."
        txn = parse("NFCU", body)

        assert txn.bank_name == "Navy Federal Credit Union"
        assert txn.amount == Decimal("45.67")
        assert txn.type is TransactionType.EXPENSE
        assert txn.merchant == "STARBUCKS"
        assert txn.account_last4 == "1234"
        assert txn.is_from_card
        assert txn.currency == "USD"

    def test_declined_transaction_is_skipped(self, parse):
        body = "NFCU: Transaction for $12.00 was declined on debit card 1234 at SHELL at 08:00 EST."
        assert parse("NFCU", body) is None


class TestAdelFi:
    def test_transaction_alert(self, parse):
        body = (
            "Transaction Alert from AdelFi. **1234 had a transaction of ($25.00). "
            "Description: 1234 WALMART SUPERCENTER. Date: Jan 05, 2025"
        )
        txn = parse("42141", body)

        assert txn.bank_name == "AdelFi"
        assert txn.amount == Decimal("25.00")
        assert txn.type is TransactionType.CREDIT
        assert txn.is_from_card
        assert txn.merchant == "WALMART SUPERCENTER"
        assert txn.account_last4 == "1234"


class TestBancolombia:
    def test_peso_amount_format(self, parse):
        body = "Bancolombia le informa Compraste $45.000,00 en EXITO con tu T.Deb *1234."
        txn = parse("87400", body)

        assert txn.bank_name == "Bancolombia"
        assert txn.amount == Decimal("45000.00")
        assert txn.type is TransactionType.EXPENSE
        assert txn.merchant == "Compra"
        assert txn.currency == "COP"

    def test_message_without_a_spanish_verb_is_skipped(self, parse):
        assert parse("87400", "Bancolombia: tu clave dinamica es 123456") is None


class TestHuntington:
    def test_overdrawn_balance_is_negative(self, parse):
        body = (
            "Huntington Heads Up. We processed a debit card withdrawal: $12.40 at STARBUCKS. "
            "Acct CK1234 has a -$3.60 bal."
        )
        txn = parse("HUNTINGTON", body)

        assert txn.bank_name == "Huntington Bank"
        assert txn.amount == Decimal("12.40")
        assert txn.type is TransactionType.EXPENSE
        assert txn.merchant == "STARBUCKS"
        assert txn.account_last4 == "1234"
        assert txn.balance == Decimal("-3.60")
        assert txn.is_from_card
        assert txn.currency == "USD"


class TestJKBankHash:
    FIRST = "Your A/c XX1234 is debited with Rs.500.00 towards SWIGGY. RRN No. 412345678901."
    RESENT = "Rs.500.00 debited from A/c XX1234 towards SWIGGY. RRN No. 412345678901. Avl Bal: Rs. 100.00"

    def test_rewordings_share_a_hash(self):
        parser = get_parser_by_name("JK Bank")
        first = parser.transaction_hash(self.FIRST, "JKBANK", Decimal("500.00"))
        resent = parser.transaction_hash(self.RESENT, "JKBANK", Decimal("500"))

        assert first is not None
        assert first == resent

    def test_reference_changes_the_hash(self):
        parser = get_parser_by_name("JK Bank")
        other = self.FIRST.replace("412345678901", "412345678902")

        assert parser.transaction_hash(self.FIRST, "JKBANK", Decimal("500.00")) != parser.transaction_hash(
            other, "JKBANK", Decimal("500.00")
        )

    def test_no_anchor_means_no_hash(self):
        parser = get_parser_by_name("JK Bank")
        assert parser.transaction_hash("Rs.500.00 debited towards SWIGGY.", "JKBANK", Decimal("500.00")) is None

    def test_other_banks_carry_no_hash(self, parse):
        body = "Sent Rs.250.00 From HDFC Bank A/C x5678 To ZOMATO On 05/01/25 Ref 400011112222"
        assert parse("VM-HDFCBK", body).transaction_hash is None
