import pytest

from smsledger.api import app, get_registry
from smsledger.bank.bank_parser import BankParser
from smsledger.bank.bank_parser_registry import BankParserRegistry
from smsledger.bank.senders import Senders
from smsledger.config import Settings, get_settings

DEBIT = "INR 500.00 debited from A/c XX1234 on 01-01-25 to SWIGGY. Avl Bal is INR 4,500.00"
BALANCE_ONLY = "Your A/c XX1234 balance is INR 12,345.67 as on 05-01-25."
FUTURE_DEBIT = "Rs 1,500.00 will be debited from your A/c XX1234 on 10-01-25 towards LIC PREMIUM."


class _Exploding(BankParser):
    senders = Senders(exact=("BOOM",))

    def get_bank_name(self):
        return "Exploding Bank"

    def parse(self, sms_body, sender, timestamp):
        raise RuntimeError("boom")


@pytest.fixture
def override():
    yield app.dependency_overrides
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_banks_in_registry_order(client, registry):
    response = client.get("/banks")
    assert response.json() == registry.bank_names()


def test_parse_success(client, registry):
    response = client.post("/parse", json={"sms_body": DEBIT, "sender": "IDBIBK", "timestamp": 1735700000000, "id": 7})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "success"
    assert data["outcome"] == "parsed"
    assert data["id"] == 7
    txn = data["transaction"]
    assert txn["amount"] == "500.00"
    assert txn["balance"] == "4500.00"
    assert txn["type"] == "EXPENSE"
    assert txn["account_last4"] == "1234"
    assert txn["currency"] == "INR"
    assert txn["bank_name"] == "IDBI Bank"

    expected = registry.resolve("IDBIBK").parse(DEBIT, "IDBIBK", 1).generate_transaction_id()
    assert txn["transaction_id"] == expected


def test_parse_accepts_sms_export_field_names(client):
    response = client.post("/parse", json={"body": DEBIT, "address": "IDBIBK", "date": 1735700000000})
    assert response.json()["status"] == "success"


def test_parse_without_timestamp(client):
    response = client.post("/parse", json={"sms_body": DEBIT, "sender": "IDBIBK"})
    assert response.json()["transaction"]["timestamp"] > 0


def test_parse_unknown_sender(client):
    data = client.post("/parse", json={"sms_body": DEBIT, "sender": "QQ-ZZZZZZ"}).json()
    assert data["status"] == "no_parser"
    assert data["transaction"] is None


def test_parse_not_a_transaction(client):
    data = client.post("/parse", json={"sms_body": "Your OTP is 123456", "sender": "IDBIBK"}).json()
    assert data["status"] == "unparsed"
    assert data["outcome"] == "not_transaction"
    assert data["bank_name"] == "IDBI Bank"


def test_parse_requires_body_and_sender(client):
    assert client.post("/parse", json={"sender": "IDBIBK"}).status_code == 422


def test_parse_batch_counts(client):
    messages = [
        {"sms_body": DEBIT, "sender": "IDBIBK", "timestamp": 1},
        {"sms_body": "Your OTP is 123456", "sender": "IDBIBK", "timestamp": 2},
        {"sms_body": DEBIT, "sender": "QQ-ZZZZZZ", "timestamp": 3},
    ]
    data = client.post("/parse-batch", json={"messages": messages}).json()
    assert data["total"] == 3
    assert (data["success"], data["unparsed"], data["no_parser"], data["error"]) == (1, 1, 1, 0)
    assert [item["status"] for item in data["results"]] == ["success", "unparsed", "no_parser"]


def test_parse_batch_over_the_limit_is_rejected(client, override):
    override[get_settings] = lambda: Settings(max_batch_size=1)
    messages = [{"sms_body": DEBIT, "sender": "IDBIBK"}] * 2
    assert client.post("/parse-batch", json={"messages": messages}).status_code == 413


def test_failing_item_does_not_fail_the_batch(client, override, registry):
    override[get_registry] = lambda: BankParserRegistry([_Exploding(), *registry])
    messages = [
        {"sms_body": DEBIT, "sender": "BOOM"},
        {"sms_body": DEBIT, "sender": "IDBIBK"},
    ]
    response = client.post("/parse-batch", json={"messages": messages})
    assert response.status_code == 200
    data = response.json()
    assert [item["status"] for item in data["results"]] == ["error", "success"]
    assert data["error"] == 1


def test_balance(client):
    response = client.post("/balance", json={"sms_body": BALANCE_ONLY, "sender": "IDBIBK"})
    assert response.status_code == 200
    data = response.json()
    assert data["balance"] == "12345.67"
    assert data["account_last4"] == "1234"
    assert data["as_of_date"].startswith("2025-01-05")


@pytest.mark.parametrize(
    "sender, body",
    [("IDBIBK", DEBIT), ("QQ-ZZZZZZ", BALANCE_ONLY)],
)
def test_balance_not_found(client, sender, body):
    assert client.post("/balance", json={"sms_body": body, "sender": sender}).status_code == 404


def test_mandate(client):
    response = client.post("/mandate", json={"sms_body": FUTURE_DEBIT, "sender": "IDBIBK"})
    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == "1500.00"
    assert data["merchant"] == "LIC PREMIUM"
    assert data["bank_name"] == "IDBI Bank"


def test_mandate_not_found(client):
    assert client.post("/mandate", json={"sms_body": DEBIT, "sender": "IDBIBK"}).status_code == 404
