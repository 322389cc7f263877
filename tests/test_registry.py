import pytest

from smsledger.bank import bank_parser_factory
from smsledger.bank.bank_parser import BankParser
from smsledger.bank.bank_parser_registry import BankParserRegistry
from smsledger.bank.senders import Senders


class _Fake(BankParser):
    def __init__(self, name, **senders):
        self.name = name
        self.senders = Senders(**senders)

    def get_bank_name(self):
        return self.name


def test_default_registry_size_and_ends(registry):
    names = registry.bank_names()
    assert len(registry) == 84
    assert names[0] == "HDFC Bank"
    assert names[-1] == "KTC"
    assert len(set(names)) == len(names)


def test_mpesa_is_a_single_entry_after_siddhartha(registry):
    names = registry.bank_names()
    assert names.count("M-PESA") == 1
    assert names.index("M-PESA") == names.index("Siddhartha Bank") + 1


@pytest.mark.parametrize(
    "sender, bank",
    [
        ("JD-HDFCBK", "HDFC Bank"),
        ("HDFCBK", "HDFC Bank"),
        ("AD-SBIINB", "State Bank of India"),
        ("IDBIBK", "IDBI Bank"),
        ("VM-KOTAKB-S", "Kotak Bank"),
        ("VM-IPBMSG-S", "India Post Payments Bank"),
        ("JM-JIOPAY", "JioPay"),
        ("ADCBALERT", "Abu Dhabi Commercial Bank"),
        ("EMIRATESNBD", "Emirates NBD"),
        ("MPESA", "M-PESA"),
        ("127", "Telebirr"),
        ("KBANK", "Kasikorn Bank"),
        ("KTC", "KTC"),
        ("KRUNGTHAI CARD", "Krungthai Bank"),
        ("SOUTHINDIANBANK", "Indian Bank"),
        ("9876543", "Everest Bank"),
        ("QQ-ZZZZZZ", None),
        ("", None),
    ],
)
def test_resolve(registry, sender, bank):
    parser = registry.resolve(sender)
    assert (parser.get_bank_name() if parser else None) == bank


def test_sender_matching_is_case_insensitive(registry):
    assert registry.resolve("jd-hdfcbk") is registry.resolve("JD-HDFCBK")


def test_first_match_wins_and_is_stable():
    broad = _Fake("Broad", contains=("BANK",))
    narrow = _Fake("Narrow", exact=("MYBANK",))
    registry = BankParserRegistry([narrow, broad])
    for _ in range(3):
        assert registry.resolve("MYBANK") is narrow
    assert registry.resolve("OTHERBANK") is broad

    reordered = BankParserRegistry([broad, narrow])
    assert reordered.resolve("MYBANK") is broad


def test_duplicate_bank_names_are_rejected():
    with pytest.raises(ValueError):
        BankParserRegistry([_Fake("Same", exact=("A",)), _Fake("Same", exact=("B",))])


def test_registry_is_immutable(registry):
    with pytest.raises(AttributeError):
        registry._parsers = ()
    with pytest.raises(AttributeError):
        registry.extra = 1
    assert isinstance(registry.parsers, tuple)


def test_lookup_helpers():
    assert bank_parser_factory.resolve_parser("HDFCBK").get_bank_name() == "HDFC Bank"
    assert bank_parser_factory.get_parser_by_name("Telebirr").get_bank_name() == "Telebirr"
    assert bank_parser_factory.get_parser_by_name("Nope") is None
    assert bank_parser_factory.is_known_bank_sender("AX-ICICIB")
    assert not bank_parser_factory.is_known_bank_sender("QQ-ZZZZZZ")
    assert len(bank_parser_factory.get_all_parsers()) == 84


def test_build_default_registry_returns_fresh_equivalent_registry(registry):
    rebuilt = bank_parser_factory.build_default_registry()
    assert rebuilt is not registry
    assert rebuilt.bank_names() == registry.bank_names()


def test_every_parser_reports_its_home_currency(registry):
    currencies = {parser.get_bank_name(): parser.get_currency() for parser in registry}
    assert currencies["HDFC Bank"] == "INR"
    assert currencies["Emirates NBD"] == "AED"
    assert currencies["Kasikorn Bank"] == "THB"
    assert currencies["Melli Bank"] == "IRR"
    assert currencies["M-PESA"] == "KES"
    assert currencies["Navy Federal Credit Union"] == "USD"
    assert currencies["Bancolombia"] == "COP"
