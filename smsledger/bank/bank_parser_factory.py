from typing import List, Optional

from smsledger.bank.adcb_parser import ADCBParser
from smsledger.bank.adelfi_parser import AdelFiParser
from smsledger.bank.airtel_payments_bank_parser import AirtelPaymentsBankParser
from smsledger.bank.alinma_bank_parser import AlinmaBankParser
from smsledger.bank.amex_bank_parser import AMEXBankParser
from smsledger.bank.au_bank_parser import AUBankParser
from smsledger.bank.axis_bank_parser import AxisBankParser
from smsledger.bank.baac_bank_parser import BAACBankParser
from smsledger.bank.bancolombia_parser import BancolombiaParser
from smsledger.bank.bandhan_bank_parser import BandhanBankParser
from smsledger.bank.bangkok_bank_parser import BangkokBankParser
from smsledger.bank.bank_of_baroda_parser import BankOfBarodaParser
from smsledger.bank.bank_of_india_parser import BankOfIndiaParser
from smsledger.bank.bank_parser import BankParser
from smsledger.bank.bank_parser_registry import BankParserRegistry
from smsledger.bank.canara_bank_parser import CanaraBankParser
from smsledger.bank.cbe_bank_parser import CBEBankParser
from smsledger.bank.central_bank_of_india_parser import CentralBankOfIndiaParser
from smsledger.bank.charles_schwab_parser import CharlesSchwabParser
from smsledger.bank.cib_egypt_parser import CIBEgyptParser
from smsledger.bank.cimb_thai_parser import CIMBThaiParser
from smsledger.bank.citi_bank_parser import CitiBankParser
from smsledger.bank.city_union_bank_parser import CityUnionBankParser
from smsledger.bank.dashen_bank_parser import DashenBankParser
from smsledger.bank.dbs_bank_parser import DBSBankParser
from smsledger.bank.dhanlaxmi_bank_parser import DhanlaxmiBankParser
from smsledger.bank.discover_card_parser import DiscoverCardParser
from smsledger.bank.emirates_nbd_parser import EmiratesNBDParser
from smsledger.bank.equitas_bank_parser import EquitasBankParser
from smsledger.bank.everest_bank_parser import EverestBankParser
from smsledger.bank.fab_parser import FABParser
from smsledger.bank.faysal_bank_parser import FaysalBankParser
from smsledger.bank.federal_bank_parser import FederalBankParser
from smsledger.bank.gsb_bank_parser import GSBBankParser
from smsledger.bank.hdfc_bank_parser import HDFCBankParser
from smsledger.bank.hsbc_bank_parser import HSBCBankParser
from smsledger.bank.huntington_bank_parser import HuntingtonBankParser
from smsledger.bank.icici_bank_parser import ICICIBankParser
from smsledger.bank.idbi_bank_parser import IDBIBankParser
from smsledger.bank.idfc_first_bank_parser import IDFCFirstBankParser
from smsledger.bank.indian_bank_parser import IndianBankParser
from smsledger.bank.indian_overseas_bank_parser import IndianOverseasBankParser
from smsledger.bank.indusind_bank_parser import IndusIndBankParser
from smsledger.bank.ippb_parser import IPPBParser
from smsledger.bank.jio_pay_parser import JioPayParser
from smsledger.bank.jio_payments_bank_parser import JioPaymentsBankParser
from smsledger.bank.jk_bank_parser import JKBankParser
from smsledger.bank.jupiter_bank_parser import JupiterBankParser
from smsledger.bank.juspay_parser import JuspayParser
from smsledger.bank.karnataka_bank_parser import KarnatakaBankParser
from smsledger.bank.kasikorn_bank_parser import KasikornBankParser
from smsledger.bank.kerala_gramin_bank_parser import KeralaGraminBankParser
from smsledger.bank.kotak_bank_parser import KotakBankParser
from smsledger.bank.krung_thai_bank_parser import KrungThaiBankParser
from smsledger.bank.krungsri_bank_parser import KrungsriBankParser
from smsledger.bank.ktc_credit_card_parser import KTCCreditCardParser
from smsledger.bank.laxmi_bank_parser import LaxmiBankParser
from smsledger.bank.lazy_pay_parser import LazyPayParser
from smsledger.bank.liv_bank_parser import LivBankParser
from smsledger.bank.mashreq_bank_parser import MashreqBankParser
from smsledger.bank.melli_bank_parser import MelliBankParser
from smsledger.bank.mpesa_parser import MPESAParser
from smsledger.bank.navy_federal_parser import NavyFederalParser
from smsledger.bank.nmb_bank_parser import NMBBankParser
from smsledger.bank.old_hickory_parser import OldHickoryParser
from smsledger.bank.one_card_parser import OneCardParser
from smsledger.bank.parsian_bank_parser import ParsianBankParser
from smsledger.bank.pnb_bank_parser import PNBBankParser
from smsledger.bank.priorbank_parser import PriorbankParser
from smsledger.bank.saraswat_bank_parser import SaraswatBankParser
from smsledger.bank.sbi_bank_parser import SBIBankParser
from smsledger.bank.selcom_pesa_parser import SelcomPesaParser
from smsledger.bank.siam_commercial_bank_parser import SiamCommercialBankParser
from smsledger.bank.siddhartha_bank_parser import SiddharthaBankParser
from smsledger.bank.slice_parser import SliceParser
from smsledger.bank.south_indian_bank_parser import SouthIndianBankParser
from smsledger.bank.standard_chartered_bank_parser import StandardCharteredBankParser
from smsledger.bank.telebirr_parser import TelebirrParser
from smsledger.bank.tigo_pesa_parser import TigoPesaParser
from smsledger.bank.ttb_bank_parser import TTBBankParser
from smsledger.bank.uco_bank_parser import UCOBankParser
from smsledger.bank.union_bank_parser import UnionBankParser
from smsledger.bank.uob_thailand_parser import UOBThailandParser
from smsledger.bank.utkarsh_bank_parser import UtkarshBankParser
from smsledger.bank.yes_bank_parser import YesBankParser
from smsledger.bank.zemen_bank_parser import ZemenBankParser


def build_default_registry() -> BankParserRegistry:
    """
    Builds the registry of every supported institution.

    Order matters: parsers are tried top to bottom and the first one
    that accepts the sender wins.
    """
    return BankParserRegistry([
        HDFCBankParser(),
        SBIBankParser(),
        SaraswatBankParser(),
        DBSBankParser(),
        IndianBankParser(),
        FederalBankParser(),
        JuspayParser(),
        SliceParser(),
        LazyPayParser(),
        UtkarshBankParser(),
        ICICIBankParser(),
        KarnatakaBankParser(),
        KeralaGraminBankParser(),
        IDBIBankParser(),
        JupiterBankParser(),
        AxisBankParser(),
        PNBBankParser(),
        CanaraBankParser(),
        BankOfBarodaParser(),
        BankOfIndiaParser(),
        JioPaymentsBankParser(),
        KotakBankParser(),
        IDFCFirstBankParser(),
        UnionBankParser(),
        HSBCBankParser(),
        CentralBankOfIndiaParser(),
        SouthIndianBankParser(),
        JKBankParser(),
        JioPayParser(),
        IPPBParser(),
        CityUnionBankParser(),
        IndianOverseasBankParser(),
        AirtelPaymentsBankParser(),
        IndusIndBankParser(),
        AMEXBankParser(),
        OneCardParser(),
        UCOBankParser(),
        AUBankParser(),
        YesBankParser(),
        BandhanBankParser(),
        ADCBParser(),
        FABParser(),
        EmiratesNBDParser(),
        LivBankParser(),
        CitiBankParser(),
        DiscoverCardParser(),
        OldHickoryParser(),
        LaxmiBankParser(),
        CBEBankParser(),
        EverestBankParser(),
        BancolombiaParser(),
        MashreqBankParser(),
        CharlesSchwabParser(),
        NavyFederalParser(),
        AdelFiParser(),
        PriorbankParser(),
        AlinmaBankParser(),
        NMBBankParser(),
        SiddharthaBankParser(),
        MPESAParser(),
        SelcomPesaParser(),
        TigoPesaParser(),
        CIBEgyptParser(),
        DhanlaxmiBankParser(),
        HuntingtonBankParser(),
        StandardCharteredBankParser(),
        EquitasBankParser(),
        TelebirrParser(),
        ZemenBankParser(),
        DashenBankParser(),
        FaysalBankParser(),
        MelliBankParser(),
        ParsianBankParser(),
        BangkokBankParser(),
        KasikornBankParser(),
        SiamCommercialBankParser(),
        KrungThaiBankParser(),
        KrungsriBankParser(),
        TTBBankParser(),
        GSBBankParser(),
        BAACBankParser(),
        UOBThailandParser(),
        CIMBThaiParser(),
        KTCCreditCardParser(),
    ])


DEFAULT_REGISTRY = build_default_registry()


def resolve_parser(sender: str) -> Optional[BankParser]:
    """
    Returns the appropriate bank parser for the given sender.
    Returns None if no specific parser is found.
    """
    return DEFAULT_REGISTRY.resolve(sender)


def get_parser_by_name(bank_name: str) -> Optional[BankParser]:
    return DEFAULT_REGISTRY.get_parser_by_name(bank_name)


def get_all_parsers() -> List[BankParser]:
    return list(DEFAULT_REGISTRY)


def is_known_bank_sender(sender: str) -> bool:
    """Checks if the sender belongs to any known bank."""
    return DEFAULT_REGISTRY.is_known_sender(sender)
