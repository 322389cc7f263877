"""Regional heuristics shared by the parsers of one market."""

from smsledger.bank.regions.gulf import GULF, GulfRegion
from smsledger.bank.regions.india import INDIA, IndianRegion
from smsledger.bank.regions.iran import IRAN, IranianRegion
from smsledger.bank.regions.mobile_money import MobileMoneyRegion
from smsledger.bank.regions.region import Region
from smsledger.bank.regions.thailand import THAILAND, ThaiRegion

# English-language markets that only differ by home currency
UNITED_STATES = Region("USD")
NEPAL = Region("NPR")
ETHIOPIA = Region("ETB")
EGYPT = Region("EGP")
PAKISTAN = Region("PKR")
COLOMBIA = Region("COP")
BELARUS = Region("BYN")
SAUDI_ARABIA = Region("SAR")

KENYA_MOBILE = MobileMoneyRegion("KES")
TANZANIA_MOBILE = MobileMoneyRegion("TZS")
ETHIOPIA_MOBILE = MobileMoneyRegion("ETB")

GENERIC = Region()

__all__ = [
    "Region",
    "IndianRegion",
    "GulfRegion",
    "ThaiRegion",
    "IranianRegion",
    "MobileMoneyRegion",
    "INDIA",
    "GULF",
    "THAILAND",
    "IRAN",
    "UNITED_STATES",
    "NEPAL",
    "ETHIOPIA",
    "EGYPT",
    "PAKISTAN",
    "COLOMBIA",
    "BELARUS",
    "SAUDI_ARABIA",
    "KENYA_MOBILE",
    "TANZANIA_MOBILE",
    "ETHIOPIA_MOBILE",
    "GENERIC",
]
