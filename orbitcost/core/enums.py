"""
orbitcost core enumerations.

All enumeration types shared across the rollup engine.
"""

from enum import Enum


class BOMCategory(str, Enum):
    """
    Category tag for a bill-of-materials line item.
    """
    STRUCTURE = "structure"
    POWER = "power"
    THERMAL = "thermal"
    PROPULSION = "propulsion"
    AVIONICS = "avionics"
    LIFE_SUPPORT = "life_support"
    COMMUNICATIONS = "communications"
    PAYLOAD = "payload"
    SHIELDING = "shielding"      # MMOD shielding, label only
    DOCKING = "docking"
    ROBOTICS = "robotics"
    SOFTWARE = "software"


class SystemCategory(str, Enum):
    """
    Classification of orbital system archetypes.
    """
    HABITAT = "habitat"
    MANUFACTURING = "manufacturing"
    INFRASTRUCTURE = "infrastructure"
    POWER = "power"
    SERVICES = "services"
    SCIENCE = "science"


class RiskTier(str, Enum):
    """
    Technology risk band derived from TRL.
    """
    GREEN = "green"      # TRL 7-9
    YELLOW = "yellow"    # TRL 5-6
    ORANGE = "orange"    # TRL 3-4
    RED = "red"          # TRL 1-2
