"""Protocol upgrade identifiers and the spec names used by state tests."""

from __future__ import annotations

import enum


class SpecId(enum.IntEnum):
    """Ordered protocol upgrades; a later upgrade enables every earlier one."""

    FRONTIER = 0
    FRONTIER_THAWING = 1
    HOMESTEAD = 2
    DAO_FORK = 3
    TANGERINE = 4
    SPURIOUS_DRAGON = 5
    BYZANTIUM = 6
    CONSTANTINOPLE = 7
    PETERSBURG = 8
    ISTANBUL = 9
    MUIR_GLACIER = 10
    BERLIN = 11
    LONDON = 12
    ARROW_GLACIER = 13
    GRAY_GLACIER = 14
    MERGE = 15
    SHANGHAI = 16
    CANCUN = 17
    LATEST = 18

    def enabled(self, other: SpecId) -> bool:
        """Return True if the rules of ``other`` are active under this spec."""
        return self >= other


class SpecName(enum.Enum):
    """Fork names as they appear in the ``post`` section of state test files."""

    FRONTIER = "Frontier"
    FRONTIER_TO_HOMESTEAD_AT5 = "FrontierToHomesteadAt5"
    HOMESTEAD = "Homestead"
    HOMESTEAD_TO_DAO_AT5 = "HomesteadToDaoAt5"
    HOMESTEAD_TO_EIP150_AT5 = "HomesteadToEIP150At5"
    EIP150 = "EIP150"
    EIP158 = "EIP158"
    EIP158_TO_BYZANTIUM_AT5 = "EIP158ToByzantiumAt5"
    BYZANTIUM = "Byzantium"
    BYZANTIUM_TO_CONSTANTINOPLE_AT5 = "ByzantiumToConstantinopleAt5"
    BYZANTIUM_TO_CONSTANTINOPLE_FIX_AT5 = "ByzantiumToConstantinopleFixAt5"
    CONSTANTINOPLE = "Constantinople"
    CONSTANTINOPLE_FIX = "ConstantinopleFix"
    ISTANBUL = "Istanbul"
    BERLIN = "Berlin"
    BERLIN_TO_LONDON_AT5 = "BerlinToLondonAt5"
    LONDON = "London"
    MERGE = "Merge"
    SHANGHAI = "Shanghai"
    UNKNOWN = "Unknown"

    @classmethod
    def from_name(cls, name: str) -> SpecName:
        """Look a fork name up; names that are not known map to UNKNOWN."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN

    def to_spec_id(self) -> SpecId:
        """Return the protocol rules this test fork runs under."""
        if self in (SpecName.BYZANTIUM_TO_CONSTANTINOPLE_AT5, SpecName.CONSTANTINOPLE):
            raise ValueError(f"{self.value} is overridden by PETERSBURG")
        if self is SpecName.UNKNOWN:
            raise ValueError("Unknown spec")
        return _SPEC_IDS[self]


_SPEC_IDS = {
    SpecName.FRONTIER: SpecId.FRONTIER,
    SpecName.HOMESTEAD: SpecId.HOMESTEAD,
    SpecName.FRONTIER_TO_HOMESTEAD_AT5: SpecId.HOMESTEAD,
    SpecName.EIP150: SpecId.TANGERINE,
    SpecName.HOMESTEAD_TO_DAO_AT5: SpecId.TANGERINE,
    SpecName.HOMESTEAD_TO_EIP150_AT5: SpecId.TANGERINE,
    SpecName.EIP158: SpecId.SPURIOUS_DRAGON,
    SpecName.BYZANTIUM: SpecId.BYZANTIUM,
    SpecName.EIP158_TO_BYZANTIUM_AT5: SpecId.BYZANTIUM,
    SpecName.CONSTANTINOPLE_FIX: SpecId.PETERSBURG,
    SpecName.BYZANTIUM_TO_CONSTANTINOPLE_FIX_AT5: SpecId.PETERSBURG,
    SpecName.ISTANBUL: SpecId.ISTANBUL,
    SpecName.BERLIN: SpecId.BERLIN,
    SpecName.LONDON: SpecId.LONDON,
    SpecName.BERLIN_TO_LONDON_AT5: SpecId.LONDON,
    SpecName.MERGE: SpecId.MERGE,
    SpecName.SHANGHAI: SpecId.CANCUN,
}