from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, override

from constants import DIMENSION_BASE, DIMENSION_STEP, MAX_VERSION, MIN_VERSION
from ec_blocks import ECBlockGroup
from error_correction import ErrorCorrection
from exceptions import MalformedTableError, VersionOutOfRangeError


class Version:
    _version_number: int
    _ec_block_groups: Mapping[ErrorCorrection, ECBlockGroup]
    _total_codewords: int

    def __init__(self, version_number: int, ec_block_groups: Mapping[ErrorCorrection, ECBlockGroup]):
        if not MIN_VERSION <= version_number <= MAX_VERSION:
            raise VersionOutOfRangeError(version_number)

        missing = [level.letter for level in ErrorCorrection if level not in ec_block_groups]
        if missing:
            raise MalformedTableError(f"Version {version_number} is missing EC block groups for levels {', '.join(missing)}")

        self._version_number = version_number
        self._ec_block_groups = MappingProxyType({level: ec_block_groups[level] for level in ErrorCorrection})

        # Total capacity is the same at every level
        low = self._ec_block_groups[ErrorCorrection.LOW]
        total = 0
        for spec in low.get_specs():
            total += spec.count * (spec.data_codewords + low.get_ec_codewords_per_block())
        self._total_codewords = total

    def get_version_number(self) -> int:
        return self._version_number

    def get_dimension(self) -> int:
        return DIMENSION_BASE + DIMENSION_STEP * self._version_number

    def get_total_codewords(self) -> int:
        return self._total_codewords

    def get_ec_block_group(self, ec_level: ErrorCorrection) -> ECBlockGroup:
        return self._ec_block_groups[ec_level]

    def get_ec_block_groups(self) -> Mapping[ErrorCorrection, ECBlockGroup]:
        return self._ec_block_groups

    def get_data_codewords(self, ec_level: ErrorCorrection) -> int:
        return self._ec_block_groups[ec_level].get_total_data_codewords()

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__:
            raise AttributeError(f"Version {self._version_number} is read-only")
        super().__setattr__(name, value)

    @override
    def __str__(self) -> str:
        return str(self._version_number)

    @override
    def __repr__(self) -> str:
        return f"<Version number={self._version_number} dimension={self.get_dimension()} total_codewords={self._total_codewords}>"

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Version):
            return self._version_number == other.get_version_number()
        return False

    @override
    def __hash__(self) -> int:
        return hash(self._version_number)
