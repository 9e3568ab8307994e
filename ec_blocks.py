from collections.abc import Iterator
from dataclasses import dataclass
from typing import override

from error_correction import ErrorCorrection
from exceptions import MalformedTableError


@dataclass(frozen=True)
class ECBlockSpec:
    count: int
    data_codewords: int

    def __post_init__(self):
        if self.count < 1:
            raise MalformedTableError(f"Block count must be at least 1, got {self.count}")
        if self.data_codewords < 1:
            raise MalformedTableError(f"Data codewords per block must be at least 1, got {self.data_codewords}")

    def get_count(self) -> int:
        return self.count

    def get_data_codewords(self) -> int:
        return self.data_codewords

    def size(self) -> int:
        return self.count * self.data_codewords

    @override
    def __str__(self):
        return f"ECBlockSpec({self.count=}, {self.data_codewords=})"


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=41
@dataclass(frozen=True)
class ECBlockGroup:
    ec_codewords_per_block: int
    specs: tuple[ECBlockSpec, ...]

    def __post_init__(self):
        if self.ec_codewords_per_block < 1:
            raise MalformedTableError(f"EC codewords per block must be at least 1, got {self.ec_codewords_per_block}")
        object.__setattr__(self, "specs", tuple(self.specs))
        if not self.specs:
            raise MalformedTableError("An EC block group needs at least one block spec")

    def get_ec_codewords_per_block(self) -> int:
        return self.ec_codewords_per_block

    def get_num_blocks(self) -> int:
        return sum(spec.count for spec in self.specs)

    def get_total_ec_codewords(self) -> int:
        return self.ec_codewords_per_block * self.get_num_blocks()

    def get_total_data_codewords(self) -> int:
        return sum(spec.size() for spec in self.specs)

    def get_total_codewords(self) -> int:
        return self.get_total_data_codewords() + self.get_total_ec_codewords()

    def get_specs(self) -> tuple[ECBlockSpec, ...]:
        return self.specs

    def iter_block_sizes(self) -> Iterator[int]:
        for spec in self.specs:
            for _ in range(spec.count):
                yield spec.data_codewords

    @classmethod
    def from_line(cls, line: str) -> tuple[int, ErrorCorrection, "ECBlockGroup"]:
        """Parse one table row.

        A row reads `<version>-<level> <total data> <ec per block> <count> <data> [<count> <data>]`,
        for example `5-Q 62 18 2 15 2 16`.
        """
        fields = line.split()
        if len(fields) not in (5, 7):
            raise MalformedTableError(f"Expected 5 or 7 columns in table row {line.strip()!r}, got {len(fields)}")

        version_ec, *numbers = fields
        version_str, _, ec_level_str = version_ec.partition("-")
        try:
            version = int(version_str)
            ec_level = ErrorCorrection.from_letter(ec_level_str)
            total_data_codewords, ec_codewords_per_block, *block_columns = [int(n) for n in numbers]
        except ValueError as e:
            raise MalformedTableError(f"Unable to parse table row {line.strip()!r}: {e}") from e

        specs = tuple(ECBlockSpec(count, data) for count, data in zip(block_columns[::2], block_columns[1::2]))
        group = cls(ec_codewords_per_block, specs)

        if group.get_total_data_codewords() != total_data_codewords:
            raise MalformedTableError(f"Table row {version_ec} declares {total_data_codewords} data codewords but its blocks hold {group.get_total_data_codewords()}")

        return version, ec_level, group

    def to_line(self, version: int, ec_level: ErrorCorrection) -> str:
        return f"{version}-{ec_level.letter} {self}"

    @override
    def __str__(self):
        columns = [self.get_total_data_codewords(), self.ec_codewords_per_block]
        for spec in self.specs:
            columns += [spec.count, spec.data_codewords]
        return " ".join(str(c) for c in columns)
