from enum import IntEnum


# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=61
class ErrorCorrection(IntEnum):
    # Values are the format information bits, declared in protection order
    LOW = 0b01
    MEDIUM = 0b00
    QUARTILE = 0b11
    HIGH = 0b10

    @property
    def ordinal(self) -> int:
        return list(ErrorCorrection).index(self)

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_letter(cls, letter: str) -> "ErrorCorrection":
        for level in cls:
            if level.letter == letter.upper():
                return level
        raise ValueError(f"Unknown error correction level {letter!r}. Expected one of L, M, Q, H")
