# https://www.arscreatio.com/repositorio/images/n_23/SC031-N-1915-18004Text.pdf#page=13
MIN_VERSION: int = 1
MAX_VERSION: int = 40

# A version V symbol is (17 + 4V) modules on each side
DIMENSION_BASE: int = 17
DIMENSION_STEP: int = 4

BITS_PER_CODEWORD: int = 8
