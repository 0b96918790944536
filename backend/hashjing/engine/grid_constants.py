"""Fixed dimensions of the mandala grid.

Every loop bound in the engine derives from these. Changing any of them
changes the artwork and the traits of every existing seed.
"""

# 256-bit seed
SEED_BYTES = 32
SEED_BITS = SEED_BYTES * 8  # = 256

# 4 concentric rings × 64 sectors; each seed byte fills 2 sectors.
RINGS = 4
SECTORS = 64
BITS_PER_NIBBLE = RINGS

# Evenness is measured against a perfect half split of the seed bits.
HALF_BITS = SEED_BITS // 2  # = 128
EVENNESS_SCALE = 10

# Rotation step per sector in millidegrees: 360° / 64 = 5.625°.
MILLIDEGREES_PER_SECTOR = 360_000 // SECTORS  # = 5625

# Crown palindromes are at least 2 sectors long.
MIN_CROWN_LENGTH = 2

# Seed bytes rendered per hex text line (16 nibbles).
HEX_LINE_BYTES = 8
HEX_LINES = SEED_BYTES // HEX_LINE_BYTES  # = 4
