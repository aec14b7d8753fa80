"""Wire format constants.

All multi-byte values are big-endian.
"""

# Inverted boolean convention: true is the zero byte.
BOOL_TRUE = 0x00
BOOL_FALSE = 0xFF

BYTE_ORDER = "big"

LENGTH_PREFIX_SIZE = 4  # u32 byte count for text, element count for sequences
MAX_LENGTH = 0xFFFFFFFF

# Intermediate buffer size used when reading text payloads.
READ_CHUNK_SIZE = 128
