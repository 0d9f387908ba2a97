"""Static constants used in the fixedrational package

    Signed integer widths (inclusive ranges)

        INT8_MIN, INT8_MAX = -128, 127

        INT16_MIN, INT16_MAX = -32768, 32767

        INT32_MIN, INT32_MAX = -2**31, 2**31 - 1

        INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

    Unsigned integer widths (inclusive ranges, minimum is 0)

        UINT8_MAX = 255

        UINT16_MAX = 65535

        UINT32_MAX = 2**32 - 1

        UINT64_MAX = 2**64 - 1

    Representable rational range

        NUMERATOR_MIN = INT64_MIN + 1 # INT64_MIN cannot be negated

        NUMERATOR_MAX = INT64_MAX

    Limb decomposition

        LIMB_BITS = 32

        LIMB_MASK = 0xFFFFFFFF
"""
import numpy as np

# Signed integer widths
INT8_MIN = int(np.iinfo(np.int8).min)
INT8_MAX = int(np.iinfo(np.int8).max)
INT16_MIN = int(np.iinfo(np.int16).min)
INT16_MAX = int(np.iinfo(np.int16).max)
INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)
INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

# Unsigned integer widths
UINT8_MAX = int(np.iinfo(np.uint8).max)
UINT16_MAX = int(np.iinfo(np.uint16).max)
UINT32_MAX = int(np.iinfo(np.uint32).max)
UINT64_MAX = int(np.iinfo(np.uint64).max)

# Representable rational range
NUMERATOR_MIN = INT64_MIN + 1
NUMERATOR_MAX = INT64_MAX

# Limb decomposition
LIMB_BITS = 32
LIMB_MASK = (1 << LIMB_BITS) - 1
