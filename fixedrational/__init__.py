"""fixedrational: exact rational numbers over signed 64-bit integers"""

import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .names import *
from .checked import checked_add, checked_sub, checked_mul, checked_neg, gcd
from .multiplication_comparer import is_less, compare_products, product_limbs
from .rational_number import RationalNumber
