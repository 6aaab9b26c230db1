"""Order code generation.

Codes look like ``EC-48213907``: a fixed prefix and eight random digits.
"""

import random
from collections.abc import Callable

ORDER_CODE_PREFIX = "EC-"
_LOWEST = 10_000_000
_HIGHEST = 99_999_999


def generate_order_code(exists: Callable[[str], bool], rng: random.Random | None = None) -> str:
    """Draw codes until ``exists`` reports one as unused."""
    rng = rng or random
    while True:
        code = f"{ORDER_CODE_PREFIX}{rng.randint(_LOWEST, _HIGHEST)}"
        if not exists(code):
            return code
