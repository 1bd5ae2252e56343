from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Shortest round-trip decimal text, laid out like ``Number#toString``.

    Integral values carry no ``.0``, plain notation is used for decimal
    exponents between -7 and 21, and ``1e+21`` / ``1.5e-7`` otherwise.
    """
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0.0 else "-Infinity"
    if v == 0.0:
        return "0"

    sign, digits_t, exp = Decimal(repr(v)).normalize().as_tuple()
    digits = "".join(str(d) for d in digits_t)
    k = len(digits)
    # value == 0.d1d2..dk * 10**n
    n = k + int(exp)
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits

    e = n - 1
    e_txt = f"e+{e}" if e >= 0 else f"e-{-e}"
    if k == 1:
        return prefix + digits + e_txt
    return prefix + digits[0] + "." + digits[1:] + e_txt
