"""
Display formatting for PadCalc
Turns float results into strings that fit the display, and display strings back
into floats
"""
import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP

import config

# Wide enough to hold the exact expansion of any finite double
_EXACT = Context(prec=800, rounding=ROUND_HALF_UP)

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_display_string(num: float) -> str:
    """Shortest decimal string that reads back as ``num``.

    Integral values drop the fractional part, negative zero shows as "0",
    and exponential notation is only used below 1e-6 or from 1e21 upwards.
    """
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"
    if num == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(num)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent   # position of the decimal point relative to the digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        body = digits[0] + ("." + digits[1:] if k > 1 else "")
        body += f"e{'+' if e >= 0 else '-'}{abs(e)}"
    return ("-" if sign else "") + body


def to_fixed(num: float, places: int) -> str:
    """Fixed notation with exactly ``places`` fractional digits, half away from zero."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(num).quantize(quantum, context=_EXACT)
    return format(rounded, "f")


def to_exponential(num: float, fraction_digits: int) -> str:
    """Exponential notation like ``1.2345679e+13``, half away from zero."""
    exact = Decimal(num)
    exponent = exact.adjusted()
    quantum = Decimal(1).scaleb(-fraction_digits)
    mantissa = exact.scaleb(-exponent, context=_EXACT).quantize(quantum, context=_EXACT)
    if abs(mantissa) >= 10:
        # 9.99999995 rounds up into the next decade
        mantissa = (mantissa / 10).quantize(quantum, context=_EXACT)
        exponent += 1
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def format_result(num: float, max_digits: int = config.MAX_DIGITS) -> str:
    """Format an evaluation result so it fits the display.

    Short results are shown as-is. Results of magnitude ``10 ** max_digits``
    and above switch to exponential notation with ``max_digits - 6``
    fractional digits. Anything else is a long fraction and is rounded to
    the decimal places left over after the integer part and the point.
    """
    text = to_display_string(num)
    if len(text) <= max_digits:
        return text

    if abs(num) >= 10 ** max_digits:
        return to_exponential(num, max(0, max_digits - 6))

    integer_part_length = len(str(math.trunc(num)))
    available_decimal_places = max(0, max_digits - integer_part_length - 1)  # -1 for the point
    return to_fixed(num, available_decimal_places)


def parse_operand(text: str) -> float:
    """Read the leading number of a display string; NaN when there is none."""
    match = _NUMERIC_PREFIX.match(text)
    if match:
        return float(match.group())
    stripped = text.strip()
    if stripped in ("Infinity", "+Infinity"):
        return math.inf
    if stripped == "-Infinity":
        return -math.inf
    return math.nan
