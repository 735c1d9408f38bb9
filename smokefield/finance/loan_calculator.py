"""
Smokefield - Loan Calculator
Fixed-rate amortization totals and their display formatting
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

from smokefield.core.constants import (
    LOAN_MIN_AMOUNT, LOAN_MAX_AMOUNT, LOAN_ANNUAL_RATE, LOAN_TERMS,
    CURRENCY_SUFFIX, MONTHLY_SUFFIX, THOUSANDS_SEPARATOR
)


@dataclass(frozen=True)
class LoanQuote:
    principal: float
    months: int
    monthly_rate: float
    payment: float
    total_payment: float
    total_interest: float


def is_allowed_term(months: int, terms: Tuple[int, ...] = LOAN_TERMS) -> bool:
    return months in terms


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def parse_amount(text) -> Optional[float]:
    """Entry text to a number, or None if it is empty or not numeric."""
    if text is None:
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        cleaned = str(text).strip().replace(" ", "").replace(THOUSANDS_SEPARATOR, "")
        if not cleaned:
            return None
        try:
            value = float(cleaned.replace(",", "."))
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def calculate_loan(principal, months: int,
                   annual_rate: float = LOAN_ANNUAL_RATE,
                   min_principal: float = LOAN_MIN_AMOUNT,
                   max_principal: float = LOAN_MAX_AMOUNT) -> Optional[LoanQuote]:
    """
    Amortize principal over months at a fixed annual rate.

    Returns None (no result to show) when the principal is missing,
    non-numeric, zero or below min_principal. Amounts above max_principal
    are clamped to it.
    """
    amount = parse_amount(principal)
    if not amount or amount < min_principal:
        return None
    if months <= 0:
        raise ValueError(f"Loan term must be positive, got {months}")

    amount = min(amount, max_principal)
    monthly_rate = annual_rate / 12

    if monthly_rate == 0:
        payment = amount / months
    else:
        growth = (1 + monthly_rate) ** months
        payment = amount * monthly_rate * growth / (growth - 1)

    total_payment = payment * months
    return LoanQuote(
        principal=amount,
        months=months,
        monthly_rate=monthly_rate,
        payment=payment,
        total_payment=total_payment,
        total_interest=total_payment - amount,
    )


def format_amount(value: float, separator: str = THOUSANDS_SEPARATOR) -> str:
    """
    Whole units with grouped thousands in the fixed ro-RO style, halves
    rounded away from zero: 10706.4 -> '10.706', 2.5 -> '3'.
    """
    whole = int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{whole:,d}".replace(",", separator)


def format_quote(quote: LoanQuote) -> dict:
    """The four strings shown in the result box."""
    return {
        "monthly_payment": f"{format_amount(quote.payment)} {MONTHLY_SUFFIX}",
        "total_principal": f"{format_amount(quote.principal)} {CURRENCY_SUFFIX}",
        "total_interest": f"{format_amount(quote.total_interest)} {CURRENCY_SUFFIX}",
        "total_payment": f"{format_amount(quote.total_payment)} {CURRENCY_SUFFIX}",
    }
