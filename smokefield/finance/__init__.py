"""
Smokefield - Loan Calculator
"""

from smokefield.finance.loan_calculator import LoanQuote, calculate_loan, format_quote

__all__ = ["LoanQuote", "calculate_loan", "format_quote"]
