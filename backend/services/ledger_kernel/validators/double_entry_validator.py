"""
Double-Entry Bookkeeping Validator
==================================

Validates that the lines of an entry follow double-entry accounting rules
before it is committed.
"""
from decimal import Decimal
from typing import List, Tuple

from ..models.transaction import Transaction
from ..config import settings


class DoubleEntryValidator:
    """
    Validator for double-entry bookkeeping rules.

    Rules enforced:
    1. Every journal must have at least 2 lines
    2. Sum of debits must equal sum of credits
    3. Each line must have either debit or credit (not both)
    4. Amounts must be non-negative
    """

    def __init__(self, tolerance: float = None, decimal_places: int = None):
        """
        Initialize validator.

        Args:
            tolerance: Acceptable difference between totals
                      (default from settings)
            decimal_places: Precision totals are rounded to before comparing
        """
        if tolerance is None:
            tolerance = settings.ledger.BALANCE_TOLERANCE
        if decimal_places is None:
            decimal_places = settings.ledger.DECIMAL_PLACES
        self.tolerance = Decimal(str(tolerance))
        self.decimal_places = decimal_places

    def validate_lines(
        self,
        lines: List[Transaction]
    ) -> Tuple[bool, List[str]]:
        """
        Validate a list of pending transactions.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        # Rule 1: At least 2 lines
        if len(lines) < 2:
            errors.append(
                "Journal must have at least 2 lines for double-entry bookkeeping"
            )

        # Rule 2: Each line must have either debit or credit
        for idx, line in enumerate(lines, 1):
            if line.debit < 0:
                errors.append(f"Line {idx}: Debit cannot be negative")
            if line.credit < 0:
                errors.append(f"Line {idx}: Credit cannot be negative")
            if line.debit > 0 and line.credit > 0:
                errors.append(
                    f"Line {idx}: A line cannot have both debit and credit"
                )
            if line.debit == 0 and line.credit == 0:
                errors.append(
                    f"Line {idx}: A line must have either debit or credit"
                )

        # Rule 3: Debits must equal credits
        if not self.is_balanced(lines):
            total_debit, total_credit, difference = self.calculate_totals(lines)
            errors.append(
                f"Journal is not balanced: "
                f"Total Debit={total_debit}, Total Credit={total_credit}, "
                f"Difference={difference}"
            )

        return len(errors) == 0, errors

    def calculate_totals(
        self,
        lines: List[Transaction]
    ) -> Tuple[Decimal, Decimal, Decimal]:
        """
        Calculate totals from lines.

        Returns:
            Tuple of (total_debit, total_credit, difference)
        """
        total_debit = sum((line.debit for line in lines), Decimal("0"))
        total_credit = sum((line.credit for line in lines), Decimal("0"))
        difference = abs(round(total_debit - total_credit, self.decimal_places))

        return total_debit, total_credit, difference

    def is_balanced(self, lines: List[Transaction]) -> bool:
        _, _, difference = self.calculate_totals(lines)
        return difference <= self.tolerance
