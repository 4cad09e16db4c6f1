from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

from mortgage_lite.domain.mortgage import HUNDRED, ZERO

_ONE = Decimal("1")
_MONTHS_PER_YEAR = Decimal("12")

# Extra digits carried while evaluating 1 - (1+r)^-n, which cancels to about r*n
_GUARD_DIGITS = 40


def loan_amount(purchase_price: Decimal | int | str, down_payment: Decimal | int | str) -> Decimal:
    """Financed amount, clamped at zero when the down payment covers the price."""
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return max(Decimal(purchase_price) - Decimal(down_payment), ZERO)


def monthly_principal_and_interest(
    purchase_price: Decimal | int | str,
    down_payment: Decimal | int | str,
    annual_rate_percent: Decimal | int | str,
    term_years: int,
) -> Decimal:
    """
    Level monthly payment that fully amortizes a fixed-rate loan.

    Uses the standard annuity formula, in its discount form:
    payment = L * (r*(1+r)^n) / ((1+r)^n - 1) = L * r / (1 - (1+r)^-n)

    Where:
    - L = purchase_price - down_payment, clamped at 0
    - r = annual_rate_percent / 100 / 12
    - n = term_years * 12

    A zero rate amortizes in a straight line (L / n). So does any rate small
    enough that r*n is below the current precision, where the annuity payment
    and L / n agree to every returned digit.

    The formula runs with guard digits and an unbounded exponent range, so
    tiny and huge inputs neither divide by zero nor overflow. The result is
    rounded to the caller's precision only; cents are left to callers.
    """
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        precision = ctx.prec

        principal = loan_amount(purchase_price, down_payment)
        if principal == 0:
            return ZERO

        monthly_rate = Decimal(annual_rate_percent) / HUNDRED / _MONTHS_PER_YEAR
        installments = Decimal(term_years) * _MONTHS_PER_YEAR

        if monthly_rate * installments < _ONE.scaleb(-precision):
            return principal / installments

        ctx.prec = precision + _GUARD_DIGITS
        discount = (_ONE + monthly_rate) ** -installments
        payment = principal * monthly_rate / (_ONE - discount)

        ctx.prec = precision
        return +payment
