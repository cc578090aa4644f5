"""
Rough Income Tax Estimator

A two-band progressive schedule: nothing up to the personal allowance,
the basic rate up to the higher-band threshold, the higher rate above it.

CRITICAL: This is an illustration, not a tax calculation. There is no
additional-rate band, no allowance taper and no national insurance.
"""


PERSONAL_ALLOWANCE = 12570.0
HIGHER_BAND_THRESHOLD = 50270.0
BASIC_RATE = 0.20
HIGHER_RATE = 0.40

# A four-week period scaled to a 52-week year
DEFAULT_PERIODS_PER_YEAR = 52.0 / 4.0


def estimate_tax_yearly(gross_annual: float) -> float:
    """
    Estimate yearly tax on a gross annual income.

    Args:
        gross_annual: Gross income for the whole year

    Returns:
        Estimated tax; 0 at or below the personal allowance
    """
    if gross_annual <= PERSONAL_ALLOWANCE:
        return 0.0

    taxable = gross_annual - PERSONAL_ALLOWANCE
    basic_band = max(0.0, min(taxable, HIGHER_BAND_THRESHOLD - PERSONAL_ALLOWANCE))
    higher_band = max(0.0, taxable - basic_band)
    return basic_band * BASIC_RATE + higher_band * HIGHER_RATE


def estimate_period_tax(
    gross_period: float,
    periods_per_year: float = DEFAULT_PERIODS_PER_YEAR,
) -> float:
    """
    Estimate tax on one period's gross by scaling it to a year and back.

    Raises:
        ValueError: If periods_per_year is not positive
    """
    if periods_per_year <= 0:
        raise ValueError(f"periods_per_year must be positive, got {periods_per_year}")
    return estimate_tax_yearly(gross_period * periods_per_year) / periods_per_year
