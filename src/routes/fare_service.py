from typing import List, Optional, Tuple
from decimal import Decimal
import math

from src.routes.schemas import FareCalculationResponse

class FareCalculationService:
    """Distance-based fare calculation for the Delhi Metro tariff"""

    # (inclusive upper bound in km, fare); None closes the last band
    FARE_BANDS: List[Tuple[Optional[int], Decimal]] = [
        (2, Decimal("10")),
        (5, Decimal("20")),
        (12, Decimal("30")),
        (21, Decimal("40")),
        (32, Decimal("50")),
        (None, Decimal("60")),
    ]
    CURRENCY = "INR"

    def calculate_fare(self, distance_km: int) -> Decimal:
        """Fare for a whole-kilometre trip distance"""
        return self._find_band(distance_km)[2]

    def fare_breakdown(self, distance_km: int) -> FareCalculationResponse:
        """Fare together with the bounds of the band it was taken from"""
        lower, upper, fare = self._find_band(distance_km)
        return FareCalculationResponse(
            distance_km=distance_km,
            fare=fare,
            band_lower_km=lower,
            band_upper_km=upper,
            currency=self.CURRENCY
        )

    def _find_band(self, distance_km: int) -> Tuple[Optional[int], Optional[int], Decimal]:
        if not math.isfinite(distance_km):
            raise ValueError("Fare is undefined for an unreachable destination")
        if distance_km < 0:
            raise ValueError(f"Distance must be non-negative, got {distance_km}")

        lower = None
        for upper, fare in self.FARE_BANDS[:-1]:
            if distance_km <= upper:
                return lower, upper, fare
            lower = upper

        return lower, None, self.FARE_BANDS[-1][1]

def calculate_fare(distance_km: int) -> Decimal:
    """Shortcut for FareCalculationService().calculate_fare"""
    return FareCalculationService().calculate_fare(distance_km)
