"""
Baseline vs. optimized emission calculator.

Converts one set of activity data into per-category emissions, first as the
activities are (baseline) and then with the optimization levers applied:
route optimization (km reduction), car fleet electrification (EV share) and
better plane utilisation (load factor).
"""

from app.pydantic_models.emission import EmissionInput, EmissionResult
from app.services.calculators.emission_factors import EmissionFactors
from app.utils.constants import KG_PER_TON


def _percent(value: float) -> float:
    return value / 100


class EmissionCalculator:
    """
    Pure calculator: no I/O, same input always gives the same result.

    All sub-totals are returned in tons CO2.
    """

    def __init__(self, factors: EmissionFactors | None = None):
        self.factors = factors or EmissionFactors()

    def calculate(self, emission_input: EmissionInput) -> EmissionResult:
        """
        Calculate baseline and optimized emissions.

        Formulas (kg CO2, converted to tons at the end):
            baseline X   = quantity X * factor X
            optimized cars
                = car_km * (1 - km_reduction) *
                  ((1 - ev_share) * cars + ev_share * cars * ev_factor)
            optimized trucks = truck_km * (1 - km_reduction) * trucks
            optimized planes = plane_hours * planes * plane_load_factor
            forklifts, heating and lighting/cooling/IT are not optimized

        Subcontractor emissions are reported in tons already and pass through
        unchanged on both sides.

        Example:
            >>> calculator = EmissionCalculator()
            >>> result = calculator.calculate(emission_input)
            >>> print(f"Saved: {result.baseline_total - result.optimized_total} t")
        """
        f = self.factors
        data = emission_input

        ev_share = _percent(data.ev_share)
        km_kept = 1 - _percent(data.km_reduction)
        load_factor = _percent(data.plane_load_factor)

        baseline_kg = {
            "cars": data.car_km * f.cars,
            "trucks": data.truck_km * f.trucks,
            "planes": data.plane_hours * f.planes,
            "forklifts": data.forklift_hours * f.forklifts,
            "heating": data.heating_kwh * f.heating,
            "lighting_cooling_it": data.lighting_cooling_it_kwh * f.lighting_cooling_it,
        }

        optimized_kg = {
            "cars": data.car_km
            * km_kept
            * ((1 - ev_share) * f.cars + ev_share * f.cars * f.ev_factor),
            "trucks": data.truck_km * km_kept * f.trucks,
            "planes": data.plane_hours * f.planes * load_factor,
            "forklifts": baseline_kg["forklifts"],
            "heating": baseline_kg["heating"],
            "lighting_cooling_it": baseline_kg["lighting_cooling_it"],
        }

        baseline = {name: kg / KG_PER_TON for name, kg in baseline_kg.items()}
        optimized = {name: kg / KG_PER_TON for name, kg in optimized_kg.items()}
        baseline["subcontractors"] = data.subcontractors_tons
        optimized["subcontractors"] = data.subcontractors_tons

        return EmissionResult(
            **{f"baseline_{name}": tons for name, tons in baseline.items()},
            baseline_total=sum(baseline.values()),
            **{f"optimized_{name}": tons for name, tons in optimized.items()},
            optimized_total=sum(optimized.values()),
        )
