from energycalc.estimation import compute, load_request, load_settings
from energycalc.estimation.capabilities import recommended_method
from energycalc.estimation.errors import ValidationError
import logging

logging.basicConfig(level=logging.INFO)

# Load settings and request from YAML files
settings = load_settings("config/settings.yaml")
raw_inputs = load_request("config/request.yaml")
print("Configuration loaded successfully.")

raw_inputs.setdefault("method", recommended_method(raw_inputs["scenario"]).value)

try:
    result = compute(raw_inputs, settings)
except ValidationError as err:
    print(f"Request rejected ({err.code}): {err.message}")
else:
    print(f"Energy: {result.energy_kwh:.6f} kWh ({result.energy_wh:.3f} Wh)")
    print(f"Cost: {'—' if result.cost is None else f'{result.cost:.4f}'}")
    print(f"CO2: {result.co2_kg:.4f} kg")
    for formula in result.formula_trace:
        print(f"  {formula}")
