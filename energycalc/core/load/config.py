from dataclasses import dataclass
from typing import Literal, Union


def _check_coefficients(base: float, amplitude: float) -> None:
    if not (0.0 <= base <= 1.0):
        raise ValueError("Load base must be between 0 and 1.")
    if not (0.0 <= amplitude <= 1.0):
        raise ValueError("Load amplitude must be between 0 and 1.")


@dataclass(frozen=True, slots=True, kw_only=True)
class SineLoadConfig:
    """Half-wave sine load, shared by the normal and savings scenarios."""

    base: float = 0.5
    amplitude: float = 0.3

    type: Literal["sine"] = "sine"

    def __post_init__(self):
        _check_coefficients(self.base, self.amplitude)


@dataclass(frozen=True, slots=True, kw_only=True)
class GaussianPeakLoadConfig:
    """Gaussian bump centred on ``center`` for the peak scenario."""

    steepness: float = 1.0
    center: float = 0.0
    base: float = 0.0
    amplitude: float = 1.0
    # "offset": base + amplitude * exp(...), "bare": exp(...) alone
    shape: Literal["offset", "bare"] = "offset"

    type: Literal["gaussian_peak"] = "gaussian_peak"

    def __post_init__(self):
        _check_coefficients(self.base, self.amplitude)
        if self.steepness <= 0:
            raise ValueError("Steepness k must be positive.")
        if self.shape not in ("offset", "bare"):
            raise ValueError(f"Unknown peak shape: {self.shape}")


LoadConfig = Union[SineLoadConfig, GaussianPeakLoadConfig]
