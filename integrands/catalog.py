from typing import Dict, List
from .base import Integrand
from .implementations import (
    QuarterDisk, FullDisk, Triangle,
    QuarterDiskRamp, FullDiskRamp, TriangleRamp,
    QuarterGaussian, FullGaussian, Bilinear, Biquadratic, SinXY, SinInvR,
    StepX, RampX, LinearY, GaussianX, SinY, Sin2X,
)

class UnknownFunctionError(KeyError):
    """Raised when an integrand name is not in the catalog."""
    
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name
    
    def __str__(self) -> str:
        return f"Unknown function: '{self.name}'"

# Ordered as in the printed usage: discontinuous, piece-wise linear, smooth, then 1D
INTEGRANDS: Dict[str, Integrand] = {
    integrand.name: integrand
    for integrand in (
        QuarterDisk(), FullDisk(), Triangle(),
        QuarterDiskRamp(), FullDiskRamp(), TriangleRamp(),
        QuarterGaussian(), FullGaussian(), Bilinear(), Biquadratic(), SinXY(), SinInvR(),
        StepX(), RampX(), LinearY(), GaussianX(), SinY(), Sin2X(),
    )
}

def available_functions() -> List[str]:
    """Names of all known integrands, in catalog order."""
    return list(INTEGRANDS)

def get_integrand(name: str) -> Integrand:
    """Look up an integrand by exact (case-sensitive) name.
    
    Raises:
        UnknownFunctionError: if the name is not in the catalog
    """
    try:
        return INTEGRANDS[name]
    except KeyError:
        raise UnknownFunctionError(name) from None
