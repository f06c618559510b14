import numpy as np
from scipy.special import erf
from .base import Integrand, AxisIntegrand

def _radial_ramp(r: np.ndarray, inner: float, outer: float) -> np.ndarray:
    """1 inside `inner`, 0 outside `outer`, linear fall-off in between."""
    return np.clip(1.0 - (r - inner) / (outer - inner), 0.0, 1.0)

# Discontinuous 2D functions

class QuarterDisk(Integrand):
    """Indicator of the quarter-disk centered at (0,0) with radius sqrt(2/pi).
    
    The quarter-disk has area 0.5.
    """
    name = "quarterdisk"
    reference_value = 0.5
    radius2 = 2.0 / np.pi
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.where(x * x + y * y < self.radius2, 1.0, 0.0)

class FullDisk(Integrand):
    """Indicator of the disk centered at (0.5,0.5) with radius 1/sqrt(2 pi).
    
    The disk has area 0.5.
    """
    name = "fulldisk"
    reference_value = 0.5
    radius2 = 1.0 / (2.0 * np.pi)
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        dx = x - 0.5
        dy = y - 0.5
        return np.where(dx * dx + dy * dy < self.radius2, 1.0, 0.0)

class Triangle(Integrand):
    """Indicator of the lower-left triangle x + y < 1."""
    name = "triangle"
    reference_value = 0.5
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.where(x + y < 1.0, 1.0, 0.0)

# Piece-wise linear 2D functions

class QuarterDiskRamp(Integrand):
    """Quarter-disk centered at (0,0) with a linear fall-off between radius 0.7 and 0.9."""
    name = "quarterdiskramp"
    reference_value = 0.505273
    inner_radius = 0.7
    outer_radius = 0.9
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        r = np.sqrt(x * x + y * y)
        return _radial_ramp(r, self.inner_radius, self.outer_radius)

class FullDiskRamp(Integrand):
    """Disk centered at (0.5,0.5) with a linear fall-off between radius 0.35 and 0.45."""
    name = "fulldiskramp"
    reference_value = 0.505273
    inner_radius = 0.35
    outer_radius = 0.45
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        r = np.sqrt((x - 0.5) ** 2 + (y - 0.5) ** 2)
        return _radial_ramp(r, self.inner_radius, self.outer_radius)

class TriangleRamp(Integrand):
    """Soft version of the triangle: 5(y - x) clamped to [-0.5, 0.5], shifted up by 0.5."""
    name = "triangleramp"
    reference_value = 0.5
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.clip(5.0 * (y - x), -0.5, 0.5) + 0.5

# Smooth 2D functions

class QuarterGaussian(Integrand):
    """Gaussian exp(-x^2 - y^2) centered at the origin."""
    name = "quartergaussian"
    reference_value = float(np.pi / 4.0 * erf(1.0) ** 2)
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.exp(-x * x - y * y)

class FullGaussian(Integrand):
    """Gaussian exp(-(x-0.5)^2 - (y-0.5)^2) centered in the unit square."""
    name = "fullgaussian"
    reference_value = float(np.pi * erf(0.5) ** 2)
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        dx = x - 0.5
        dy = y - 0.5
        return np.exp(-dx * dx - dy * dy)

class Bilinear(Integrand):
    name = "bilinear"
    reference_value = 0.25
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return x * y

class Biquadratic(Integrand):
    name = "biquadratic"
    reference_value = 1.0 / 9.0
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return x * x * y * y

class SinXY(Integrand):
    name = "sinxy"
    reference_value = 0.0
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.sin(np.pi * (x + y))

class SinInvR(Integrand):
    """sin(pi/r). Mostly smooth but with very large derivatives near (0,0).
    
    Defined as 1 where pi/r is not finite, which includes r = 0.
    """
    name = "sininvr"
    reference_value = -0.220242
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        r = np.sqrt(x * x + y * y)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            inv_r = np.pi / r
            values = np.sin(inv_r)
        return np.where(np.isfinite(inv_r), values, 1.0)

# 1D functions embedded in the unit square

class StepX(AxisIntegrand):
    """Step function: 1 for x < 1/pi, 0 otherwise."""
    name = "stepx"
    reference_value = 1.0 / np.pi
    axis = "x"
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.where(t < 1.0 / np.pi, 1.0, 0.0)

class RampX(AxisIntegrand):
    """Ramp: 1 up to x = 0.2, linear down to 0 at x = 0.4."""
    name = "rampx"
    reference_value = 0.3
    axis = "x"
    left = 0.2
    right = 0.4
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.clip(1.0 - (t - self.left) / (self.right - self.left), 0.0, 1.0)

class LinearY(AxisIntegrand):
    name = "lineary"
    reference_value = 0.5
    axis = "y"
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.array(t, dtype=np.float64, copy=True)

class GaussianX(AxisIntegrand):
    """1D Gaussian exp(-x^2)."""
    name = "gaussianx"
    reference_value = float(np.sqrt(np.pi) / 2.0 * erf(1.0))
    axis = "x"
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.exp(-t * t)

class SinY(AxisIntegrand):
    name = "siny"
    reference_value = 2.0 / np.pi
    axis = "y"
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.sin(np.pi * t)

class Sin2X(AxisIntegrand):
    name = "sin2x"
    reference_value = 0.0
    axis = "x"
    
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        return np.sin(2.0 * np.pi * t)
