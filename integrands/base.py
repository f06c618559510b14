from abc import ABC, abstractmethod
from typing import Union
import numpy as np

ArrayLike = Union[float, np.ndarray]

class Integrand(ABC):
    """Base class for test functions with a known integral over the unit square."""
    
    name: str = ""
    reference_value: float = 0.0
    
    @abstractmethod
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        """Evaluate the function element-wise at points (x, y).
        
        Args:
            x: Array of x coordinates
            y: Array of y coordinates, same shape as x
            
        Returns:
            Array of function values with the shape of x
        """
        pass
    
    def __call__(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        values = self.evaluate(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        if np.ndim(values) == 0:
            return float(values)
        return values
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, reference_value={self.reference_value!r})"

class AxisIntegrand(Integrand):
    """Base class for 1D functions embedded in the unit square.
    
    Only one coordinate of each sample is read; the other is ignored.
    """
    
    axis: str = "x"
    
    @abstractmethod
    def evaluate_1d(self, t: np.ndarray) -> np.ndarray:
        """Evaluate the 1D function at coordinate values t."""
        pass
    
    def evaluate(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        if self.axis == "x":
            return self.evaluate_1d(x)
        if self.axis == "y":
            return self.evaluate_1d(y)
        raise ValueError(f"Unknown axis {self.axis!r}, expected 'x' or 'y'")
