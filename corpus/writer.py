from typing import Optional
import numpy as np

def format_corpus(points: np.ndarray, description: Optional[str] = None) -> str:
    """Render sequences of 2D points in the corpus text format.
    
    Args:
        points: Array of shape (n_sequences, n_samples, 2)
        description: First header comment line; a default naming the shape is used if None
        
    Returns:
        Corpus text with a two line header and a separator before every sequence
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 3 or points.shape[2] != 2:
        raise ValueError(f"points must have shape (n_sequences, n_samples, 2), got {points.shape}")
    n_sequences, n_samples, _ = points.shape
    
    if description is None:
        description = f"Table of {n_sequences} sequences of {n_samples} 2D samples"
    lines = [f"// {description}", "// Each line holds one x y sample pair."]
    for t in range(n_sequences):
        lines.append(f"// Sequence {t}:")
        lines.extend(f"{x:.12f} {y:.12f}" for x, y in points[t])
    return "\n".join(lines) + "\n"

def write_corpus(path: str, points: np.ndarray, description: Optional[str] = None):
    """Write sequences of 2D points to a corpus file readable by CorpusReader."""
    with open(path, "w") as f:
        f.write(format_corpus(points, description))
