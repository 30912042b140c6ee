#!/usr/bin/env python3
"""
Sharpen Kernel Synthesis
Builds the normalized 3x3 unsharp-mask kernel used by the classical pipeline
"""

import numpy as np

IDENTITY_KERNEL = ((0.0, 0.0, 0.0),
                   (0.0, 1.0, 0.0),
                   (0.0, 0.0, 0.0))


def synthesize(intensity: float) -> np.ndarray:
    """Create a 3x3 sharpen kernel whose weights sum to 1.0

    Args:
        intensity: Sharpen strength; values <= 0 yield the identity kernel

    Returns:
        Read-only float64 array of shape (3, 3)
    """
    if intensity <= 0:
        kernel = np.array(IDENTITY_KERNEL, dtype=np.float64)
    else:
        neighbor_weight = -float(intensity)
        center_weight = 1.0 - 8.0 * neighbor_weight
        kernel = np.full((3, 3), neighbor_weight, dtype=np.float64)
        kernel[1, 1] = center_weight

    kernel.flags.writeable = False
    return kernel
