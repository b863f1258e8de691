from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

# typing only
type FloatArray = NDArray[np.floating]
type PathLike = Sequence[float] | NDArray[np.floating]

# Runtime types
FloatDType = np.float64  # runtime dtype only
