"""Numeric constants shared by the vecmath types."""

from __future__ import annotations

import numpy as np

DTYPE = np.float32
NORMALIZE_EPSILON = DTYPE(1e-5)

INDEX_ERROR_MESSAGE = "Index out of bounds"
