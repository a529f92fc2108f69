"""Shared type aliases for the ncf_regression package."""

import numpy as np
import pandas as pd

# Array-like inputs accepted by the public API.
ArrayLike = np.ndarray | pd.DataFrame | pd.Series | list | tuple

# Scalars or arrays accepted by the moment functions.
FloatLike = float | int | np.ndarray | list | tuple
