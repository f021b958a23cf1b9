# core/utils.py
import numpy as np

# Single-precision limits used for unbounded intervals and the sentinel box.
FLOAT_MAX = np.finfo(np.float32).max
FLOAT_MIN = -FLOAT_MAX

def clamp(value, low, high):
    return max(low, min(value, high))
