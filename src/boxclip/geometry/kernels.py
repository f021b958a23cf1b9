# geometry/kernels.py

import logging
import math
from typing import Optional, Tuple

import numpy as np
from numba import njit

from boxclip.core.utils import FLOAT_MAX
from boxclip.core.vector import Vector
from boxclip.geometry.clip import ClipHit, Side, PARALLEL_EPSILON

logger = logging.getLogger(__name__)

@njit
def _set_normal(out, row, side, diagonal, directions, length):
    dim = out.shape[1]
    for i in range(dim):
        out[row, i] = 0.0
    if diagonal:
        if length > 0.0:
            for i in range(dim):
                out[row, i] = -directions[row, i] / length
    elif side != 0:
        out[row, abs(side) - 1] = 1.0 if side > 0 else -1.0

@njit
def _clip_lines_kernel(mins, maxs, origins, directions, epsilon, max_value,
                       hit, t_near, t_far, near_normal, far_normal,
                       near_side, far_side, near_diagonal, far_diagonal):
    """
    Slab clipping of every row of origins/directions against one box.
    Side codes: magnitude axis + 1, negative for the min face.
    """
    n = origins.shape[0]
    dim = origins.shape[1]
    for row in range(n):
        tmax = max_value
        tmin = -max_value
        n_side = 0
        f_side = 0
        n_diag = False
        f_diag = False
        ok = True

        for i in range(dim):
            d = directions[row, i]
            o = origins[row, i]
            if abs(d) < epsilon:
                if o < mins[i] or o > maxs[i]:
                    ok = False
                    break
                continue

            denom = np.float32(1.0) / d
            tn = (mins[i] - o) * denom
            tf = (maxs[i] - o) * denom
            flip = tn > tf
            if flip:
                tn, tf = tf, tn

            if tn > tmin:
                tmin = tn
                n_side = (i + 1) if flip else -(i + 1)
                n_diag = False
            elif tn == tmin:
                n_diag = True

            if tf < tmax:
                tmax = tf
                f_side = -(i + 1) if flip else (i + 1)
                f_diag = False
            elif tf == tmax:
                f_diag = True

            if tmax < 0.0 or tmin > tmax:
                ok = False
                break

        hit[row] = ok
        if not ok:
            t_near[row] = np.nan
            t_far[row] = np.nan
            near_side[row] = 0
            far_side[row] = 0
            near_diagonal[row] = False
            far_diagonal[row] = False
            for i in range(dim):
                near_normal[row, i] = 0.0
                far_normal[row, i] = 0.0
            continue

        length = 0.0
        for i in range(dim):
            length += directions[row, i] * directions[row, i]
        length = math.sqrt(length)

        t_near[row] = tmin
        t_far[row] = tmax
        near_side[row] = n_side
        far_side[row] = f_side
        near_diagonal[row] = n_diag
        far_diagonal[row] = f_diag
        _set_normal(near_normal, row, n_side, n_diag, directions, length)
        _set_normal(far_normal, row, f_side, f_diag, directions, length)


class ClipBatch:
    """
    Per-line clip results as parallel arrays. Rows that miss the box have
    hit == False, NaN parameters and zero normals.
    """
    def __init__(self, hit, t_near, t_far, near_normal, far_normal,
                 near_side, far_side, near_diagonal, far_diagonal):
        self.hit = hit
        self.t_near = t_near
        self.t_far = t_far
        self.near_normal = near_normal
        self.far_normal = far_normal
        self.near_side = near_side
        self.far_side = far_side
        self.near_diagonal = near_diagonal
        self.far_diagonal = far_diagonal

    def __len__(self) -> int:
        return len(self.hit)

    def row(self, index: int, vector_type=Vector) -> Optional[Tuple[ClipHit, ClipHit]]:
        """
        Returns row index in the (near, far) form of clip_aabb_line.
        """
        if not self.hit[index]:
            return None
        near = ClipHit(self.t_near[index],
                       vector_type.from_array(self.near_normal[index]),
                       Side.from_signed(int(self.near_side[index])),
                       bool(self.near_diagonal[index]))
        far = ClipHit(self.t_far[index],
                      vector_type.from_array(self.far_normal[index]),
                      Side.from_signed(int(self.far_side[index])),
                      bool(self.far_diagonal[index]))
        return near, far


def clip_aabb_lines(aabb, origins, directions, epsilon: float = PARALLEL_EPSILON) -> ClipBatch:
    """
    Clips many lines against one box at once.

    origins and directions are (n, dim) arrays, dim matching the box. The
    computation is done in float32 like clip_aabb_line and gives the same
    hits, sides and diagonal flags.
    """
    origins = np.ascontiguousarray(origins, dtype=np.float32)
    directions = np.ascontiguousarray(directions, dtype=np.float32)
    if origins.ndim != 2 or origins.shape != directions.shape:
        raise ValueError(
            f"origins and directions must be (n, dim) arrays of the same shape, "
            f"got {origins.shape} and {directions.shape}")
    n, dim = origins.shape
    if dim != aabb.dimension:
        raise ValueError(f"Lines have dimension {dim}, box has {aabb.dimension}")

    logger.debug("Clipping %d lines of dimension %d against %r", n, dim, aabb)

    hit = np.zeros(n, dtype=np.bool_)
    t_near = np.empty(n, dtype=np.float32)
    t_far = np.empty(n, dtype=np.float32)
    near_normal = np.empty((n, dim), dtype=np.float32)
    far_normal = np.empty((n, dim), dtype=np.float32)
    near_side = np.zeros(n, dtype=np.int64)
    far_side = np.zeros(n, dtype=np.int64)
    near_diagonal = np.zeros(n, dtype=np.bool_)
    far_diagonal = np.zeros(n, dtype=np.bool_)

    mins = np.array(aabb.mins.data, dtype=np.float32)
    maxs = np.array(aabb.maxs.data, dtype=np.float32)
    _clip_lines_kernel(mins, maxs, origins, directions, np.float32(epsilon), np.float32(FLOAT_MAX),
                       hit, t_near, t_far, near_normal, far_normal,
                       near_side, far_side, near_diagonal, far_diagonal)

    batch = ClipBatch(hit, t_near, t_far, near_normal, far_normal,
                      near_side, far_side, near_diagonal, far_diagonal)
    logger.debug("%d of %d lines hit the box", int(hit.sum()), n)
    return batch
