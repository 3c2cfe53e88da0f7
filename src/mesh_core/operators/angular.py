"""
Anticlockwise Ordering About an Axis
====================================

Orders directions by the angle they sweep, right-handedly, about an axis.

CONSTRUCTION:
    n = axis / ‖axis‖
    u = baseline projected onto the plane ⊥ n, normalized   (zero direction)
    w = n × u
    angle(d) = atan2(d·w, d·u) mapped into [0, 2π)

    (u, w, n) is a right-handed frame, so increasing angle is anticlockwise
    seen from the tip of the axis.

ZERO DIRECTION:
    The baseline defaults to -axis. Its projection onto the plane is the zero
    vector, so the frame falls back to u = n × x̂ (n × ŷ when n is close to
    x̂). Any baseline whose projection vanishes takes the same fallback.

Directions collinear with the axis have no defined angle.
"""

import numpy as np
from typing import Callable, Tuple

from ..spec.constants import EPS_ZERO, FRAME_SWITCH


def tangent_frame(axis, baseline=None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Right-handed frame (u, w, n) with n along `axis` and u the zero direction.

    Raises:
        ValueError: if the axis has zero length
    """
    axis = np.asarray(axis, dtype=float)
    axis_norm = np.linalg.norm(axis)
    if axis_norm < EPS_ZERO:
        raise ValueError(f"Cannot order directions about a zero-length axis: {axis}")
    normal = axis / axis_norm

    if baseline is None:
        baseline = -normal
    baseline = np.asarray(baseline, dtype=float)
    u = baseline - np.dot(baseline, normal) * normal

    if np.linalg.norm(u) < EPS_ZERO:
        if abs(normal[0]) < FRAME_SWITCH:
            u = np.cross(normal, [1, 0, 0])
        else:
            u = np.cross(normal, [0, 1, 0])
    u = u / np.linalg.norm(u)
    w = np.cross(normal, u)

    return u, w, normal


def anticlockwise_angles(axis, directions, baseline=None) -> np.ndarray:
    """
    Angle in [0, 2π) of each direction about `axis`, from the zero direction.

    Args:
        axis: (3,) sort-plane normal
        directions: (N, 3) directions to order
        baseline: (3,) zero direction before projection, default -axis

    Returns:
        (N,) angles
    """
    u, w, _ = tangent_frame(axis, baseline)
    directions = np.atleast_2d(np.asarray(directions, dtype=float))
    angles = np.arctan2(directions @ w, directions @ u)
    return np.mod(angles, 2 * np.pi)


def anticlockwise_order(axis, directions, baseline=None) -> np.ndarray:
    """
    Permutation that sorts `directions` anticlockwise about `axis`.

    Ties (parallel directions) keep their input order.
    """
    if len(directions) == 0:
        return np.zeros(0, dtype=int)
    angles = anticlockwise_angles(axis, directions, baseline)
    return np.argsort(angles, kind='stable')


def anticlockwise_key(axis, baseline=None) -> Callable[[np.ndarray], float]:
    """Sort key: key(direction) is the anticlockwise angle about `axis`."""
    u, w, _ = tangent_frame(axis, baseline)

    def key(direction) -> float:
        direction = np.asarray(direction, dtype=float)
        return float(np.mod(np.arctan2(direction @ w, direction @ u), 2 * np.pi))

    return key
