"""Linear Kalman filter with configurable model matrices."""

from __future__ import annotations

import numpy as np


class KalmanFilter:
    """Standard linear Kalman filter.

    Attributes are plain numpy arrays and may be replaced freely:
    ``x`` state vector, ``p`` state covariance, ``f`` state transition,
    ``h`` measurement matrix, ``r`` measurement noise, ``q`` process noise
    and ``b`` optional control input matrix.
    """

    def __init__(self, dim_x: int, dim_z: int) -> None:
        if dim_x < 0 or dim_z < 0:
            raise ValueError("filter dimensions must be non-negative")
        self.dim_x = dim_x
        self.dim_z = dim_z
        self.x = np.zeros(dim_x)
        self.p = np.eye(dim_x)
        self.f = np.eye(dim_x)
        self.h = np.eye(dim_z, dim_x)
        self.r = np.eye(dim_z)
        self.q = np.eye(dim_x)
        self.b: np.ndarray | None = None
        # Results of the most recent update, kept for inspection.
        self.y = np.zeros(dim_z)
        self.s = np.zeros((dim_z, dim_z))
        self.si = np.zeros((dim_z, dim_z))
        self.k = np.zeros((dim_x, dim_z))

    def predict(self, u=None) -> None:
        """Advance the state one step, optionally applying control input ``u``."""
        self.x = self.f @ self.x
        if self.b is not None and u is not None:
            self.x = self.x + self.b @ np.asarray(u, dtype=float)
        self.p = self.f @ self.p @ self.f.T + self.q

    def update(self, z, r=None, h=None) -> None:
        """Correct the state with measurement ``z``.

        ``r`` and ``h`` override the filter's measurement noise and
        measurement matrix for this update only. If the innovation
        covariance cannot be inverted, the identity is used in its place.
        """
        r = self.r if r is None else np.asarray(r, dtype=float)
        h = self.h if h is None else np.asarray(h, dtype=float)
        z = np.asarray(z, dtype=float).reshape(-1)

        self.y = z - h @ self.x
        self.s = h @ self.p @ h.T + r
        try:
            self.si = np.linalg.inv(self.s)
        except np.linalg.LinAlgError:
            self.si = np.eye(self.dim_z)
        self.k = self.p @ h.T @ self.si

        self.x = self.x + self.k @ self.y
        self.p = (np.eye(self.dim_x) - self.k @ h) @ self.p