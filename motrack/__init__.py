"""Kalman filtering, optimal assignment and MOT metrics accumulation."""

__version__ = "0.4.0"

__all__ = [
    "accumulator",
    "kalman",
    "optimize",
]