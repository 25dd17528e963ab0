"""Optimal assignment of rows to columns (Hungarian / Kuhn-Munkres)."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

_ZERO_TOLERANCE = 1e-10


@dataclass(frozen=True)
class Assignment:
    """A matched pair of a row index and a column index."""

    row_idx: int
    col_idx: int


@dataclass
class AssignmentResult:
    """Outcome of an assignment: accepted pairs and what was left unmatched."""

    assignments: list[Assignment] = field(default_factory=list)
    unmatched_rows: list[int] = field(default_factory=list)
    unmatched_cols: list[int] = field(default_factory=list)


def _to_cost_array(cost_matrix: Sequence[Sequence[float]]) -> np.ndarray:
    widths = {len(row) for row in cost_matrix}
    if len(widths) > 1:
        raise ValueError("all rows of the cost matrix must have the same length")
    width = widths.pop() if widths else 0
    return np.asarray(cost_matrix, dtype=float).reshape(len(cost_matrix), width)


def linear_sum_assignment(
    cost_matrix: Sequence[Sequence[float]], max_cost: float
) -> AssignmentResult:
    """Assign rows to columns at minimum total cost.

    Pairs whose cost exceeds ``max_cost`` are dropped after the optimal
    assignment is found; their row and column are reported as unmatched.
    Assignments are listed in row order.
    """
    costs = _to_cost_array(cost_matrix)
    num_rows, num_cols = costs.shape
    if num_rows == 0:
        return AssignmentResult()
    if num_cols == 0:
        return AssignmentResult(unmatched_rows=list(range(num_rows)))

    assignments: list[Assignment] = []
    matched_rows: set[int] = set()
    matched_cols: set[int] = set()
    for row_idx, col_idx in enumerate(_hungarian(costs)):
        if col_idx is None or col_idx >= num_cols:
            continue
        if costs[row_idx, col_idx] <= max_cost:
            assignments.append(Assignment(row_idx, col_idx))
            matched_rows.add(row_idx)
            matched_cols.add(col_idx)

    return AssignmentResult(
        assignments=assignments,
        unmatched_rows=[i for i in range(num_rows) if i not in matched_rows],
        unmatched_cols=[j for j in range(num_cols) if j not in matched_cols],
    )


def _find_augmenting_path(
    start_row: int,
    cost: np.ndarray,
    col_match: list[int | None],
) -> tuple[int, dict[int, int]] | None:
    """Breadth-first search over zero entries for a path to a free column."""
    n = cost.shape[0]
    parent_col: dict[int, int] = {}
    visited_col = [False] * n
    queue = deque([start_row])
    while queue:
        row = queue.popleft()
        for col in range(n):
            if visited_col[col] or abs(cost[row, col]) >= _ZERO_TOLERANCE:
                continue
            visited_col[col] = True
            parent_col[col] = row
            matched_row = col_match[col]
            if matched_row is None:
                return col, parent_col
            queue.append(matched_row)
    return None


def _hungarian(costs: np.ndarray) -> list[int | None]:
    """Return, for each original row, the assigned column or None."""
    n_rows, n_cols = costs.shape
    n = max(n_rows, n_cols)
    cost = np.zeros((n, n))
    cost[:n_rows, :n_cols] = costs

    row_min = cost.min(axis=1)
    finite = np.isfinite(row_min)
    cost[finite] -= row_min[finite, None]

    col_min = cost.min(axis=0)
    finite = np.isfinite(col_min)
    cost[:, finite] -= col_min[finite]

    row_match: list[int | None] = [None] * n
    col_match: list[int | None] = [None] * n

    zeros = np.abs(cost) < _ZERO_TOLERANCE
    for i in range(n):
        for j in range(n):
            if zeros[i, j] and row_match[i] is None and col_match[j] is None:
                row_match[i] = j
                col_match[j] = i

    while True:
        unmatched = [i for i in range(n) if row_match[i] is None]
        if not unmatched:
            break

        augmented = False
        for start_row in unmatched:
            found = _find_augmenting_path(start_row, cost, col_match)
            if found is None:
                continue
            col, parent_col = found
            while True:
                row = parent_col[col]
                prev_col = row_match[row]
                row_match[row] = col
                col_match[col] = row
                if prev_col is None:
                    break
                col = prev_col
            augmented = True
            break

        if augmented:
            continue

        row_covered = np.zeros(n, dtype=bool)
        col_covered = np.zeros(n, dtype=bool)
        for start_row in unmatched:
            stack = [start_row]
            while stack:
                row = stack.pop()
                if row_covered[row]:
                    continue
                row_covered[row] = True
                for col in range(n):
                    if abs(cost[row, col]) < _ZERO_TOLERANCE and not col_covered[col]:
                        col_covered[col] = True
                        matched_row = col_match[col]
                        if matched_row is not None:
                            stack.append(matched_row)

        uncovered = cost[np.ix_(row_covered, ~col_covered)]
        min_val = float(uncovered.min()) if uncovered.size else float("inf")
        if not np.isfinite(min_val) or min_val <= 0.0:
            break

        cost[np.outer(row_covered, ~col_covered)] -= min_val
        cost[np.outer(~row_covered, col_covered)] += min_val

    return row_match[:n_rows]