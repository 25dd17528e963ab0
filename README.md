# motrack

Small building blocks for multi-object tracking and its evaluation,
built on NumPy.

## What is inside

- `motrack.kalman` – `KalmanFilter`, a linear Kalman filter. Its model
  matrices are plain NumPy arrays held as attributes (`x`, `p`, `f`, `h`,
  `r`, `q`, and the optional control matrix `b`) and may be replaced
  freely. `predict(u=None)` advances the state; `update(z, r=None, h=None)`
  corrects it, with `r` and `h` overriding the filter's own matrices for
  that one update. If the innovation covariance cannot be inverted, the
  identity is used in its place.
- `motrack.optimize` – `linear_sum_assignment(cost_matrix, max_cost)`
  finds a minimum-cost assignment of rows to columns (rectangular matrices
  are allowed) and then drops pairs whose cost exceeds `max_cost`. It
  returns an `AssignmentResult` holding `assignments` (a list of
  `Assignment` pairs with `row_idx` and `col_idx`, in row order),
  `unmatched_rows` and `unmatched_cols`. Rows of unequal length raise
  `ValueError`.
- `motrack.accumulator` – `MOTAccumulator` records, frame by frame, the
  `Event`s of a tracking run: each ground-truth object is matched greedily
  to a hypothesis by smallest finite distance (infinite distances forbid a
  pair), and every frame yields `EventType.MATCH`, `EventType.SWITCH`
  (matched to a different hypothesis than last time), `EventType.MISS` and
  `EventType.FALSE_POSITIVE` events. `events()` returns them in order and
  `compute_metrics()` summarises them as `MOTMetrics` (counts, total
  distance, MOTA, MOTP, precision and recall).

## Installation

```
pip install motrack
```

## Examples

A constant-velocity Kalman filter:

```python
import numpy as np
from motrack.kalman import KalmanFilter

kf = KalmanFilter(2, 1)
kf.f = np.array([[1.0, 1.0], [0.0, 1.0]])
kf.h = np.array([[1.0, 0.0]])
for z in [1.0, 2.0, 3.0]:
    kf.predict()
    kf.update(np.array([z]))
print(kf.x)
```

Optimal assignment:

```python
from motrack.optimize import linear_sum_assignment

result = linear_sum_assignment([[4.0, 1.0, 3.0], [2.0, 0.0, 5.0], [3.0, 2.0, 2.0]], float("inf"))
print([(a.row_idx, a.col_idx) for a in result.assignments])
# [(0, 1), (1, 0), (2, 2)]  -- total cost 5
```

Tracking metrics:

```python
import numpy as np
from motrack.accumulator import MOTAccumulator

acc = MOTAccumulator()
acc.update(0, [1], [1], np.array([[0.1]]))
acc.update(1, [1], [2], np.array([[0.2]]))  # identity switch
metrics = acc.compute_metrics()
print(metrics.num_matches, metrics.num_switches, metrics.mota)
# 2 1 0.5
print(metrics.motp)  # about 0.15
```

## What the package does not do

It is a set of parts, not a tracker. It does not match detections to
tracked objects, keep track identities over time, compute IoU between
bounding boxes, or count mostly-tracked, mostly-lost and fragmented
tracks; `MOTAccumulator` takes the distance matrix ready-made from the
caller. There is no command-line program and nothing is read from or
written to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```