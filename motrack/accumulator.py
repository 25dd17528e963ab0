"""Event-based accumulator for multiple-object-tracking metrics."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


class EventType(enum.Enum):
    """Kind of event recorded for a frame."""

    MATCH = "match"
    SWITCH = "switch"
    MISS = "miss"
    FALSE_POSITIVE = "false_positive"
    FRAGMENTATION = "fragmentation"


@dataclass(frozen=True)
class Event:
    """A single tracking event."""

    frame_id: int
    event_type: EventType
    object_id: int | None = None
    hypothesis_id: int | None = None
    distance: float | None = None


@dataclass
class MOTMetrics:
    """Summary metrics computed from accumulated events."""

    num_matches: int = 0
    num_misses: int = 0
    num_false_positives: int = 0
    num_switches: int = 0
    num_fragmentations: int = 0
    total_distance: float = 0.0
    mota: float = 0.0
    motp: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    mostly_tracked: int = 0
    mostly_lost: int = 0
    partially_tracked: int = 0


def _as_distance_matrix(distances, n_objects: int, n_hypotheses: int) -> np.ndarray:
    array = np.asarray(distances, dtype=float)
    if array.size == 0:
        return np.zeros((n_objects, n_hypotheses))
    if array.ndim != 2 or array.shape[0] < n_objects or array.shape[1] < n_hypotheses:
        raise ValueError(
            f"distance matrix of shape {array.shape} does not cover "
            f"{n_objects} objects and {n_hypotheses} hypotheses"
        )
    return array[:n_objects, :n_hypotheses]


class MOTAccumulator:
    """Collects matches, misses, false positives and switches frame by frame.

    Ground-truth objects are matched to hypotheses greedily by smallest
    finite distance; infinite distances mark pairs that may not match.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._last_match: dict[int, int] = {}

    def update(
        self,
        frame_id: int,
        object_ids: Sequence[int],
        hypothesis_ids: Sequence[int],
        distances,
    ) -> None:
        """Record the events of one frame.

        ``distances`` has one row per object and one column per hypothesis.
        """
        matrix = _as_distance_matrix(distances, len(object_ids), len(hypothesis_ids))

        rows, cols = np.nonzero(np.isfinite(matrix))
        order = np.argsort(matrix[rows, cols], kind="stable")

        matched_objects: set[int] = set()
        matched_hypotheses: set[int] = set()
        for obj_idx, hyp_idx in zip(rows[order].tolist(), cols[order].tolist()):
            if obj_idx in matched_objects or hyp_idx in matched_hypotheses:
                continue
            obj_id = object_ids[obj_idx]
            hyp_id = hypothesis_ids[hyp_idx]

            previous = self._last_match.get(obj_id)
            event_type = (
                EventType.SWITCH
                if previous is not None and previous != hyp_id
                else EventType.MATCH
            )
            self._events.append(
                Event(frame_id, event_type, obj_id, hyp_id, float(matrix[obj_idx, hyp_idx]))
            )
            self._last_match[obj_id] = hyp_id
            matched_objects.add(obj_idx)
            matched_hypotheses.add(hyp_idx)

        self._events.extend(
            Event(frame_id, EventType.MISS, object_id=obj_id)
            for idx, obj_id in enumerate(object_ids)
            if idx not in matched_objects
        )
        self._events.extend(
            Event(frame_id, EventType.FALSE_POSITIVE, hypothesis_id=hyp_id)
            for idx, hyp_id in enumerate(hypothesis_ids)
            if idx not in matched_hypotheses
        )

    def events(self) -> tuple[Event, ...]:
        """Return all events recorded so far, in order."""
        return tuple(self._events)

    def compute_metrics(self) -> MOTMetrics:
        """Summarise the recorded events."""
        metrics = MOTMetrics()
        for event in self._events:
            if event.event_type in (EventType.MATCH, EventType.SWITCH):
                metrics.num_matches += 1
                if event.event_type is EventType.SWITCH:
                    metrics.num_switches += 1
                if event.distance is not None:
                    metrics.total_distance += event.distance
            elif event.event_type is EventType.MISS:
                metrics.num_misses += 1
            elif event.event_type is EventType.FALSE_POSITIVE:
                metrics.num_false_positives += 1
            elif event.event_type is EventType.FRAGMENTATION:
                metrics.num_fragmentations += 1

        num_gt = metrics.num_matches + metrics.num_misses
        num_pred = metrics.num_matches + metrics.num_false_positives

        if num_gt > 0:
            metrics.recall = metrics.num_matches / num_gt
            errors = metrics.num_misses + metrics.num_false_positives + metrics.num_switches
            metrics.mota = 1.0 - errors / num_gt
        if num_pred > 0:
            metrics.precision = metrics.num_matches / num_pred
        if metrics.num_matches > 0:
            metrics.motp = metrics.total_distance / metrics.num_matches

        return metrics