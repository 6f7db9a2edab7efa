"""
Scoring of submitted placements against the answer key.

Usage:
    from training.validation import validate_placements

    report = validate_placements([Placement(object_id=1, zone_id=10)])
    report.to_dict()  # {"score": 5, "results": [...]}

``score_placements`` is the pure algorithm and takes any mapping of object id
to an answer-key entry; ``validate_placements`` loads that mapping from the
database first.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from game_objects.models import GameObject
from training.placement import Placement

logger = logging.getLogger(__name__)


class ValidationResult:
    """Outcome for one submitted object."""

    def __init__(self, object_id: int, correct: bool, message: str):
        self.object_id = object_id
        self.correct = correct
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "objectId": self.object_id,
            "correct": self.correct,
            "message": self.message,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return (self.object_id, self.correct, self.message) == (
            other.object_id,
            other.correct,
            other.message,
        )

    def __repr__(self) -> str:
        return (
            f"ValidationResult(object_id={self.object_id}, "
            f"correct={self.correct}, message='{self.message}')"
        )


class ValidationReport:
    """
    Total score plus one result per resolved placement, in input order.

    ``score`` is the sum of ``points`` over correct placements, never negative.
    """

    def __init__(
        self, score: int = 0, results: Optional[List[ValidationResult]] = None
    ):
        self.score = score
        self.results = results or []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "results": [result.to_dict() for result in self.results],
        }

    def __repr__(self) -> str:
        return f"ValidationReport(score={self.score}, results={self.results!r})"


def score_placements(
    placements: Iterable[Placement], answer_key: Mapping[int, Any]
) -> ValidationReport:
    """
    Compare each placement with the object's correct zone.

    Args:
        placements: Placements in submission order
        answer_key: Object id -> entry exposing ``correct_zone_id``,
            ``points``, ``success_message`` and ``error_message``

    Returns:
        ValidationReport. Placements whose object id is not in the answer key
        are skipped: they add no result and no points.
    """
    report = ValidationReport()

    for placement in placements:
        entry = answer_key.get(placement.object_id)
        if entry is None:
            continue

        correct = entry.correct_zone_id == placement.zone_id
        report.results.append(
            ValidationResult(
                object_id=placement.object_id,
                correct=correct,
                message=entry.success_message if correct else entry.error_message,
            )
        )
        if correct:
            report.score += entry.points

    return report


def validate_placements(placements: Iterable[Placement]) -> ValidationReport:
    """Score placements against the stored answer key."""
    placements = list(placements)
    answer_key = GameObject.objects.answer_key(p.object_id for p in placements)

    report = score_placements(placements, answer_key)

    skipped = len(placements) - len(report.results)
    logger.info(
        f"Validated {len(placements)} placements: score={report.score}, "
        f"correct={sum(1 for r in report.results if r.correct)}, skipped={skipped}"
    )
    return report
