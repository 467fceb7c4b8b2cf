"""Weighted Hi Score ratings for front-of-house and kitchen staff.

Usage example:
    from hospitality_staffing.domain.hi_score import (
        FOH_WEIGHTS,
        RoleType,
        calculate_weighted_score,
        get_empty_scores,
    )

    scores = get_empty_scores(RoleType.FOH)
    scores["hospitality"] = 9
    rating = calculate_weighted_score(scores, FOH_WEIGHTS)
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from ..exceptions import MissingWeightError, ZeroTotalWeightError
from ..formatting import Number, round_half_up


class RoleType(StrEnum):
    """Role families that have their own Hi Score categories."""

    FOH = "foh"
    KITCHEN = "kitchen"


FOH_WEIGHTS: MappingProxyType[str, float] = MappingProxyType(
    {
        "hospitality": 0.4,
        "friendliness": 0.2,
        "internalTeamSkills": 0.2,
        "serviceSkills": 0.1,
        "fohKnowledge": 0.1,
    }
)

KITCHEN_WEIGHTS: MappingProxyType[str, float] = MappingProxyType(
    {
        "workEthic": 0.35,
        "teamPlayer": 0.25,
        "adaptability": 0.2,
        "cookingSkills": 0.1,
        "foodKnowledge": 0.1,
    }
)

_WEIGHTS_BY_ROLE: Mapping[RoleType, MappingProxyType[str, float]] = MappingProxyType(
    {RoleType.FOH: FOH_WEIGHTS, RoleType.KITCHEN: KITCHEN_WEIGHTS}
)


def weights_for_role(role: RoleType) -> MappingProxyType[str, float]:
    """Return the built-in weight table for ``role``."""
    return _WEIGHTS_BY_ROLE[RoleType(role)]


def score_categories(role: RoleType) -> tuple[str, ...]:
    """Return the Hi Score category names for ``role`` in display order."""
    return tuple(weights_for_role(role))


def calculate_weighted_score(scores: Mapping[str, Number], weights: Mapping[str, Number]) -> float:
    """Weighted average of ``scores``, rounded half-up to two decimal places.

    Every scored category is multiplied by its weight. The divisor is the sum
    of *all* weights in ``weights``, so the table does not need to be
    normalised and unscored categories still count towards it.

    Raises:
        MissingWeightError: A scored category has no entry in ``weights``.
        ZeroTotalWeightError: ``weights`` sums to zero.
    """
    missing = [category for category in scores if category not in weights]
    if missing:
        raise MissingWeightError(missing)

    total_weighted = sum(scores[category] * weights[category] for category in scores)
    total_weight = sum(weights.values())
    if total_weight == 0:
        raise ZeroTotalWeightError()

    return round_half_up(total_weighted / total_weight, 2)


def get_empty_scores(role: RoleType) -> dict[str, Number]:
    """Return a fresh score set for ``role`` with every category at zero."""
    return dict.fromkeys(score_categories(role), 0)
