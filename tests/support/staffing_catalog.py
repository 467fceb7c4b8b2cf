"""Builders for staffing catalogue payloads used in tests."""

from __future__ import annotations

import json
from pathlib import Path

from tests.fakes import InMemoryFileSystem

CATALOG_PATH = Path("config/staffing_catalog.json")


def make_band_payload(
    name: str,
    revenue_min: float,
    revenue_max: float,
    **overrides: object,
) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": name,
        "revenue_min": revenue_min,
        "revenue_max": revenue_max,
        "foh_min_staff": 1,
        "foh_max_staff": 2,
        "kitchen_min_staff": 1,
        "kitchen_max_staff": 2,
        "kp_min_staff": 0,
        "kp_max_staff": 1,
        "target_cost_percentage": 30,
    }
    payload.update(overrides)
    return payload


def make_catalog_payload() -> dict[str, object]:
    return {
        "schema_version": 1,
        "revenue_bands": [
            make_band_payload("Quiet", 0, 800, target_cost_percentage=34),
            make_band_payload(
                "Busy",
                801,
                4000,
                foh_min_staff=3,
                foh_max_staff=5,
                kitchen_max_staff=3,
                kp_min_staff=1,
                kp_max_staff=2,
                target_cost_percentage=24,
            ),
        ],
        "weights": {
            "foh": {
                "hospitality": 3,
                "friendliness": 1,
                "internalTeamSkills": 1,
                "serviceSkills": 1,
                "fohKnowledge": 0,
            }
        },
    }


def write_catalog(
    fs: InMemoryFileSystem,
    payload: dict[str, object],
    path: Path = CATALOG_PATH,
) -> Path:
    fs.write_text(json.dumps(payload), path)
    return path
