"""
Persisted form of the cart.

    {"version": 1, "lines": [{"id": "wks-001", "qty": 2}, ...]}

A bare list of {id, qty} objects (the unversioned format) is read as
version 1.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

SNAPSHOT_VERSION = 1


@dataclass(frozen=True)
class CartLine:
    item_id: str
    quantity: int


class SnapshotError(ValueError):
    """Stored cart value is not a valid snapshot."""


class LineRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, strict=True)
    qty: int = Field(ge=1, strict=True)


class CartSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: Literal[1]
    lines: List[LineRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "CartSnapshot":
        ids = [line.id for line in self.lines]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate item ids in cart snapshot")
        return self


def dump_snapshot(lines: Iterable[CartLine]) -> str:
    snap = CartSnapshot(
        version=SNAPSHOT_VERSION,
        lines=[LineRecord(id=line.item_id, qty=line.quantity) for line in lines],
    )
    return snap.model_dump_json()


def load_snapshot(raw: str) -> List[CartLine]:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"not JSON: {e}") from e

    if isinstance(data, list):
        data = {"version": SNAPSHOT_VERSION, "lines": data}

    try:
        snap = CartSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(str(e)) from e

    return [CartLine(item_id=r.id, quantity=r.qty) for r in snap.lines]
