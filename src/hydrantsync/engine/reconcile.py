"""Per-hydrant create/update/no-op decision."""

from __future__ import annotations

from hydrantsync.contracts.hydrant import Hydrant
from hydrantsync.contracts.sync import CreateDecision, Decision, NoOpDecision, UpdateDecision


def decide(local: Hydrant, remote: Hydrant | None) -> Decision:
    """Decide what to write for *local* given its matched map hydrant.

    An unknown local diameter keeps the mapped one instead of clearing it.
    Updates replace the whole hydrant tag set of the node.
    """
    if remote is None:
        return CreateDecision(hydrant=local.model_copy(update={"id": 0, "version": 0}))

    merged = local
    if local.diameter == 0 and remote.diameter > 0:
        merged = local.model_copy(update={"diameter": remote.diameter})

    if merged.same_attributes(remote):
        return NoOpDecision(hydrant=merged, remote=remote)

    return UpdateDecision(
        hydrant=merged.model_copy(update={"id": remote.id, "version": remote.version}),
        remote=remote,
    )


def describe_changes(decision: UpdateDecision) -> str:
    """Render ``field: old -> new`` pairs for the attributes that differ."""
    changes: list[str] = []
    for field in ("diameter", "position", "pressure", "type"):
        old = getattr(decision.remote, field)
        new = getattr(decision.hydrant, field)
        if old != new:
            changes.append(f"{field}: {_display(old)} -> {_display(new)}")
    return ", ".join(changes)


def _display(value: object) -> str:
    if value is None:
        return "unset"
    return str(value)
