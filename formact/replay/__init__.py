"""Scenario replay of recorded field interactions."""

from formact.replay.models import (
    ChangeAction,
    MountAction,
    RenameAction,
    ReplayEvent,
    ReplayResult,
    SetValueAction,
    SubmissionRecord,
    SubmitAction,
    UnmountAction,
)
from formact.replay.runner import ScenarioRunner

__all__ = [
    "ChangeAction",
    "MountAction",
    "RenameAction",
    "ReplayEvent",
    "ReplayResult",
    "ScenarioRunner",
    "SetValueAction",
    "SubmissionRecord",
    "SubmitAction",
    "UnmountAction",
]
