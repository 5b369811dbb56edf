"""Replay recorded field interactions against a form definition.

Builds a fresh Form from the definition, mounts its fields, then applies
each event in order through the field controllers, exactly as a host UI
would. Every snapshot and submission the Form emits is captured.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from formact.channel import SubmitEvent
from formact.core.errors import ScenarioError
from formact.core.models import FormChangePayload, FormSubmitPayload
from formact.definition.builder import BuiltForm, build_form
from formact.definition.models import FormDefinition
from formact.field import FieldController
from formact.io import read_jsonl
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
    replay_event_adapter,
)
from formact.validation.registry import ValidatorRegistry

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """Drives a Form built from a definition through a list of events."""

    def __init__(
        self,
        definition: FormDefinition,
        registry: ValidatorRegistry | None = None,
        required_message: str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            definition: The form to build for each run.
            registry: Validator registry (built-ins by default).
            required_message: Message used by the REQUIRED check.
        """
        self.definition = definition
        self.registry = registry
        self.required_message = required_message

    def parse_events(self, events: Iterable[dict[str, Any] | Any]) -> list[ReplayEvent]:
        """Validate raw event dicts into replay events.

        Raises:
            ScenarioError: If an event is malformed.
        """
        parsed: list[ReplayEvent] = []
        for index, raw in enumerate(events, 1):
            if not isinstance(raw, dict):
                parsed.append(raw)
                continue
            try:
                parsed.append(replay_event_adapter.validate_python(raw))
            except ValidationError as e:
                raise ScenarioError(f"Invalid event #{index}: {e}") from e
        return parsed

    def run(self, events: Iterable[dict[str, Any] | Any]) -> ReplayResult:
        """Apply events in order and collect what the Form emitted.

        Args:
            events: Event dicts or parsed replay event models.

        Returns:
            ReplayResult with every snapshot and submission.

        Raises:
            ScenarioError: If an event is malformed or names an unknown field.
        """
        parsed = self.parse_events(events)
        result = ReplayResult(form_id=self.definition.form_id)

        def record_change(payload: FormChangePayload) -> None:
            result.snapshots.append(payload)

        def record_submit(event: SubmitEvent, payload: FormSubmitPayload) -> None:
            result.submissions.append(
                SubmissionRecord(default_prevented=event.default_prevented, payload=payload)
            )

        built = build_form(
            self.definition,
            registry=self.registry,
            on_change=record_change,
            on_submit=record_submit,
            required_message=self.required_message,
        )

        for event in parsed:
            self._apply(built, event)
            result.events_applied += 1

        result.final = built.form.snapshot(
            result.snapshots[-1].last_change if result.snapshots else None
        )
        result.submitted = built.form.check_submitted()
        logger.debug(
            "Replayed %d event(s) on %r: %d snapshot(s)",
            result.events_applied,
            self.definition.form_id,
            len(result.snapshots),
        )
        return result

    def run_file(self, events_path: Path | str) -> ReplayResult:
        """Replay a JSONL event script."""
        return self.run(list(read_jsonl(events_path)))

    def _controller(self, built: BuiltForm, name: str) -> FieldController:
        controller = built.field(name) or built.fields.get(name)
        if controller is None:
            raise ScenarioError(f"Unknown field: {name}")
        return controller

    def _apply(self, built: BuiltForm, event: ReplayEvent) -> None:
        if isinstance(event, SubmitAction):
            built.form.on_submit(SubmitEvent())
            return

        controller = self._controller(built, event.field)

        if isinstance(event, ChangeAction):
            controller.on_change(event.value)
        elif isinstance(event, SetValueAction):
            controller.update_props(controller.props.replace(value=event.value))
        elif isinstance(event, RenameAction):
            controller.update_props(controller.props.replace(name=event.to))
        elif isinstance(event, MountAction):
            controller.mount()
        elif isinstance(event, UnmountAction):
            controller.unmount()
        else:
            raise ScenarioError(f"Unsupported event: {event!r}")
