"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from formact.channel import SubmitEvent
from formact.core.models import FormChangePayload, FormSubmitPayload
from formact.form import Form


class Recorder:
    """Collects everything a Form emits."""

    def __init__(self) -> None:
        self.snapshots: list[FormChangePayload] = []
        self.submissions: list[tuple[SubmitEvent, FormSubmitPayload]] = []

    def on_change(self, payload: FormChangePayload) -> None:
        self.snapshots.append(payload)

    def on_submit(self, event: SubmitEvent, payload: FormSubmitPayload) -> None:
        self.submissions.append((event, payload))

    @property
    def last(self) -> FormChangePayload:
        return self.snapshots[-1]


@pytest.fixture
def recorder() -> Recorder:
    """Return an empty recorder."""
    return Recorder()


@pytest.fixture
def form(recorder: Recorder) -> Form:
    """Return a Form wired to the recorder."""
    return Form(on_change=recorder.on_change, on_submit=recorder.on_submit)


@pytest.fixture
def contact_definition() -> dict:
    """A small contact form definition."""
    return {
        "form_id": "contact",
        "version": "1.0.0",
        "fields": [
            {"name": "email", "required": True, "validators": ["email"]},
            {
                "name": "nickname",
                "validators": [{"name": "min_length", "params": {"length": 3}}],
            },
            {"name": "age", "default_value": 5, "validators": ["numeric"]},
        ],
    }


@pytest.fixture
def definition_yaml(tmp_path: Path, contact_definition: dict) -> Path:
    """Write the contact definition as YAML."""
    path = tmp_path / "contact.yaml"
    with open(path, "w") as f:
        yaml.dump(contact_definition, f, sort_keys=False)
    return path


@pytest.fixture
def definition_json(tmp_path: Path, contact_definition: dict) -> Path:
    """Write the contact definition as JSON."""
    path = tmp_path / "contact.json"
    with open(path, "w") as f:
        json.dump(contact_definition, f)
    return path


@pytest.fixture
def events_path(tmp_path: Path) -> Path:
    """A replay script that fills in the contact form and submits."""
    events = [
        {"action": "submit"},
        {"action": "change", "field": "email", "value": "a@b.com"},
        {"action": "change", "field": "nickname", "value": "bob"},
        {"action": "submit"},
    ]
    path = tmp_path / "events.jsonl"
    with open(path, "w") as f:
        for event in events:
            f.write(json.dumps(event) + "\n")
    return path
