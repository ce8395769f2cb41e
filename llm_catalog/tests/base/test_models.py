"""Record schemas: defaults, aliases and the ``extra`` map."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from llm_catalog.base.models import Capabilities, Model, Provider, Snapshot
from llm_catalog.tests.utils import assert_true


def test_capability_defaults() -> None:
    caps = Capabilities()
    assert_true(caps.chat and not caps.embeddings, "chat on, embeddings off")
    assert_true(caps.streaming.text and not caps.streaming.tool_calls, "text streaming assumed")
    assert_true(not caps.tools.enabled and not caps.reasoning.enabled, "tools and reasoning off")


def test_json_block_uses_upstream_key_names() -> None:
    caps = Capabilities.model_validate({"json": {"native": True, "schema": True}})
    assert_true(caps.json_output.json_schema, "schema alias populated")
    dumped = caps.model_dump(by_alias=True)
    assert_true(dumped["json"]["schema"] is True, f"upstream spelling on dump, got {dumped}")


def test_model_key_and_spec() -> None:
    model = Model(id="gpt-4o", provider="openai")
    assert_true(model.key == ("openai", "gpt-4o"), "key pair")
    assert_true(model.spec == "openai:gpt-4o", "colon spec")
    assert_true(model.capabilities is None, "no capability tree unless declared")


def test_unknown_fields_are_kept_in_extra() -> None:
    model = Model.model_validate({"id": "m", "provider": "p", "open_weights": True, "temperature": True})
    assert_true(model.extra == {"open_weights": True, "temperature": True}, f"got {model.extra}")


def test_records_are_frozen() -> None:
    model = Model(id="m", provider="p")
    with pytest.raises(ValidationError):
        model.id = "other"


def test_modalities_are_lowercased() -> None:
    model = Model.model_validate({"id": "m", "provider": "p", "modalities": {"input": [" Text ", "IMAGE"]}})
    assert_true(model.modalities.input == ["text", "image"], f"got {model.modalities.input}")


@pytest.mark.parametrize(
    "record",
    [
        {"id": "m", "provider": "Open AI"},
        {"id": "m", "provider": "p", "cost": {"input": -1}},
        {"id": "m", "provider": "p", "extra": "not a mapping"},
    ],
)
def test_invalid_model_records(record) -> None:
    with pytest.raises(ValidationError):
        Model.model_validate(record)


def test_provider_config_schema() -> None:
    provider = Provider.model_validate(
        {"id": "google_vertex", "config_schema": [{"name": "location", "default": "us-central1"}]}
    )
    field = provider.config_schema[0]
    assert_true(field.type == "string" and field.default == "us-central1", f"unexpected {field}")


def test_snapshot_payload_omits_none_and_uses_aliases() -> None:
    model = Model.model_validate({"id": "m", "provider": "p", "capabilities": {"json": {"native": True}}})
    payload = Snapshot(providers=(Provider(id="p"),), models=(model,)).to_payload()
    dumped = payload["models"][0]
    assert_true("name" not in dumped, "None fields omitted")
    assert_true(dumped["capabilities"]["json"]["native"] is True, "alias used")
    assert_true(payload["providers"][0]["id"] == "p", "providers dumped")
