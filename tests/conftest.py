# tests/conftest.py
"""Shared fixtures: isolated config/logging state and a schema validator."""

from __future__ import annotations

import logging
from typing import Any, Callable

import pytest


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch):
    """Drop cached config and logging handlers around every test."""
    from cactus_core_api.config import get_config
    from cactus_core_api.utils import logging as pkg_logging

    for name in ("CACTUS_CORE_API_OUTPUT_DIR", "CACTUS_CORE_API_LOG_LEVEL", "CACTUS_CORE_API_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
    root = logging.getLogger(pkg_logging.ROOT_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    pkg_logging._logging_initialised = False
    pkg_logging._log_file_path = None
    pkg_logging._session_id = None


@pytest.fixture
def validator_for() -> Callable[[str], Any]:
    """Build a Draft 4 validator for a named component of the core document."""
    import jsonschema
    from cactus_core_api.schema import CACTUS_OPEN_API_JSON, SCHEMA_REF_PREFIX

    def _build(name: str):
        schema = {
            "allOf": [{"$ref": f"{SCHEMA_REF_PREFIX}{name}"}],
            "components": CACTUS_OPEN_API_JSON["components"],
        }
        return jsonschema.Draft4Validator(schema)

    return _build


PUBLIC_KEY_PEM = (
    "-----BEGIN PUBLIC KEY-----\n"
    "MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAEv8xZ6yq0HkQmQ0jR5m8i4H2w1s9v\n"
    "u3b7Ck1s6kqfQ2oX2tq1m7dVb1a5Xc0Qe9pG7JfW3h0R8yK2nZp4t5L6Sg==\n"
    "-----END PUBLIC KEY-----\n"
)


@pytest.fixture
def valid_instances() -> dict[str, dict[str, Any]]:
    """One valid instance per object type of the core document."""
    ledger = {"id": "ledger-besu-1", "ledgerType": "BESU_2X", "consortiumMemberId": "member-a"}
    consortium = {
        "id": "consortium-1",
        "name": "Test Consortium",
        "mainApiHost": "https://api.consortium.example.org",
        "memberIds": ["member-a"],
    }
    member = {"id": "member-a", "name": "Member A", "nodeIds": ["node-a-1"]}
    node_meta = {"nodeApiHost": "https://node-a-1.example.org", "publicKeyPem": PUBLIC_KEY_PEM}
    node = {
        **node_meta,
        "id": "node-a-1",
        "consortiumId": "consortium-1",
        "memberId": "member-a",
        "pluginInstanceIds": ["plugin-besu-1"],
        "ledgerIds": ["ledger-besu-1"],
    }
    plugin = {"id": "plugin-besu-1", "packageName": "@hyperledger/cactus-plugin-ledger-connector-besu"}
    recipient = {
        "signature": "DOCNCqEMN7CQ_z-RMndiyldljXOk6WFIZxRzNF5Ylg4",
        "protected": "eyJhbGciOiJIUzI1NiJ9",
        "header": {"kid": "node-a-1"},
    }
    return {
        "Ledger": ledger,
        "Consortium": consortium,
        "ConsortiumMember": member,
        "CactusNodeMeta": node_meta,
        "CactusNode": node,
        "PluginInstance": plugin,
        "ConsortiumDatabase": {
            "consortium": [consortium],
            "ledger": [ledger],
            "consortiumMember": [member],
            "cactusNode": [node],
            "pluginInstance": [plugin],
        },
        "JWSRecipient": recipient,
        "JWSGeneral": {
            "payload": "eyJuYW1lIjoiSm9obiBEb2UiLCJpYXQiOjE1MTYyMzkwMjJ9",
            "signatures": [recipient],
        },
    }
