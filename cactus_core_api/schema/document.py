# cactus_core_api/schema/document.py
"""The Cactus core API OpenAPI document.

Holds ``CACTUS_OPEN_API_JSON``, an OpenAPI 3.0.3 document that declares no
endpoints of its own.  Plugins import the shared type definitions under
``components.schemas`` (identifiers, consortium management, cactus nodes,
ledgers, JSON Web Signatures) and reference them from their own documents.

The value is a plain literal built once at import time and must be treated
as read-only; use :func:`cactus_core_api.schema.get_openapi_document` for a
copy that can be modified.
"""

from __future__ import annotations

from typing import Any

OPENAPI_VERSION = "3.0.3"
SCHEMA_REF_PREFIX = "#/components/schemas/"


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"{SCHEMA_REF_PREFIX}{name}"}


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

_PRIMARY_KEY_SCHEMAS: dict[str, Any] = {
    "PrimaryKey": {
        "type": "string",
        "minLength": 1,
        "maxLength": 128,
        "nullable": False,
    },
    "ConsortiumMemberId": {
        **_ref("PrimaryKey"),
        "description": (
            "ID of Consortium member who operates the ledger (if any). "
            "Defined as an optional property in case the ledger is a "
            "permissionless and/or public one such as the Bitcoin or "
            "Ethereum mainnets."
        ),
    },
    "CactusNodeId": {
        **_ref("PrimaryKey"),
        "description": (
            "ID of a Cactus node that must uniquely distinguish it from all "
            "other Cactus nodes within a Consortium. Note that API server "
            "instances do not have their own identity the way a node does."
        ),
    },
    "ConsortiumId": _ref("PrimaryKey"),
    "LedgerId": {
        "description": (
            "String that uniquely identifies a ledger within a "
            "Cactus consortium so that transactions can be routed to the "
            "correct ledger."
        ),
        **_ref("PrimaryKey"),
    },
    "PluginInstanceId": {
        "description": (
            "String that uniquely identifies a plugin instance within a "
            "Cactus consortium so that requests can be addressed/routed "
            "directly to individual plugins when necessary."
        ),
        **_ref("PrimaryKey"),
    },
}


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

CONSENSUS_ALGORITHM_FAMILIES: tuple[str, ...] = (
    "org.hyperledger.cactus.consensusalgorithm.PROOF_OF_AUTHORITY",
    "org.hyperledger.cactus.consensusalgorithm.PROOF_OF_STAKE",
    "org.hyperledger.cactus.consensusalgorithm.PROOF_OF_WORK",
)

LEDGER_TYPES: tuple[str, ...] = (
    "BESU_1X",
    "BESU_2X",
    "BURROW_0X",
    "CORDA_4X",
    "FABRIC_14X",
    "FABRIC_2",
    "QUORUM_2X",
    "SAWTOOTH_1X",
)

_CONSENSUS_ALGORITHM_FAMILY_SCHEMA: dict[str, Any] = {
    "type": "string",
    "description": (
        "Enumerates a list of consensus algorithm families in "
        "existence. Does not intend to be an exhaustive list, just a "
        "practical one, meaning that we only include items here that are "
        "relevant to Hyperledger Cactus in fulfilling its own duties. "
        "This can be extended later as more sophisticated features "
        "of Cactus get implemented. "
        "This enum is meant to be first and foremost a useful abstraction "
        "for achieving practical tasks, not an encyclopedia and therefore "
        "we ask of everyone that this to be extended only in ways that "
        "serve a practical purpose for the runtime behavior of Cactus or "
        "Cactus plugins in general. The bottom line is that we can accept "
        "this enum being not 100% accurate as long as it 100% satisfies "
        "what it was designed to do."
    ),
    "enum": list(CONSENSUS_ALGORITHM_FAMILIES),
}

_LEDGER_TYPE_SCHEMA: dict[str, Any] = {
    "description": (
        "Enumerates the different ledger vendors and their "
        "major versions encoded within the name of the LedgerType. "
        'For example "BESU_1X" involves all of the [1.0.0;2.0.0) where '
        "1.0.0 is included and anything up until, but not 2.0.0. See: "
        "https://stackoverflow.com/a/4396303/698470 for further explanation."
    ),
    "type": "string",
    "enum": list(LEDGER_TYPES),
}


# ---------------------------------------------------------------------------
# Consortium data model
# ---------------------------------------------------------------------------

MAX_COLLECTION_ITEMS = 2048


def _collection(item: str, description: str | None = None, min_items: int = 0) -> dict[str, Any]:
    schema: dict[str, Any] = {}
    if description:
        schema["description"] = description
    schema.update(
        {
            "type": "array",
            "items": _ref(item),
            "default": [],
            "minItems": min_items,
            "maxItems": MAX_COLLECTION_ITEMS,
        }
    )
    return schema


_CONSORTIUM_DATABASE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": [
        "consortium",
        "ledger",
        "consortiumMember",
        "cactusNode",
        "pluginInstance",
    ],
    "properties": {
        "consortium": _collection(
            "Consortium",
            "A collection of Consortium entities. In practice "
            "this should only ever contain a single consortium, but we "
            "defined it as an array to keep the convention up with the "
            "rest of the collections defined in the Consortium data in "
            "general. Also, if we ever decide to somehow have some sort "
            "of consortium to consortium integration (which does not make "
            "much sense in the current frame of mind of the author in the "
            "year 2020) then having this as an array will have proven "
            "itself to be an excellent long term compatibility/"
            "extensibility decision indeed.",
        ),
        "ledger": _collection(
            "Ledger",
            "The complete collection of all ledger entities in "
            "existence within the consortium.",
        ),
        "consortiumMember": _collection(
            "ConsortiumMember",
            "The complete collection of all consortium member "
            "entities in existence within the consortium.",
        ),
        "cactusNode": _collection(
            "CactusNode",
            "The complete collection of all cactus nodes "
            "entities in existence within the consortium.",
        ),
        "pluginInstance": _collection(
            "PluginInstance",
            "The complete collection of all plugin instance "
            "entities in existence within the consortium.",
        ),
    },
}

_LEDGER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "ledgerType"],
    "properties": {
        "id": _ref("LedgerId"),
        "ledgerType": {**_ref("LedgerType"), "nullable": False},
        "consortiumMemberId": _ref("ConsortiumMemberId"),
    },
}

_CONSORTIUM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "name", "mainApiHost", "memberIds"],
    "properties": {
        "id": _ref("ConsortiumId"),
        "name": {"type": "string"},
        "mainApiHost": {"type": "string"},
        "memberIds": {
            **_collection(
                "ConsortiumMemberId",
                "The collection (array) of primary keys of "
                "consortium member entities that belong to this Consortium.",
                min_items=1,
            ),
            "nullable": False,
        },
    },
}

_CONSORTIUM_MEMBER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "name", "nodeIds"],
    "properties": {
        "id": _ref("ConsortiumMemberId"),
        "name": {
            "type": "string",
            "description": (
                "The human readable name a Consortium member can be "
                "referred to while making it easy for humans to distinguish "
                "this particular consortium member entity from any other ones."
            ),
            "minLength": 1,
            "maxLength": 2048,
            "nullable": False,
        },
        "nodeIds": {**_collection("CactusNodeId", min_items=1), "nullable": False},
    },
}

_CACTUS_NODE_META_SCHEMA: dict[str, Any] = {
    "description": "A Cactus node meta information",
    "type": "object",
    "required": ["nodeApiHost", "publicKeyPem"],
    "properties": {
        "nodeApiHost": {
            "type": "string",
            "minLength": 1,
            "maxLength": 1024,
            "nullable": False,
        },
        "publicKeyPem": {
            "description": (
                "The PEM encoded public key that was used to "
                "generate the JWS included in the response (the jws property)"
            ),
            "type": "string",
            "minLength": 1,
            "maxLength": 65535,
            "nullable": False,
            "format": (
                "Must only contain the public key, never include here "
                "the PEM that also contains a private key. See PEM format: "
                "https://en.wikipedia.org/wiki/Privacy-Enhanced_Mail"
            ),
        },
    },
}

_CACTUS_NODE_SCHEMA: dict[str, Any] = {
    "description": (
        "A Cactus node can be a single server, or a set of "
        "servers behind a load balancer acting as one."
    ),
    "type": "object",
    "allOf": [
        _ref("CactusNodeMeta"),
        {
            "type": "object",
            "required": [
                "id",
                "consortiumId",
                "nodeApiHost",
                "memberId",
                "publicKeyPem",
                "pluginInstanceIds",
                "ledgerIds",
            ],
            "properties": {
                "id": {
                    **_ref("CactusNodeId"),
                    "example": "809a76ba-cfb8-4045-a5c6-ed70a7314c25",
                },
                "consortiumId": {
                    **_ref("ConsortiumId"),
                    "description": "ID of the Cactus Consortium this node is in.",
                    "example": "3e2670d9-2d14-45bd-96f5-33e2c4b4e3fb",
                },
                "memberId": {
                    **_ref("ConsortiumMemberId"),
                    "example": "b3674a28-e442-4feb-b1f3-8cbe46c20e5e",
                },
                "ledgerIds": {
                    "description": (
                        "Stores an array of Ledger entity IDs that are "
                        "reachable (routable) via this Cactus Node. This "
                        "information is used by the client side SDK API client to "
                        "figure out at runtime where to send API requests that are "
                        "specific to a certain ledger such as requests to execute "
                        "transactions."
                    ),
                    "type": "array",
                    "nullable": False,
                    "minItems": 0,
                    "maxItems": MAX_COLLECTION_ITEMS,
                    "default": [],
                    "items": _ref("LedgerId"),
                },
                "pluginInstanceIds": {
                    "type": "array",
                    "nullable": False,
                    "minItems": 0,
                    "maxItems": MAX_COLLECTION_ITEMS,
                    "default": [],
                    "items": _ref("PluginInstanceId"),
                },
            },
        },
    ],
}

_PLUGIN_INSTANCE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "packageName"],
    "properties": {
        "id": _ref("PluginInstanceId"),
        "packageName": {
            "type": "string",
            "minLength": 1,
            "maxLength": 4096,
            "nullable": False,
        },
    },
}


# ---------------------------------------------------------------------------
# JSON Web Signatures (RFC 7515)
# ---------------------------------------------------------------------------

# header.payload.signature, the signature segment may be empty (unsecured JWS)
JWS_COMPACT_PATTERN = r"^[a-zA-Z0-9\-_]+?\.[a-zA-Z0-9\-_]+?\.([a-zA-Z0-9\-_]+)?$"

_JWS_COMPACT_SCHEMA: dict[str, Any] = {
    "description": (
        "A JSON Web Signature. See: "
        "https://tools.ietf.org/html/rfc7515 for info about standard."
    ),
    "type": "string",
    "minLength": 5,
    "maxLength": 65535,
    "pattern": JWS_COMPACT_PATTERN,
    "example": (
        "eyJhbGciOiJIUzI1NiJ9."
        "eyJuYW1lIjoiSm9obiBEb2UiLCJpYXQiOjE1MTYyMzkwMjJ9."
        "DOCNCqEMN7CQ_z-RMndiyldljXOk6WFIZxRzNF5Ylg4"
    ),
}

_JWS_RECIPIENT_SCHEMA: dict[str, Any] = {
    "description": (
        "A JSON Web Signature. See: "
        "https://tools.ietf.org/html/rfc7515 for info about standard."
    ),
    "type": "object",
    "required": ["signature"],
    "properties": {
        "signature": {"type": "string"},
        "protected": {"type": "string"},
        "header": {"type": "object", "additionalProperties": True},
    },
}

_JWS_GENERAL_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["payload", "signatures"],
    "properties": {
        "payload": {"type": "string", "minLength": 1, "maxLength": 65535},
        "signatures": {"type": "array", "items": _ref("JWSRecipient")},
    },
}


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

CACTUS_OPEN_API_JSON: dict[str, Any] = {
    "openapi": OPENAPI_VERSION,
    "info": {
        "title": "Hyperledger Core API",
        "description": (
            "Contains/describes the core API types for Cactus. Does "
            "not describe actual endpoints on its own as this is left to the "
            "implementing plugins who can import and re-use commonly needed type "
            "definitions from this specification. One example of said commonly "
            "used type definitions would be the types related to consortium "
            "management, cactus nodes, ledgers, etc.."
        ),
        "version": "0.2.0",
    },
    "servers": [
        {
            "url": "https://www.cactus.stream/{basePath}",
            "description": "Public test instance",
            "variables": {"basePath": {"default": ""}},
        },
        {
            "url": "http://localhost:4000/{basePath}",
            "description": "Local test instance",
            "variables": {"basePath": {"default": ""}},
        },
    ],
    "components": {
        "schemas": {
            "ConsensusAlgorithmFamily": _CONSENSUS_ALGORITHM_FAMILY_SCHEMA,
            **_PRIMARY_KEY_SCHEMAS,
            "ConsortiumDatabase": _CONSORTIUM_DATABASE_SCHEMA,
            "Ledger": _LEDGER_SCHEMA,
            "LedgerType": _LEDGER_TYPE_SCHEMA,
            "Consortium": _CONSORTIUM_SCHEMA,
            "ConsortiumMember": _CONSORTIUM_MEMBER_SCHEMA,
            "CactusNodeMeta": _CACTUS_NODE_META_SCHEMA,
            "CactusNode": _CACTUS_NODE_SCHEMA,
            "PluginInstance": _PLUGIN_INSTANCE_SCHEMA,
            "JWSCompact": _JWS_COMPACT_SCHEMA,
            "JWSRecipient": _JWS_RECIPIENT_SCHEMA,
            "JWSGeneral": _JWS_GENERAL_SCHEMA,
        },
    },
    # Shared types only; endpoints are declared by the plugins.
    "paths": {},
}
