"""JSON schema for scene files."""

from typing import Any

_ID = {"type": "string", "minLength": 1}

_EFFECT: dict[str, Any] = {
    "type": "object",
    "required": ["type"],
    "oneOf": [
        {
            "properties": {
                "type": {"const": "add_state"},
                "id": _ID,
                "amount": {"type": "integer"},
            },
            "required": ["type", "id"],
            "additionalProperties": False,
        },
        {
            "properties": {
                "type": {"const": "start_dialogue"},
                "path": _ID,
            },
            "required": ["type", "path"],
            "additionalProperties": False,
        },
        {
            "properties": {
                "type": {"const": "activate"},
                "interaction": _ID,
            },
            "required": ["type", "interaction"],
            "additionalProperties": False,
        },
        {
            "properties": {
                "type": {"const": "event"},
                "name": _ID,
            },
            "required": ["type", "name"],
            "additionalProperties": False,
        },
    ],
}

SCENE_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Scene",
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "states": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": _ID,
                    "amount": {"type": "integer"},
                },
                "required": ["id"],
                "additionalProperties": False,
            },
        },
        "interactables": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": _ID,
                    "interactions": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": _ID,
                                "next": {"type": ["string", "null"]},
                                "effects": {"type": "array", "items": _EFFECT},
                            },
                            "required": ["id"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["id"],
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}
