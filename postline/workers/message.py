"""Pub/sub message envelope."""

import json
from dataclasses import dataclass, field
from typing import Any

from postline.exceptions import InvalidMessageError


@dataclass
class Message:
    data: bytes
    message_id: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)


def message_to_json(message: Message) -> Any:
    try:
        return json.loads(message.data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidMessageError(message.message_id, str(e)) from e
