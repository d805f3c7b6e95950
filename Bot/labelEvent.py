"""Label events delivered by GitHub, reduced to what the mirror needs."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class EventType(str, Enum):
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"


# GitHub event names (webhook header or GITHUB_EVENT_NAME) and the payload key holding the labelled item
event_names = {
    "issues": (EventType.ISSUE, "issue"),
    "pull_request": (EventType.PULL_REQUEST, "pull_request"),
    "pull_request_target": (EventType.PULL_REQUEST, "pull_request"),
}


class LabelEvent(BaseModel):
    event_type: EventType
    label_name: str
    source_title: str
    source_url: str


def parse_label_event(event_name: str, payload: Any) -> Optional[LabelEvent]:
    """
    Build a LabelEvent from a raw GitHub payload.

    Returns None for anything that is not a label being applied to an issue or pull request, since those events are
    simply not of interest to the bot. Payloads missing the label name or the item's title or link count as such.
    """
    if event_name not in event_names or not isinstance(payload, dict):
        return None
    if payload.get("action") != "labeled":
        return None

    event_type, item_key = event_names[event_name]
    item = payload.get(item_key)
    label = payload.get("label")
    if not isinstance(item, dict) or not isinstance(label, dict):
        return None

    label_name = label.get("name")
    title = item.get("title")
    url = item.get("html_url")
    if not all(isinstance(value, str) for value in (label_name, title, url)):
        return None

    return LabelEvent(event_type=event_type, label_name=label_name, source_title=title, source_url=url)
