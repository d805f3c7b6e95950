"""
Entry point for running the bot as a single CI step instead of a webhook server.

The workflow runner provides the event name in GITHUB_EVENT_NAME and writes the event payload to the file named by
GITHUB_EVENT_PATH. The exit status tells the workflow whether the docs issue could be created.
"""
import json
import os
import sys

from botConfig import ConfigError, load_config
from labelEvent import parse_label_event
from mirrorTrigger import RemoteCallFailure, mirror_label_event


def main():
    event_name = os.getenv("GITHUB_EVENT_NAME")
    event_path = os.getenv("GITHUB_EVENT_PATH")
    if not event_name or not event_path:
        print("GITHUB_EVENT_NAME and GITHUB_EVENT_PATH must both be set", flush=True)
        return 2

    try:
        with open(event_path, "r") as f:
            payload = json.load(f)
        config = load_config()
    except (OSError, json.JSONDecodeError, ConfigError) as e:
        print(f"Could not load the event or the config: {e}", flush=True)
        return 2

    if not isinstance(payload, dict):
        print(f"Event file {event_path} does not contain a JSON object", flush=True)
        return 2

    event = parse_label_event(event_name, payload)
    if event is None:
        print(f"Event: {event_name} is not a label being applied, nothing to do", flush=True)
        return 0

    try:
        mirror_label_event(event, config)
    except RemoteCallFailure as e:
        print(f"Creating the docs issue failed: {e}", flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
