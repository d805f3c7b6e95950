import re
import requests

from typing import Any, Callable, Optional

from github import Auth, Github, GithubException
from botConfig import get_token
from labelEvent import LabelEvent

placeholder_pattern = re.compile(r"/source_(title|link|type)")


class RemoteCallFailure(Exception):
    """The docs repository could not be reached, refused the credentials, or rejected the new issue."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


def github_client(token: str) -> Github:
    # No retries: each label event makes at most one create-issue request
    return Github(auth=Auth.Token(token), retry=None)


# Template string formatting function for replacing placeholders with data from the labelled item
def format_template(event: LabelEvent, template: str) -> str:
    # Single pass, so placeholder text inside the item's own title is left alone
    values = {"title": event.source_title, "link": event.source_url, "type": event.event_type.value}
    return placeholder_pattern.sub(lambda match: values[match.group(1)], template)


def mirror_label_event(event: LabelEvent, config: dict[str, Any],
                       client_factory: Callable[[str], Github] = github_client) -> Optional[Any]:
    """
    Create the mirror issue in the docs repository for a label event.

    Events whose label is not the trigger label are ignored and None is returned. Otherwise exactly one issue is created
    and returned; nothing is retried, and re-triggering the same label creates another issue.
    """
    if event.label_name != config["trigger-label"]:
        print(f"Label: {event.label_name} is not the trigger label, no docs issue created", flush=True)
        return None

    token = get_token(config)
    if not token:
        raise RemoteCallFailure(f"No token found in the {config['token-env']} environment variable")

    target = f"{config['target-owner']}/{config['target-repo']}"
    title = format_template(event, config["title-template"])
    body = format_template(event, config["body-template"])

    print(f"Creating docs issue in {target} for {event.source_url}", flush=True)
    try:
        repo = client_factory(token).get_repo(target)
        created = repo.create_issue(title=title, body=body)
    except GithubException as e:
        message = e.data.get("message") if isinstance(e.data, dict) else e.data
        raise RemoteCallFailure(f"GitHub rejected the request to {target}: {message}", status=e.status) from e
    except requests.exceptions.RequestException as e:
        raise RemoteCallFailure(f"Could not reach GitHub for {target}: {e}") from e

    print(f"Created docs issue #{created.number}: {created.html_url}", flush=True)
    return created
