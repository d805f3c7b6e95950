"""GitHub label event payloads shared by the bot tests."""

from __future__ import annotations

ISSUE_URL = "https://github.com/GreptimeTeam/greptimedb/issues/101"
PR_URL = "https://github.com/GreptimeTeam/greptimedb/pull/202"


def issue_payload(label: str, title: str = "Fix typo in install guide", action: str = "labeled") -> dict:
    return {
        "action": action,
        "label": {"name": label},
        "issue": {"number": 101, "title": title, "html_url": ISSUE_URL},
        "repository": {"name": "greptimedb", "owner": {"login": "GreptimeTeam"}},
    }


def pr_payload(label: str, title: str = "Add region failover", action: str = "labeled") -> dict:
    return {
        "action": action,
        "label": {"name": label},
        "pull_request": {"number": 202, "title": title, "html_url": PR_URL},
        "repository": {"name": "greptimedb", "owner": {"login": "GreptimeTeam"}},
    }
