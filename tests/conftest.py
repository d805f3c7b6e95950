"""Keep the bot tests independent of the developer's environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DOCS_REPO_TOKEN", "DOC_ISSUE_BOT_CONFIG", "GITHUB_WEBHOOK_SECRET",
                 "GITHUB_EVENT_NAME", "GITHUB_EVENT_PATH"):
        monkeypatch.delenv(name, raising=False)
