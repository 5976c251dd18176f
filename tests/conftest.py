"""Shared Linear webhook payloads."""

import copy

import pytest

ISSUE_PAYLOAD = {
    "action": "create",
    "type": "Issue",
    "actor": {"name": "Bob"},
    "data": {
        "team": {"key": "ENG", "name": "Engineering"},
        "number": 42,
        "identifier": "ENG-42",
        "title": "Fix bug",
        "url": "https://linear.app/acme/issue/ENG-42/fix-bug",
        "state": {"name": "Done"},
        "priority": 4,
        "assignee": None,
        "labels": [],
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": None,
    },
}

COMMENT_PAYLOAD = {
    "action": "create",
    "type": "Comment",
    "actor": {"name": "Alice"},
    "data": {
        "body": "Looks good to me",
        "issue": {"identifier": "ENG-42"},
        "user": {"name": "Alice"},
        "createdAt": "2024-01-02T12:30:00.000Z",
    },
}


@pytest.fixture
def issue_payload():
    return copy.deepcopy(ISSUE_PAYLOAD)


@pytest.fixture
def comment_payload():
    return copy.deepcopy(COMMENT_PAYLOAD)
