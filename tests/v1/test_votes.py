# tests/v1/test_votes.py
"""Tests for the anonymous vote endpoint."""

from __future__ import annotations

import uuid

import pytest
from fastapi import status

from tests.conftest import fetch_report

KNOWN_VOTER = "3b241101-e2bb-4255-8caf-4136c566a962"
FIXED_VOTER = "9c5b94b1-35ad-49bb-b118-8e8fc24abf80"


def _vote(client, report_id: str, direction: str = "up"):
    return client.post(f"/api/v1/reports/{report_id}/vote", json={"direction": direction})


def test_fresh_browser_vote_then_repeat(client, db_session, test_report) -> None:
    first = _vote(client, test_report.id)
    assert first.status_code == status.HTTP_200_OK
    assert first.json()["upvotes"] == 1
    assert first.json()["downvotes"] == 0
    voter_id = first.cookies.get("voter_id")
    assert voter_id

    cookie_header = first.headers["set-cookie"].lower()
    assert "httponly" in cookie_header
    assert "max-age=31536000" in cookie_header

    second = _vote(client, test_report.id)
    assert second.status_code == status.HTTP_409_CONFLICT
    assert second.json() == {"error": "You already voted on this report."}
    # The browser already holds an identity, so nothing new is issued.
    assert "voter_id" not in second.cookies

    report = fetch_report(db_session, test_report.id)
    assert (report.upvotes, report.downvotes) == (1, 0)


def test_downvote(client, test_report) -> None:
    response = _vote(client, test_report.id, "down")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["downvotes"] == 1


def test_changing_direction_is_still_a_duplicate(client, db_session, test_report) -> None:
    assert _vote(client, test_report.id, "up").status_code == status.HTTP_200_OK
    assert _vote(client, test_report.id, "down").status_code == status.HTTP_409_CONFLICT
    report = fetch_report(db_session, test_report.id)
    assert (report.upvotes, report.downvotes) == (1, 0)


def test_existing_voter_cookie_is_reused(client, db_session, test_report) -> None:
    client.cookies.set("voter_id", KNOWN_VOTER)
    response = _vote(client, test_report.id)
    assert response.status_code == status.HTTP_200_OK
    assert "voter_id" not in response.cookies

    from pothole_watch.models import ReportVote

    vote = db_session.query(ReportVote).filter_by(report_id=test_report.id).one()
    assert vote.voter_id == KNOWN_VOTER
    assert vote.value == 1


def test_duplicate_from_cookieless_client_still_gets_cookie(
    app, client, db_session, test_report, monkeypatch
) -> None:
    from pothole_watch.api.v1.endpoints import votes as votes_endpoint

    monkeypatch.setattr(votes_endpoint, "new_voter_id", lambda: FIXED_VOTER)
    assert _vote(client, test_report.id).status_code == status.HTTP_200_OK

    # A browser that lost its cookie but lands on the same identity.
    client.cookies.clear()
    response = _vote(client, test_report.id)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.cookies.get("voter_id") == FIXED_VOTER


def test_different_voters_each_count(app, db_session, test_report) -> None:
    from fastapi.testclient import TestClient

    for _ in range(3):
        with TestClient(app, base_url="http://test") as browser:
            assert _vote(browser, test_report.id).status_code == status.HTTP_200_OK

    assert fetch_report(db_session, test_report.id).upvotes == 3


def test_invalid_direction(client, test_report) -> None:
    response = _vote(client, test_report.id, "sideways")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_missing_direction(client, test_report) -> None:
    response = client.post(f"/api/v1/reports/{test_report.id}/vote", json={})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_vote_nonexistent_report(client) -> None:
    response = _vote(client, "does-not-exist")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Report not found"}


def test_vote_nonexistent_report_still_issues_cookie(client) -> None:
    response = _vote(client, "does-not-exist")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    voter_id = response.cookies.get("voter_id")
    assert voter_id
    uuid.UUID(voter_id)
    assert "max-age=31536000" in response.headers["set-cookie"].lower()


@pytest.mark.parametrize(
    "cookie_value",
    ["not-a-uuid", "x" * 200, "3b241101-e2bb-4255-8caf-4136c566a962-extra"],
)
def test_malformed_voter_cookie_is_replaced(
    client, db_session, test_report, cookie_value: str
) -> None:
    client.cookies.set("voter_id", cookie_value)
    response = _vote(client, test_report.id)
    assert response.status_code == status.HTTP_200_OK

    issued = response.cookies.get("voter_id")
    assert issued and issued != cookie_value
    uuid.UUID(issued)

    from pothole_watch.models import ReportVote

    vote = db_session.query(ReportVote).filter_by(report_id=test_report.id).one()
    assert vote.voter_id == issued
