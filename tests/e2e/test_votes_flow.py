"""End-to-end tests for voting on approved terms."""

import pytest
from fastapi.testclient import TestClient

from lingo.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import MODERATOR_EMAIL, auth_headers, make_token


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(container=build_test_container()))


@pytest.fixture
def moderator():
    return auth_headers(make_token(MODERATOR_EMAIL))


@pytest.fixture
def voter():
    return auth_headers(make_token("luna@example.com"))


def _content(client, moderator, term="Drip", approve=True) -> int:
    response = client.post(
        "/contents", json={"term": term, "definition": "Style"}, headers=moderator
    )
    content_id = response.json()["id"]
    if approve:
        client.put(
            f"/contents/{content_id}/review",
            json={"decision": "APPROVE"},
            headers=moderator,
        )
    return content_id


class TestVotes:
    """Casting, switching and clearing votes."""

    def test_switching_vote_counts_once(self, client, moderator, voter):
        """Up then down leaves one down vote."""
        # Arrange
        content_id = _content(client, moderator)

        # Act
        first = client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "THUMBS_UP"},
            headers=voter,
        )
        second = client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "THUMBS_DOWN"},
            headers=voter,
        )

        # Assert
        assert first.status_code == 200
        assert first.json()["thumbs_up"] == 1
        assert second.json() == {
            "content_id": content_id,
            "thumbs_up": 0,
            "thumbs_down": 1,
            "user_vote": "THUMBS_DOWN",
        }

    def test_same_vote_twice_is_noop(self, client, moderator, voter):
        content_id = _content(client, moderator)

        for _ in range(2):
            response = client.post(
                f"/contents/{content_id}/votes",
                json={"vote_type": "thumbs_up"},
                headers=voter,
            )

        assert response.json()["thumbs_up"] == 1

    def test_clear_vote_is_idempotent(self, client, moderator, voter):
        content_id = _content(client, moderator)
        client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "THUMBS_UP"},
            headers=voter,
        )

        first = client.delete(f"/contents/{content_id}/votes", headers=voter)
        second = client.delete(f"/contents/{content_id}/votes", headers=voter)

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["thumbs_up"] == 0
        assert second.json()["user_vote"] is None

    def test_summary_reports_own_vote(self, client, moderator, voter):
        content_id = _content(client, moderator)
        client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "THUMBS_DOWN"},
            headers=moderator,
        )

        mine = client.get(f"/contents/{content_id}/votes", headers=voter).json()
        theirs = client.get(f"/contents/{content_id}/votes", headers=moderator).json()

        assert mine["thumbs_down"] == 1
        assert mine["user_vote"] is None
        assert theirs["user_vote"] == "THUMBS_DOWN"

    def test_vote_on_pending_content_conflicts(self, client, moderator, voter):
        content_id = _content(client, moderator, approve=False)

        response = client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "THUMBS_UP"},
            headers=voter,
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "InvalidStateError"

    def test_unknown_vote_type(self, client, moderator, voter):
        content_id = _content(client, moderator)

        response = client.post(
            f"/contents/{content_id}/votes",
            json={"vote_type": "MEH"},
            headers=voter,
        )

        assert response.status_code == 400
        assert response.json()["field"] == "vote_type"

    def test_voting_requires_authentication(self, client, moderator):
        content_id = _content(client, moderator)

        response = client.post(
            f"/contents/{content_id}/votes", json={"vote_type": "THUMBS_UP"}
        )

        assert response.status_code == 401


class TestApprovedWithVotes:
    """Dictionary listing with counts."""

    def test_lists_every_approved_item_with_counts(self, client, moderator, voter):
        drip = _content(client, moderator, term="Drip")
        sus = _content(client, moderator, term="Sus")
        _content(client, moderator, term="Pending", approve=False)
        client.post(
            f"/contents/{sus}/votes", json={"vote_type": "THUMBS_UP"}, headers=voter
        )
        client.post(
            f"/contents/{sus}/votes",
            json={"vote_type": "THUMBS_UP"},
            headers=moderator,
        )

        response = client.get("/contents/approved-with-votes", headers=voter)

        assert response.status_code == 200
        items = response.json()["contents"]
        assert [item["content"]["id"] for item in items] == [drip, sus]
        assert items[1]["content"]["term"] == "Sus"
        assert items[1]["content"]["status"] == "APPROVED"
        assert "id" not in items[0]
        assert items[0]["thumbs_up"] == 0
        assert items[1]["thumbs_up"] == 2
        assert items[1]["user_vote"] == "THUMBS_UP"
        assert items[0]["user_vote"] is None
