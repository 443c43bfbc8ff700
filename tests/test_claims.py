"""Tests for claiming and stats."""

from foodlink.db.models import Donation
from tests.conftest import DONATION, donate, login_headers, signup


def test_end_to_end_donate_and_claim(client) -> None:
	assert signup(client, "alice", "a@x.com", "pw123").status_code == 201
	login = client.post("/api/login", json={"email": "a@x.com", "password": "pw123"})
	assert login.status_code == 200
	alice = {"Authorization": f"Bearer {login.json()['token']}"}

	created = client.post("/api/donate", json=DONATION, headers=alice)
	assert created.status_code == 201
	assert client.get("/api/user/info", headers=alice).json()["donationsMade"] == 1

	bob = login_headers(client, "bob", "bob@foodlink.org")
	donation_id = created.json()["donation"]["id"]
	claim = client.post("/api/claim", json={"donationId": donation_id}, headers=bob)
	assert claim.status_code == 200
	assert claim.json()["donation"]["claimed"] is True
	assert client.get("/api/user/info", headers=bob).json()["claimedDonations"] == 1

	again = client.post("/api/claim", json={"donationId": donation_id}, headers=bob)
	assert again.status_code == 400


def test_claim_records_claimer(client, alice, bob) -> None:
	donation = donate(client, alice)

	claimed = client.post("/api/claim", json={"donationId": donation["id"]}, headers=bob).json()["donation"]

	assert claimed["claimedBy"] is not None
	assert claimed["claimedBy"] != claimed["donatedBy"]
	assert claimed["claimedAt"]


def test_claimed_donation_is_frozen(client, db, alice, bob) -> None:
	donation = donate(client, alice)
	client.post("/api/claim", json={"donationId": donation["id"]}, headers=bob)

	second = client.post("/api/claim", json={"donationId": donation["id"]}, headers=alice)
	update = client.put(f"/api/donations/{donation['id']}", json={"quantity": 1})
	empty_update = client.put(f"/api/donations/{donation['id']}", json={})
	delete = client.delete(f"/api/donations/{donation['id']}")

	assert second.status_code == 400
	assert second.json()["error"]["message"] == "Donation already claimed."
	assert update.status_code == 400
	assert update.json()["error"]["message"] == "Cannot update a claimed donation."
	assert empty_update.status_code == 400
	assert delete.status_code == 400
	assert delete.json()["error"]["message"] == "Cannot delete a claimed donation."
	row = db.query(Donation).filter(Donation.id == donation["id"]).one()
	assert row.quantity == DONATION["quantity"]
	assert client.get("/api/user/info", headers=alice).json()["claimedDonations"] == 0


def test_claim_requires_token(client, alice) -> None:
	donation = donate(client, alice)

	response = client.post("/api/claim", json={"donationId": donation["id"], "recipientName": "bob"})

	assert response.status_code == 401


def test_claim_unknown_donation(client, bob) -> None:
	response = client.post("/api/claim", json={"donationId": 999}, headers=bob)

	assert response.status_code == 404
	assert client.get("/api/user/info", headers=bob).json()["claimedDonations"] == 0


def test_claim_requires_donation_id(client, bob) -> None:
	response = client.post("/api/claim", json={}, headers=bob)

	assert response.status_code == 400


def test_stats_counts_total_and_claimed(client, alice, bob) -> None:
	assert client.get("/api/stats").json() == {"totalDonations": 0, "claimedDonations": 0}

	first = donate(client, alice)
	donate(client, alice)
	client.post("/api/claim", json={"donationId": first["id"]}, headers=bob)

	stats = client.get("/api/stats").json()
	assert stats == {"totalDonations": 2, "claimedDonations": 1}
	assert stats["totalDonations"] >= stats["claimedDonations"]
