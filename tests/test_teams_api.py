"""
Tests for team creation, invites, membership and renaming.
"""
import pytest

from app.modules.teams import service as team_service
from tests.helpers import create_team


def me(client, headers):
    return client.get("/me", headers=headers).json()


class TestCreateTeam:
    def test_creator_becomes_admin(self, client, supabase, alice):
        team = create_team(client, alice, "A")
        assert team["name"] == "A"
        assert len(team["inviteCode"]) == 8
        int(team["inviteCode"], 16)

        profile = me(client, alice)
        assert profile["role"] == "ADMIN"
        assert profile["teamId"] == team["id"]
        assert "team:rename" in profile["capabilities"]

    def test_name_is_required(self, client, alice):
        for body in ({}, {"name": ""}):
            response = client.post("/team/create", json=body, headers=alice)
            assert response.status_code == 400
            assert response.json() == {"error": "name is required"}

    def test_already_on_team_is_rejected(self, client, supabase, alice):
        create_team(client, alice, "A")
        response = client.post("/team/create", json={"name": "B"}, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"error": "Already in a team"}
        assert len(supabase.tables["teams"]) == 1

    def test_member_cannot_create_either(self, client, alice, bob):
        team = create_team(client, alice)
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        response = client.post("/team/create", json={"name": "B"}, headers=bob)
        assert response.status_code == 400
        assert response.json() == {"error": "Already in a team"}

    def test_invite_code_collision_is_regenerated(self, client, supabase, alice, bob, monkeypatch):
        first = create_team(client, alice, "A")
        codes = iter([first["inviteCode"], "feedbeef"])
        monkeypatch.setattr(team_service, "generate_invite_code", lambda: next(codes))

        second = create_team(client, bob, "B")
        assert second["inviteCode"] == "feedbeef"
        assert len(supabase.tables["teams"]) == 2

    def test_persistent_collision_fails(self, client, supabase, alice, bob, monkeypatch):
        first = create_team(client, alice, "A")
        monkeypatch.setattr(team_service, "generate_invite_code", lambda: first["inviteCode"])

        response = client.post("/team/create", json={"name": "B"}, headers=bob)
        assert response.status_code == 500
        assert len(supabase.tables["teams"]) == 1
        assert me(client, bob)["teamId"] is None


class TestRotateInvite:
    def test_admin_rotates_and_old_code_stops_working(self, client, alice, bob):
        team = create_team(client, alice)
        response = client.post("/team/invite", headers=alice)
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == team["id"]
        assert body["inviteCode"] != team["inviteCode"]

        stale = client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        assert stale.status_code == 404
        fresh = client.post("/team/join", json={"inviteCode": body["inviteCode"]}, headers=bob)
        assert fresh.status_code == 200

    def test_member_is_forbidden(self, client, alice, bob):
        team = create_team(client, alice)
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        response = client.post("/team/invite", headers=bob)
        assert response.status_code == 403
        assert response.json() == {"error": "Only admin can create invite"}

    def test_team_less_member_is_forbidden(self, client, alice):
        response = client.post("/team/invite", headers=alice)
        assert response.status_code == 403

    def test_admin_whose_team_vanished_is_404(self, client, supabase, alice):
        create_team(client, alice)
        user = supabase.tables["users"][0]
        user["team_id"] = "missing-team"
        response = client.post("/team/invite", headers=alice)
        assert response.status_code == 404


class TestJoinTeam:
    def test_join_as_member(self, client, alice, bob):
        team = create_team(client, alice)
        response = client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        assert response.status_code == 200
        assert response.json() == {"ok": True, "teamId": team["id"]}

        profile = me(client, bob)
        assert profile["teamId"] == team["id"]
        assert profile["role"] == "MEMBER"

    def test_new_identity_is_provisioned_on_join(self, client, supabase, alice, bob):
        team = create_team(client, alice)
        assert len(supabase.tables["users"]) == 1
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        assert len(supabase.tables["users"]) == 2

    def test_invite_code_is_required(self, client, alice):
        response = client.post("/team/join", json={}, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"error": "inviteCode is required"}

    def test_unknown_code_is_404(self, client, alice):
        response = client.post("/team/join", json={"inviteCode": "00000000"}, headers=alice)
        assert response.status_code == 404
        assert response.json() == {"error": "Invalid invite code"}

    def test_member_switches_teams(self, client, alice, bob, carol):
        team_a = create_team(client, alice, "A")
        team_b = create_team(client, bob, "B")
        client.post("/team/join", json={"inviteCode": team_a["inviteCode"]}, headers=carol)

        response = client.post("/team/join", json={"inviteCode": team_b["inviteCode"]}, headers=carol)
        assert response.status_code == 200
        profile = me(client, carol)
        assert profile["teamId"] == team_b["id"]
        assert profile["role"] == "MEMBER"

    def test_admin_switching_teams_is_demoted(self, client, alice, bob):
        team_a = create_team(client, alice, "A")
        create_team(client, bob, "B")

        client.post("/team/join", json={"inviteCode": team_a["inviteCode"]}, headers=bob)
        profile = me(client, bob)
        assert profile["teamId"] == team_a["id"]
        assert profile["role"] == "MEMBER"

    def test_admin_rejoining_own_team_is_demoted(self, client, alice):
        team = create_team(client, alice)
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=alice)
        assert me(client, alice)["role"] == "MEMBER"


class TestLeaveTeam:
    def test_leave_resets_membership(self, client, supabase, alice):
        create_team(client, alice)
        response = client.post("/team/leave", headers=alice)
        assert response.status_code == 200
        assert response.json() == {"ok": True}

        profile = me(client, alice)
        assert profile["teamId"] is None
        assert profile["role"] == "MEMBER"
        # the team outlives its last member
        assert len(supabase.tables["teams"]) == 1

    def test_leave_without_team_is_400(self, client, alice):
        response = client.post("/team/leave", headers=alice)
        assert response.status_code == 400
        assert response.json() == {"error": "No team joined"}

    def test_admin_less_team_keeps_members(self, client, alice, bob):
        team = create_team(client, alice)
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        client.post("/team/leave", headers=alice)

        profile = me(client, bob)
        assert profile["teamId"] == team["id"]
        assert profile["role"] == "MEMBER"


class TestRenameTeam:
    def test_admin_renames(self, client, alice):
        team = create_team(client, alice, "A")
        response = client.patch("/team/update", json={"name": "Alpha"}, headers=alice)
        assert response.status_code == 200
        assert response.json() == {"team": {"id": team["id"], "name": "Alpha"}}

    def test_member_is_forbidden(self, client, supabase, alice, bob):
        team = create_team(client, alice, "A")
        client.post("/team/join", json={"inviteCode": team["inviteCode"]}, headers=bob)
        response = client.patch("/team/update", json={"name": "Bobs"}, headers=bob)
        assert response.status_code == 403
        assert response.json() == {"error": "Only admin can rename team"}
        assert supabase.tables["teams"][0]["name"] == "A"

    @pytest.mark.parametrize("body", [{}, {"name": ""}])
    def test_name_is_required(self, client, alice, body):
        create_team(client, alice)
        response = client.patch("/team/update", json=body, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"error": "name is required"}

    def test_without_team_is_400(self, client, alice):
        response = client.patch("/team/update", json={"name": "X"}, headers=alice)
        assert response.status_code == 400
        assert response.json() == {"error": "No team joined"}
