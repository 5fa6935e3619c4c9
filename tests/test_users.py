import pytest

from app.models import User, UserRole


def test_list_users_hides_password(client, user, admin_headers):
    response = client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200
    users = response.json()
    assert {u["email"] for u in users} == {"admin@example.com", "user@example.com"}
    for u in users:
        assert set(u) == {"id", "name", "email", "role", "createdAt"}


def test_update_role(client, session, user, admin_headers):
    response = client.put(f"/api/users/{user.id}/role", json={"role": "admin"}, headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user.id
    assert body["role"] == "admin"
    assert "passwordHash" not in body

    session.refresh(user)
    assert user.role == UserRole.ADMIN


@pytest.mark.parametrize("role", ["superuser", "Admin", "", None])
def test_update_role_rejects_unknown_role(client, session, user, admin_headers, role):
    response = client.put(f"/api/users/{user.id}/role", json={"role": role}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "role"

    session.refresh(user)
    assert user.role == UserRole.USER


def test_update_role_missing_user(client, admin_headers):
    response = client.put("/api/users/nope/role", json={"role": "user"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_update_role_requires_admin(client, session, user, user_headers):
    response = client.put(f"/api/users/{user.id}/role", json={"role": "admin"}, headers=user_headers)
    assert response.status_code == 403
    session.refresh(user)
    assert session.get(User, user.id).role == UserRole.USER
