"""Tests for account lifecycle: login/logout, profile, soft delete and role changes."""

import unittest
from datetime import UTC, datetime, timedelta

from poetsite.core.roles import Role
from poetsite.models import Subscriber, User
from support import PASSWORD, AppHarness, make_user


class TestLoginEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        make_user(self.h.db, "admin@example.com", role=Role.ADMIN, name="Sompadok")

    def tearDown(self) -> None:
        self.h.close()

    def test_login_sets_http_only_cookie(self) -> None:
        r = self.h.login("admin@example.com")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.json()["is_admin"])
        self.assertEqual(r.json()["role_label"], "অ্যাডমিন")
        cookie = r.headers["set-cookie"]
        self.assertIn("poetsite_session=", cookie)
        self.assertIn("HttpOnly", cookie)

    def test_wrong_password_and_unknown_email_same_response(self) -> None:
        wrong = self.h.login("admin@example.com", "wrong-password")
        unknown = self.h.login("nobody@example.com")
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(wrong.json(), unknown.json())

    def test_missing_credentials(self) -> None:
        r = self.h.client.post("/api/v1/auth/login", json={"email": "admin@example.com"})
        self.assertEqual(r.status_code, 401)

    def test_me_and_logout(self) -> None:
        self.h.login("admin@example.com")
        self.assertEqual(self.h.client.get("/api/v1/auth/me").json()["user"]["name"], "Sompadok")
        self.h.client.post("/api/v1/auth/logout")
        self.assertEqual(self.h.client.get("/api/v1/auth/me").status_code, 401)

    def test_role_change_reaches_existing_session(self) -> None:
        self.h.login("admin@example.com")
        user = self.h.db.query(User).filter(User.email == "admin@example.com").one()
        user.role = Role.USER.value
        self.h.db.commit()

        r = self.h.client.get("/api/v1/auth/me")
        self.assertEqual(r.json()["user"]["role"], "USER")
        self.assertFalse(r.json()["is_admin"])
        self.assertIn("poetsite_session=", r.headers.get("set-cookie", ""))
        # the re-issued cookie now carries USER, so the gate turns the admin away
        gate = self.h.client.get("/admin", follow_redirects=False)
        self.assertEqual(gate.headers["location"], "/")


class TestRegister(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()

    def tearDown(self) -> None:
        self.h.close()

    def _register(self, email: str = "new@example.com", password: str = "secret1"):
        return self.h.client.post(
            "/api/v1/auth/register", json={"name": "Notun", "email": email, "password": password}
        )

    def test_register_then_login(self) -> None:
        self.assertEqual(self._register().status_code, 201)
        user = self.h.db.query(User).filter(User.email == "new@example.com").one()
        self.assertEqual(user.role, "USER")
        self.assertEqual(self.h.login("new@example.com", "secret1").status_code, 200)

    def test_duplicate_email(self) -> None:
        self._register()
        self.assertEqual(self._register().status_code, 400)

    def test_short_password(self) -> None:
        self.assertEqual(self._register(password="123").status_code, 400)


class TestProfile(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        self.user = make_user(self.h.db, "user@example.com")
        make_user(self.h.db, "taken@example.com").username = "taken"
        self.h.db.commit()
        self.h.login("user@example.com")

    def tearDown(self) -> None:
        self.h.close()

    def _update(self, **body):
        return self.h.client.put("/api/v1/profile", json=body)

    def test_username_change_and_cooldown(self) -> None:
        r = self._update(username="kobi-bhokto")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["user"]["username"], "kobi-bhokto")
        self.assertEqual(self._update(username="another-name").status_code, 403)
        # resubmitting the current username is not a change
        self.assertEqual(self._update(username="kobi-bhokto").status_code, 200)

    def test_cooldown_expires(self) -> None:
        self.user.username = "old-name"
        self.user.last_username_change = datetime.now(UTC) - timedelta(days=91)
        self.h.db.commit()
        self.assertEqual(self._update(username="new-name").status_code, 200)

    def test_username_taken_and_invalid(self) -> None:
        self.assertEqual(self._update(username="taken").status_code, 409)
        self.assertEqual(self._update(username="কবি").status_code, 400)

    def test_newsletter_toggle(self) -> None:
        self._update(notifications={"newsletter": True})
        sub = self.h.db.query(Subscriber).filter(Subscriber.email == "user@example.com").one()
        self.assertTrue(sub.is_active)

    def test_password_change(self) -> None:
        bad = self.h.client.put(
            "/api/v1/profile/password",
            json={"current_password": "nope", "new_password": "brand-new"},
        )
        self.assertEqual(bad.status_code, 400)
        ok = self.h.client.put(
            "/api/v1/profile/password",
            json={"current_password": PASSWORD, "new_password": "brand-new"},
        )
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(self.h.login("user@example.com", "brand-new").status_code, 200)

    def test_soft_delete_blocks_login_and_drops_session(self) -> None:
        r = self.h.client.delete("/api/v1/profile")
        self.assertEqual(r.status_code, 200)
        self.h.db.expire_all()
        user = self.h.db.get(User, self.user.id)
        self.assertTrue(user.is_deleted)
        self.assertEqual(user.name, "Deleted User")
        self.assertTrue(user.email.endswith("@deleted.com"))
        self.assertEqual(self.h.client.get("/api/v1/auth/me").status_code, 401)
        self.assertEqual(self.h.login("user@example.com").status_code, 401)

    def test_deleted_flag_alone_blocks_login(self) -> None:
        self.user.is_deleted = True
        self.h.db.commit()
        r = self.h.login("user@example.com")
        self.assertEqual(r.status_code, 403)
        self.assertEqual(self.h.client.get("/api/v1/auth/me").status_code, 401)


class TestRoleChanges(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        self.super = make_user(self.h.db, "super@example.com", role=Role.SUPER_ADMIN)
        self.admin = make_user(self.h.db, "admin@example.com", role=Role.ADMIN)
        self.other_admin = make_user(self.h.db, "admin2@example.com", role=Role.ADMIN)
        self.user = make_user(self.h.db, "user@example.com", role=Role.USER)

    def tearDown(self) -> None:
        self.h.close()

    def _change(self, user_id: int, role: Role):
        return self.h.client.put(
            "/api/v1/admin/users/role", json={"user_id": user_id, "new_role": role.value}
        )

    def test_admin_promotes_user_below_own_level(self) -> None:
        self.h.login("admin@example.com")
        r = self._change(self.user.id, Role.MANAGER)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["user"]["role"], "MANAGER")

    def test_admin_cannot_grant_own_level(self) -> None:
        self.h.login("admin@example.com")
        self.assertEqual(self._change(self.user.id, Role.ADMIN).status_code, 403)

    def test_admin_cannot_touch_peer(self) -> None:
        self.h.login("admin@example.com")
        self.assertEqual(self._change(self.other_admin.id, Role.USER).status_code, 403)

    def test_cannot_change_self(self) -> None:
        self.h.login("super@example.com")
        self.assertEqual(self._change(self.super.id, Role.USER).status_code, 400)

    def test_super_admin_can_appoint_admin(self) -> None:
        self.h.login("super@example.com")
        self.assertEqual(self._change(self.user.id, Role.ADMIN).status_code, 200)

    def test_user_list_requires_administrative_role(self) -> None:
        self.h.login("user@example.com")
        self.assertEqual(self.h.client.get("/api/v1/admin/users").status_code, 403)
        self.h.login("admin@example.com")
        r = self.h.client.get("/api/v1/admin/users")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()["users"]), 4)
        self.assertNotIn("password_hash", r.json()["users"][0])


if __name__ == "__main__":
    unittest.main()
