"""Tests for submissions, moderation and the poet's writings."""

import unittest

from poetsite.core.roles import Role
from poetsite.models import Audio, BlogPost, Category, ContentStatus, GalleryImage, Tribute, Video
from poetsite.schemas.auth import SessionUser
from poetsite.services.submissions import effective_status
from support import AppHarness, make_user

LONG_CONTENT = "এটি একটি দীর্ঘ লেখা। " * 10


class TestEffectiveStatus(unittest.TestCase):
    def _user(self, role: Role) -> SessionUser:
        return SessionUser(id=1, role=role, email="a@example.com")

    def test_user_is_always_pending(self) -> None:
        for requested in (None, ContentStatus.PUBLISHED, ContentStatus.DRAFT):
            self.assertEqual(effective_status(self._user(Role.USER), requested), ContentStatus.PENDING)

    def test_admin_roles_choose(self) -> None:
        for role in (Role.SUPER_ADMIN, Role.ADMIN, Role.MANAGER, Role.EDITOR):
            self.assertEqual(
                effective_status(self._user(role), ContentStatus.PUBLISHED), ContentStatus.PUBLISHED
            )

    def test_admin_default_is_pending(self) -> None:
        self.assertEqual(effective_status(self._user(Role.ADMIN), None), ContentStatus.PENDING)


class TestSubmissionEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        make_user(self.h.db, "user@example.com", role=Role.USER)
        make_user(self.h.db, "editor@example.com", role=Role.EDITOR)
        make_user(self.h.db, "admin@example.com", role=Role.ADMIN)

    def tearDown(self) -> None:
        self.h.close()

    def _submit_blog(self, title: str = "আমার প্রথম ব্লগ", status: str = "PUBLISHED"):
        return self.h.client.post(
            "/api/v1/submissions",
            json={"kind": "blog", "title": title, "content": LONG_CONTENT, "status": status},
        )

    def test_user_publish_request_lands_pending(self) -> None:
        self.h.login("user@example.com")
        r = self._submit_blog()
        self.assertEqual(r.status_code, 201)
        body = r.json()
        self.assertEqual(body["status"], "PENDING")
        post = self.h.db.get(BlogPost, body["id"])
        self.assertEqual(post.status, "PENDING")
        self.assertIsNone(post.published_at)

    def test_editor_can_publish(self) -> None:
        self.h.login("editor@example.com")
        r = self._submit_blog()
        self.assertEqual(r.json()["status"], "PUBLISHED")
        self.assertIsNotNone(self.h.db.get(BlogPost, r.json()["id"]).published_at)

    def test_same_title_gets_suffixed_slug(self) -> None:
        self.h.login("user@example.com")
        first = self._submit_blog().json()["slug"]
        second = self._submit_blog().json()["slug"]
        self.assertEqual(first, "আমার-প্রথম-ব্লগ")
        self.assertEqual(second, "আমার-প্রথম-ব্লগ-1")

    def test_short_title_rejected(self) -> None:
        self.h.login("user@example.com")
        self.assertEqual(self._submit_blog(title="abc").status_code, 400)

    def test_tribute_pending(self) -> None:
        self.h.login("user@example.com")
        r = self.h.client.post(
            "/api/v1/submissions",
            json={"kind": "tribute", "content": "বিনম্র শ্রদ্ধা জানাই", "status": "PUBLISHED"},
        )
        self.assertEqual(r.status_code, 201)
        self.assertEqual(self.h.db.get(Tribute, r.json()["id"]).status, "PENDING")

    def test_requires_session(self) -> None:
        self.assertEqual(self._submit_blog().status_code, 401)

    def test_my_posts(self) -> None:
        self.h.login("user@example.com")
        self._submit_blog()
        r = self.h.client.get("/api/v1/blog/mine", params={"status": "PENDING"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["total"], 1)

    def test_moderation(self) -> None:
        self.h.login("user@example.com")
        post_id = self._submit_blog().json()["id"]

        self.h.login("editor@example.com")
        self.assertEqual(self.h.client.post(f"/api/v1/admin/blog/{post_id}/approve").status_code, 403)

        self.h.login("admin@example.com")
        r = self.h.client.post(f"/api/v1/admin/blog/{post_id}/approve")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["status"], "PUBLISHED")

        r = self.h.client.post(f"/api/v1/admin/blog/{post_id}/reject")
        self.assertEqual(r.json()["status"], "ARCHIVED")

    def test_moderating_missing_record(self) -> None:
        self.h.login("admin@example.com")
        self.assertEqual(self.h.client.post("/api/v1/admin/tribute/999/approve").status_code, 404)

    def test_gallery_pending(self) -> None:
        self.h.login("user@example.com")
        r = self.h.client.post(
            "/api/v1/submissions",
            json={"kind": "gallery", "url": "https://example.com/photo.jpg", "status": "PUBLISHED"},
        )
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["status"], "PENDING")
        self.assertEqual(self.h.db.get(GalleryImage, r.json()["id"]).status, "PENDING")

    def test_category_reused_by_exact_name_only(self) -> None:
        self.h.login("admin@example.com")

        def post(category: str) -> int:
            r = self.h.client.post(
                "/api/v1/submissions",
                json={
                    "kind": "blog",
                    "title": "বিভাগ পরীক্ষা",
                    "content": LONG_CONTENT,
                    "category_name": category,
                },
            )
            return self.h.db.get(BlogPost, r.json()["id"]).category_id

        first = post("Poetry")
        second = post("poetry")
        self.assertNotEqual(first, second)
        self.assertEqual(post("Poetry"), first)
        self.assertEqual(self.h.db.get(Category, first).slug, "poetry")
        self.assertEqual(self.h.db.get(Category, second).slug, "poetry-1")


class TestMediaSubmissions(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        make_user(self.h.db, "user@example.com", role=Role.USER)
        make_user(self.h.db, "admin@example.com", role=Role.ADMIN)

    def tearDown(self) -> None:
        self.h.close()

    def _audio(self, **fields):
        body = {"kind": "audio", "title": "আমার গান", "audio_url": "https://example.com/a.mp3", **fields}
        return self.h.client.post("/api/v1/submissions", json=body)

    def test_audio_pending_with_bengali_slug(self) -> None:
        self.h.login("user@example.com")
        r = self._audio(status="PUBLISHED")
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["slug"], "আমার-গান")
        audio = self.h.db.get(Audio, r.json()["id"])
        self.assertEqual(audio.status, "PENDING")
        self.assertEqual(self._audio().json()["slug"], "আমার-গান-1")

    def test_audio_requires_url(self) -> None:
        self.h.login("user@example.com")
        r = self._audio(audio_url="  ")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["message"], "শিরোনাম এবং অডিও URL প্রয়োজন")

    def test_audio_moderation(self) -> None:
        self.h.login("user@example.com")
        audio_id = self._audio().json()["id"]
        self.h.login("admin@example.com")
        r = self.h.client.post(f"/api/v1/admin/audio/{audio_id}/approve")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["kind"], "audio")
        self.h.db.expire_all()
        self.assertEqual(self.h.db.get(Audio, audio_id).status, "PUBLISHED")

    def test_video_extracts_youtube_id(self) -> None:
        self.h.login("user@example.com")
        r = self.h.client.post(
            "/api/v1/submissions",
            json={
                "kind": "video",
                "title": "আবৃত্তি",
                "youtube_url": "https://www.youtube.com/watch?v=abc123&t=5",
                "status": "PUBLISHED",
            },
        )
        self.assertEqual(r.status_code, 201)
        video = self.h.db.get(Video, r.json()["id"])
        self.assertEqual(video.status, "PENDING")
        self.assertEqual(video.youtube_id, "abc123")
        self.assertEqual(video.thumbnail, "https://img.youtube.com/vi/abc123/maxresdefault.jpg")

    def test_video_short_link(self) -> None:
        self.h.login("admin@example.com")
        r = self.h.client.post(
            "/api/v1/submissions",
            json={
                "kind": "video",
                "title": "গান",
                "youtube_url": "https://youtu.be/xyz789",
                "status": "PUBLISHED",
            },
        )
        video = self.h.db.get(Video, r.json()["id"])
        self.assertEqual(video.youtube_id, "xyz789")
        self.assertEqual(video.status, "PUBLISHED")


class TestPublicBlog(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        make_user(self.h.db, "user@example.com", role=Role.USER, name="Pathok")
        make_user(self.h.db, "admin@example.com", role=Role.ADMIN)

    def tearDown(self) -> None:
        self.h.close()

    def test_only_published_posts_are_listed(self) -> None:
        self.h.login("user@example.com")
        r = self.h.client.post(
            "/api/v1/submissions",
            json={"kind": "blog", "title": "পাঠকের ভাবনা", "content": LONG_CONTENT},
        )
        post_id = r.json()["id"]
        self.h.client.cookies.clear()

        listing = self.h.client.get("/api/v1/blog")
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(listing.json()["total"], 0)

        self.h.login("admin@example.com")
        self.h.client.post(f"/api/v1/admin/blog/{post_id}/approve")
        self.h.client.cookies.clear()

        listing = self.h.client.get("/api/v1/blog").json()
        self.assertEqual(listing["total"], 1)
        self.assertEqual(listing["total_pages"], 1)
        item = listing["posts"][0]
        self.assertEqual(item["id"], post_id)
        self.assertEqual(item["author"]["name"], "Pathok")
        self.assertEqual(item["category"], "সাধারণ")
        self.assertIsNotNone(item["published_at"])


class TestWritingEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.h = AppHarness()
        make_user(self.h.db, "admin@example.com", role=Role.ADMIN)
        make_user(self.h.db, "user@example.com", role=Role.USER)

    def tearDown(self) -> None:
        self.h.close()

    def _create(self, **fields):
        body = {"title": "আমার সোনার বাংলা", "content": "...", "status": "PUBLISHED", **fields}
        return self.h.client.post("/api/v1/admin/writings", json=body)

    def test_admin_creates_with_bengali_slug(self) -> None:
        self.h.login("admin@example.com")
        r = self._create()
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["slug"], "আমার-সোনার-বাংলা")
        self.assertEqual(self._create().json()["slug"], "আমার-সোনার-বাংলা-1")

    def test_explicit_bengali_slug_is_kept(self) -> None:
        self.h.login("admin@example.com")
        r = self._create(slug="সোনার বাংলা")
        self.assertEqual(r.json()["slug"], "সোনার-বাংলা")

    def test_explicit_slug_must_be_free(self) -> None:
        self.h.login("admin@example.com")
        self._create(slug="bangla")
        self.assertEqual(self._create(slug="bangla").status_code, 409)

    def test_user_cannot_create(self) -> None:
        self.h.login("user@example.com")
        self.assertEqual(self._create().status_code, 403)

    def test_lookup_counts_views(self) -> None:
        self.h.login("admin@example.com")
        slug = self._create().json()["slug"]
        self.h.client.get(f"/api/v1/writings/{slug}")
        r = self.h.client.get(f"/api/v1/writings/{slug}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["writing"]["views"], 2)
        self.assertEqual(self.h.client.get("/api/v1/writings/nope").status_code, 404)


if __name__ == "__main__":
    unittest.main()
