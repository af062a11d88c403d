# /tests/test_blogs_router.py

import pytest


@pytest.fixture
def owner(signup):
    return signup(email="owner@example.com")


@pytest.fixture
def intruder(signup):
    return signup(email="intruder@example.com")


@pytest.fixture
def blog(client, owner):
    _, headers = owner
    response = client.post("/api/blogs", json={"title": "Tea Notes", "slug": "tea-notes"}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _create_article(client, headers, blog_id, slug, status="draft", content="<p>Green tea is great.</p>"):
    response = client.post(
        "/api/articles",
        json={"blogId": blog_id, "title": slug.title(), "slug": slug, "content": content, "status": status},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_blog_applies_defaults(blog, owner):
    user, _ = owner
    assert blog["userId"] == user["id"]
    assert blog["status"] == "active"
    assert blog["theme"] == "default"


def test_duplicate_slug_is_a_conflict(client, blog, owner):
    _, headers = owner
    response = client.post("/api/blogs", json={"title": "Other", "slug": "tea-notes"}, headers=headers)
    assert response.status_code == 409


def test_blog_is_publicly_readable(client, blog):
    response = client.get(f"/api/blogs/{blog['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Tea Notes"


def test_missing_blog_is_404(client):
    response = client.get("/api/blogs/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Blog not found"}


def test_only_owner_can_update_or_delete(client, blog, intruder):
    _, headers = intruder
    assert client.patch(f"/api/blogs/{blog['id']}", json={"title": "Hacked"}, headers=headers).status_code == 403
    response = client.delete(f"/api/blogs/{blog['id']}", headers=headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized"}


def test_owner_update_bumps_updated_at(client, blog, owner):
    _, headers = owner
    response = client.patch(f"/api/blogs/{blog['id']}", json={"description": "All about tea."}, headers=headers)
    assert response.status_code == 200
    assert response.json()["description"] == "All about tea."
    assert response.json()["updatedAt"] >= blog["updatedAt"]


def test_user_blogs_lists_only_mine(client, blog, owner, intruder):
    assert len(client.get("/api/user/blogs", headers=owner[1]).json()) == 1
    assert client.get("/api/user/blogs", headers=intruder[1]).json() == []


def test_public_listing_hides_drafts(client, blog, owner):
    _, headers = owner
    _create_article(client, headers, blog["id"], "draft-post")
    published = _create_article(client, headers, blog["id"], "live-post", status="published")

    public = client.get(f"/api/blogs/{blog['id']}/articles").json()
    admin = client.get(f"/api/blogs/{blog['id']}/articles/admin", headers=headers).json()

    assert [a["id"] for a in public] == [published["id"]]
    assert published["publishedAt"] is not None
    assert len(admin) == 2


def test_publishing_a_draft_stamps_published_at(client, blog, owner):
    _, headers = owner
    article = _create_article(client, headers, blog["id"], "later")
    assert article["publishedAt"] is None

    response = client.patch(f"/api/articles/{article['id']}", json={"status": "published"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["publishedAt"] is not None


def test_article_reports_reading_time(client, blog, owner):
    _, headers = owner
    long_content = "<p>" + " ".join(["word"] * 450) + "</p>"
    article = _create_article(client, headers, blog["id"], "long-read", content=long_content)
    assert article["readingTime"] == 3
    assert article["readingTimeLabel"] == "3 min read"


def test_intruder_cannot_write_into_foreign_blog(client, blog, intruder):
    _, headers = intruder
    response = client.post(
        "/api/articles",
        json={"blogId": blog["id"], "title": "Spam", "slug": "spam", "content": "buy now"},
        headers=headers,
    )
    assert response.status_code == 403


def test_delete_blog_removes_its_articles(client, blog, owner):
    _, headers = owner
    article = _create_article(client, headers, blog["id"], "doomed", status="published")

    response = client.delete(f"/api/blogs/{blog['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/api/articles/{article['id']}").status_code == 404


def test_responses_use_camel_case_keys(client, blog, owner):
    _, headers = owner
    article = _create_article(client, headers, blog["id"], "camel", status="published")

    assert {"userId", "createdAt", "updatedAt"} <= set(blog)
    assert "user_id" not in blog
    assert {"blogId", "publishedAt", "coverImage", "authorBio", "readingTime"} <= set(article)
    assert article["blogId"] == blog["id"]


@pytest.mark.parametrize("field", ["title", "slug", "status"])
def test_null_for_required_blog_field_is_invalid_input(client, blog, owner, field):
    _, headers = owner
    response = client.patch(f"/api/blogs/{blog['id']}", json={field: None}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}
    assert client.get(f"/api/blogs/{blog['id']}").json()["title"] == "Tea Notes"


@pytest.mark.parametrize("field", ["title", "content", "slug", "tags", "status"])
def test_null_for_required_article_field_is_invalid_input(client, blog, owner, field):
    _, headers = owner
    article = _create_article(client, headers, blog["id"], "keep-me")

    response = client.patch(f"/api/articles/{article['id']}", json={field: None}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


def test_null_clears_optional_article_field(client, blog, owner):
    _, headers = owner
    article = _create_article(client, headers, blog["id"], "with-excerpt")
    client.patch(f"/api/articles/{article['id']}", json={"excerpt": "Short."}, headers=headers)

    response = client.patch(f"/api/articles/{article['id']}", json={"excerpt": None}, headers=headers)

    assert response.status_code == 200
    assert response.json()["excerpt"] is None
