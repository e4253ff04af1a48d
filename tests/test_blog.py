from app.models import BlogComment, BlogPost
from app.routes.blog_routes import estimate_reading_time

POST = {
    "title": "Hello, World!",
    "content": "<p>" + "word " * 450 + "</p>",
    "summary": "First post",
    "tags": "python, flask",
}


def create_post(auth_client, **overrides):
    response = auth_client.post("/api/blog", json=dict(POST, **overrides))
    assert response.status_code == 201
    return response.get_json()


def test_reading_time_ignores_markup():
    assert estimate_reading_time("<p>" + "a " * 200 + "</p>") == 1
    assert estimate_reading_time("<p>" + "a " * 201 + "</p>") == 2
    assert estimate_reading_time("") == 1


def test_empty_blog_is_not_seeded_on_read(app, client):
    assert client.get("/api/blog").get_json() == []
    with app.app_context():
        assert BlogPost.query.count() == 0


def test_create_post_fills_slug_and_reading_time(auth_client, client):
    post = create_post(auth_client)

    assert post["slug"] == "hello-world"
    assert post["readingTime"] == 3
    assert post["tags"] == ["python", "flask"]
    assert post["isAiGenerated"] is False
    assert client.get("/api/blog/slug/hello-world").get_json()["id"] == post["id"]


def test_create_post_requires_login(client):
    assert client.post("/api/blog", json=POST).status_code == 401


def test_duplicate_slug_is_conflict(app, auth_client):
    create_post(auth_client)

    response = auth_client.post("/api/blog", json=dict(POST, summary="Another"))

    assert response.status_code == 409
    with app.app_context():
        assert BlogPost.query.count() == 1


def test_renaming_onto_taken_slug_is_conflict(auth_client, client):
    create_post(auth_client)
    other = create_post(auth_client, title="Second post")

    response = auth_client.patch(f"/api/blog/{other['id']}", json={"slug": "hello-world"})

    assert response.status_code == 409
    assert client.get(f"/api/blog/{other['id']}").get_json()["slug"] == "second-post"


def test_patch_post_keeps_other_fields(auth_client):
    post = create_post(auth_client)

    response = auth_client.patch(f"/api/blog/{post['id']}", json={"summary": "Edited"})

    assert response.status_code == 200
    edited = response.get_json()
    assert edited["summary"] == "Edited"
    assert edited["slug"] == "hello-world"
    assert edited["tags"] == ["python", "flask"]


def test_unknown_slug_is_404(client):
    response = client.get("/api/blog/slug/nope")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Blog post not found"}


def test_posts_listed_newest_first(auth_client, client):
    create_post(auth_client, title="Older")
    create_post(auth_client, title="Newer")

    titles = [p["title"] for p in client.get("/api/blog").get_json()]

    assert titles == ["Newer", "Older"]


def test_comments_are_public_and_ordered(auth_client, client):
    post = create_post(auth_client)
    url = f"/api/blog/{post['id']}/comments"

    first = client.post(url, json={"name": "Sam", "email": "sam@example.com", "comment": "Nice"})
    client.post(url, json={"name": "Kim", "email": "kim@example.com", "comment": "Thanks"})

    assert first.status_code == 201
    assert first.get_json()["postId"] == post["id"]
    assert [c["name"] for c in client.get(url).get_json()] == ["Sam", "Kim"]


def test_comment_on_missing_post_is_404(client):
    response = client.post("/api/blog/99/comments", json={"name": "Sam", "email": "sam@example.com", "comment": "Hi"})

    assert response.status_code == 404


def test_comment_needs_valid_email(auth_client, client):
    post = create_post(auth_client)

    response = client.post(
        f"/api/blog/{post['id']}/comments", json={"name": "Sam", "email": "sam", "comment": "Hi"}
    )

    assert response.status_code == 400


def test_deleting_post_removes_its_comments(app, auth_client, client):
    post = create_post(auth_client)
    client.post(f"/api/blog/{post['id']}/comments", json={"name": "Sam", "email": "sam@example.com", "comment": "Nice"})

    response = auth_client.delete(f"/api/blog/{post['id']}")

    assert response.status_code == 200
    assert client.get(f"/api/blog/{post['id']}").status_code == 404
    with app.app_context():
        assert BlogComment.query.count() == 0


def test_delete_comment_requires_login(auth_client, client):
    post = create_post(auth_client)
    comment = client.post(
        f"/api/blog/{post['id']}/comments", json={"name": "Sam", "email": "sam@example.com", "comment": "Nice"}
    ).get_json()

    assert client.delete(f"/api/blog/comments/{comment['id']}").status_code == 401
    assert auth_client.delete(f"/api/blog/comments/{comment['id']}").status_code == 200
    assert client.get(f"/api/blog/{post['id']}/comments").get_json() == []


def test_patch_content_refreshes_reading_time(auth_client):
    post = create_post(auth_client)

    response = auth_client.patch(f"/api/blog/{post['id']}", json={"content": "<p>" + "word " * 900 + "</p>"})

    assert response.get_json()["readingTime"] == 5


def test_patch_keeps_explicit_reading_time(auth_client):
    post = create_post(auth_client)

    response = auth_client.patch(
        f"/api/blog/{post['id']}", json={"content": "<p>short</p>", "readingTime": 7}
    )

    assert response.get_json()["readingTime"] == 7


def test_patch_without_content_keeps_reading_time(auth_client):
    post = create_post(auth_client, readingTime=9)

    response = auth_client.patch(f"/api/blog/{post['id']}", json={"featured_image": "https://example.com/a.png"})

    body = response.get_json()
    assert body["readingTime"] == 9
    assert body["featuredImage"] == "https://example.com/a.png"
