from app.models import Profile, Resume

PROFILE = {
    "fullName": "Alex Johnson",
    "title": "Full Stack Developer",
    "bio": "Builds things for the web.",
    "email": "alex@example.com",
    "phone": "+1 (123) 456-7890",
    "location": "San Francisco, CA",
    "avatarUrl": "https://i.pravatar.cc/300",
    "headerImage": "https://example.com/header.jpg",
}


def test_profile_absent_is_404(client):
    response = client.get("/api/profile")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Profile not found"}


def test_profile_write_requires_login(client):
    assert client.post("/api/profile", json=PROFILE).status_code == 401


def test_profile_is_created_then_updated_in_place(app, auth_client, client):
    created = auth_client.post("/api/profile", json=PROFILE)
    assert created.status_code == 201

    updated = auth_client.patch("/api/profile", json={"title": "Staff Engineer"})
    assert updated.status_code == 200

    profile = client.get("/api/profile").get_json()
    assert profile["title"] == "Staff Engineer"
    assert profile["fullName"] == "Alex Johnson"
    assert profile["id"] == created.get_json()["id"]
    with app.app_context():
        assert Profile.query.count() == 1


def test_profile_rejects_bad_email(auth_client):
    response = auth_client.post("/api/profile", json=dict(PROFILE, email="not-an-email"))

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "email"


def test_first_profile_write_must_be_complete(auth_client):
    response = auth_client.patch("/api/profile", json={"title": "Staff Engineer"})

    assert response.status_code == 400


def test_resume_absent_is_404(client):
    assert client.get("/api/resume").status_code == 404


def test_resume_upsert_keeps_single_row(app, auth_client, client):
    auth_client.post("/api/resume", json={"filename": "cv-2023.pdf", "url": "https://example.com/cv-2023.pdf"})
    response = auth_client.post("/api/resume", json={"filename": "cv-2024.pdf", "url": "https://example.com/cv-2024.pdf"})

    assert response.status_code == 200
    resume = client.get("/api/resume").get_json()
    assert resume["filename"] == "cv-2024.pdf"
    assert resume["uploadedAt"] is not None
    with app.app_context():
        assert Resume.query.count() == 1


def test_profile_patch_accepts_snake_case_keys(auth_client, client):
    auth_client.post("/api/profile", json=PROFILE)

    auth_client.patch("/api/profile", json={"full_name": "Alex J."})

    assert client.get("/api/profile").get_json()["fullName"] == "Alex J."
