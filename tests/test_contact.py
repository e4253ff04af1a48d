from app.models import Contact, Feedback

MESSAGE = {"name": "Jo", "email": "jo@example.com", "subject": "Hi", "message": "Let's talk"}


def test_contact_message_is_stored(app, client):
    response = client.post("/api/contact", json=MESSAGE)

    assert response.status_code == 201
    assert response.get_json() == {"message": "Message sent successfully"}
    with app.app_context():
        assert Contact.query.one().email == "jo@example.com"


def test_contact_without_email_is_rejected(app, client):
    payload = dict(MESSAGE)
    del payload["email"]

    response = client.post("/api/contact", json=payload)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid contact form data"
    with app.app_context():
        assert Contact.query.count() == 0


def test_contact_list_is_for_the_owner(auth_client, client):
    client.post("/api/contact", json=MESSAGE)

    assert client.get("/api/contact").status_code == 401
    messages = auth_client.get("/api/contact").get_json()
    assert [m["subject"] for m in messages] == ["Hi"]


def test_feedback_rating_bounds(app, client):
    assert client.post("/api/feedback", json={"rating": 0}).status_code == 400
    assert client.post("/api/feedback", json={"rating": 6}).status_code == 400

    response = client.post("/api/feedback", json={"rating": 5, "comment": "Great site"})

    assert response.status_code == 201
    with app.app_context():
        assert Feedback.query.one().rating == 5


def test_feedback_comment_is_optional(auth_client, client):
    client.post("/api/feedback", json={"rating": 4, "comment": ""})

    feedback = auth_client.get("/api/feedback").get_json()

    assert feedback[0]["comment"] is None


def test_dashboard_stats(auth_client, client):
    client.post("/api/contact", json=MESSAGE)
    auth_client.post("/api/skills", json={"name": "Go", "category": "Backend", "level": 60})

    assert client.get("/api/stats").status_code == 401
    stats = auth_client.get("/api/stats").get_json()
    assert stats["messagesCount"] == 1
    assert stats["skillsCount"] == 1
    assert stats["blogPostsCount"] == 0
