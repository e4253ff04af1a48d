import pytest

from app.models import BlogPost, Profile, Skill, User


@pytest.fixture
def runner(app):
    app.config["ADMIN_USERNAME"] = "owner"
    app.config["ADMIN_PASSWORD"] = "owner-pass"
    return app.test_cli_runner()


def test_seed_all_is_idempotent(app, runner):
    first = runner.invoke(args=["seed-all"])
    second = runner.invoke(args=["seed-all"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert "skipping" in second.output
    with app.app_context():
        assert Profile.query.count() == 1
        assert Skill.query.count() == 12
        assert BlogPost.query.count() == 3
        assert User.query.filter_by(username="owner").count() == 1


def test_seeded_admin_can_log_in(runner, client):
    runner.invoke(args=["seed-all"])

    response = client.post("/api/login", json={"username": "owner", "password": "owner-pass"})

    assert response.status_code == 200


def test_seeded_posts_are_readable_by_slug(runner, client):
    runner.invoke(args=["seed-all"])

    post = client.get("/api/blog/slug/building-accessible-websites").get_json()

    assert post["tags"][0] == "Accessibility"


def test_generated_password_is_printed(app, runner):
    app.config["ADMIN_PASSWORD"] = None

    result = runner.invoke(args=["seed-all"])

    assert "generated password for 'owner'" in result.output


def test_create_user_command(runner, client):
    result = runner.invoke(args=["create-user", "editor", "--password", "editor-pass"])

    assert result.exit_code == 0, result.output
    assert client.post("/api/login", json={"username": "editor", "password": "editor-pass"}).status_code == 200


def test_create_user_rejects_duplicate(runner):
    result = runner.invoke(args=["create-user", "admin", "--password", "whatever"])

    assert result.exit_code != 0
    assert "Username already taken" in result.output
