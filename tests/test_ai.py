import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from app.services import openai_service


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=8, total_tokens=20),
        )


@pytest.fixture
def fake_openai(monkeypatch):
    def install(content=None, error=None):
        completions = FakeCompletions(content, error)
        client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
        monkeypatch.setattr(openai_service, "get_client", lambda: client)
        return completions
    return install


def rate_limit_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.RateLimitError("Rate limit reached", response=httpx.Response(429, request=request), body=None)


def test_chat_prepends_system_prompt(client, fake_openai):
    completions = fake_openai("Hello there!")

    response = client.post("/api/ai/chat", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "Hello there!",
        "usage": {"prompt_tokens": 12, "completion_tokens": 8, "total_tokens": 20},
    }
    sent = completions.calls[0]["messages"]
    assert sent[0] == {"role": "system", "content": openai_service.CHAT_SYSTEM_PROMPT}
    assert sent[1] == {"role": "user", "content": "Hi"}


def test_chat_keeps_caller_system_prompt(client, fake_openai):
    completions = fake_openai("ok")
    messages = [{"role": "system", "content": "Be brief"}, {"role": "user", "content": "Hi"}]

    client.post("/api/ai/chat", json={"messages": messages})

    assert completions.calls[0]["messages"] == messages


@pytest.mark.parametrize("body", [{}, {"messages": "hi"}, {"messages": [{"role": "robot", "content": "x"}]}])
def test_chat_rejects_malformed_messages(client, fake_openai, body):
    completions = fake_openai("unused")

    response = client.post("/api/ai/chat", json=body)

    assert response.status_code == 400
    assert completions.calls == []


def test_rate_limit_is_reported_with_code(client, fake_openai):
    fake_openai(error=rate_limit_error())

    response = client.post("/api/ai/chat", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert response.status_code == 500
    assert response.get_json()["code"] == "rate_limit"


def test_other_upstream_failures_are_general_errors(client, fake_openai):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    fake_openai(error=openai.APIConnectionError(request=request))

    response = client.post("/api/ai/chat", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert response.status_code == 500
    assert response.get_json()["code"] == "general_error"


def test_missing_api_key(app, client):
    app.config["OPENAI_API_KEY"] = None

    response = client.post("/api/ai/chat", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert response.status_code == 500
    assert response.get_json() == {"message": "OpenAI API key is not configured", "code": "general_error"}


def test_generate_blog_requires_login(client, fake_openai):
    fake_openai("{}")

    assert client.post("/api/ai/generate-blog", json={"topic": "Flask"}).status_code == 401


def test_generate_blog(auth_client, fake_openai):
    completions = fake_openai(json.dumps({
        "title": "Flask in Practice",
        "content": "<p>Body</p>",
        "summary": "About Flask",
        "imagePrompt": "A flask",
        "tags": "flask, python",
        "readingTime": "4",
    }))

    response = auth_client.post(
        "/api/ai/generate-blog", json={"topic": "Flask", "keywords": ["blueprints"], "length": "short"}
    )

    assert response.status_code == 200
    draft = response.get_json()
    assert draft["title"] == "Flask in Practice"
    assert draft["tags"] == ["flask", "python"]
    assert draft["readingTime"] == 4
    prompt = completions.calls[0]["messages"][0]["content"]
    assert "about Flask" in prompt
    assert "blueprints" in prompt
    assert "approximately 300 words" in prompt


def test_generate_blog_rejects_unknown_length(auth_client, fake_openai):
    fake_openai("{}")

    response = auth_client.post("/api/ai/generate-blog", json={"topic": "Flask", "length": "epic"})

    assert response.status_code == 400


def test_invalid_json_from_model_is_an_error(auth_client, fake_openai):
    fake_openai("definitely not json")

    response = auth_client.post("/api/ai/analyze-blog", json={"content": "<p>Post</p>"})

    assert response.status_code == 500
    assert response.get_json()["code"] == "general_error"


def test_blog_suggestions(auth_client, fake_openai):
    fake_openai(json.dumps({"suggestions": ["Testing Flask apps", "SQLAlchemy tips"]}))

    response = auth_client.post(
        "/api/ai/blog-suggestions", json={"userProfile": "Python developer", "existingTopics": ["Flask"]}
    )

    assert response.get_json() == {"suggestions": ["Testing Flask apps", "SQLAlchemy tips"]}


def test_analyze_blog(auth_client, fake_openai):
    fake_openai(json.dumps({"suggestions": ["Add headings"], "keywordDensity": {"flask": 2.5}}))

    response = auth_client.post("/api/ai/analyze-blog", json={"content": "<p>Flask</p>"})

    assert response.get_json() == {"suggestions": ["Add headings"], "keywordDensity": {"flask": 2.5}}


def test_recommendations_need_interests(client, fake_openai):
    completions = fake_openai("{}")

    response = client.post(
        "/api/content-recommendations", json={"userInterests": [], "currentContent": "Blog about Flask"}
    )

    assert response.status_code == 400
    assert completions.calls == []


def test_recommendations_are_trimmed_and_clamped(auth_client, client, fake_openai):
    auth_client.post("/api/skills", json={"name": "Flask", "category": "Backend", "level": 80})
    completions = fake_openai(json.dumps({
        "items": [
            {"title": "Flask", "type": "skill", "description": "d", "relevanceScore": 140, "url": "/skills#1"},
            {"title": "Other", "type": "blog", "description": "d", "relevanceScore": "n/a", "url": "/blog/x"},
            {"title": "Extra", "type": "project", "description": "d", "relevanceScore": 50, "url": "/projects#1"},
        ],
        "reasoning": "Matches your interests",
    }))

    response = client.post("/api/content-recommendations", json={
        "userInterests": ["python"],
        "currentContent": "Blog about Flask",
        "count": 2,
    })

    body = response.get_json()
    assert [i["relevanceScore"] for i in body["items"]] == [100, 0]
    assert body["reasoning"] == "Matches your interests"
    assert "- Flask (Category: Backend)" in completions.calls[0]["messages"][0]["content"]


def test_recommendations_fall_back_on_unparsable_answer(client, fake_openai):
    fake_openai("sorry, no JSON today")

    response = client.post(
        "/api/content-recommendations", json={"userInterests": ["python"], "currentContent": "Home page"}
    )

    assert response.status_code == 200
    assert response.get_json() == {"items": [], "reasoning": openai_service.NO_RECOMMENDATIONS}
