# filename: openai_service.py
# location: app/services/

import json
import logging

import openai
from flask import current_app
from openai import OpenAI

from app.errors import UpstreamError

logger = logging.getLogger(__name__)

WORD_COUNTS = {"short": 300, "medium": 800, "long": 1500}

CHAT_SYSTEM_PROMPT = (
    "You are a helpful assistant on a portfolio website. Provide concise, accurate answers "
    "about web development, programming, and professional topics. Keep responses friendly and "
    "informative. If asked about the portfolio owner, provide information based on their profile "
    "data. Limit responses to 3-4 sentences unless a detailed explanation is requested."
)

NO_RECOMMENDATIONS = "Unable to generate recommendations at this time."


def get_client():
    """One OpenAI client per app, created on first use."""
    client = current_app.extensions.get("openai_client")
    if client is None:
        api_key = current_app.config.get("OPENAI_API_KEY")
        if not api_key:
            raise UpstreamError("OpenAI API key is not configured")
        client = OpenAI(api_key=api_key)
        current_app.extensions["openai_client"] = client
    return client


def _is_rate_limit(error):
    if isinstance(error, openai.RateLimitError):
        return True
    if getattr(error, "status_code", None) == 429:
        return True
    return getattr(error, "code", None) == "insufficient_quota"


def _create_completion(**kwargs):
    try:
        return get_client().chat.completions.create(
            model=current_app.config.get("OPENAI_MODEL", "gpt-4o"),
            **kwargs
        )
    except openai.OpenAIError as e:
        logger.error(f"❌ OpenAI request failed: {e}")
        if _is_rate_limit(e):
            raise UpstreamError(
                "OpenAI API rate limit reached. Please try again later.", code="rate_limit"
            )
        raise UpstreamError("AI service request failed. Please try again later.")


def _complete_json(prompt, temperature, strict=True):
    """
    Send one user prompt in JSON mode and return the parsed object. With
    ``strict=False`` an unparsable answer gives None instead of an error.
    """
    completion = _create_completion(
        messages=[{"role": "user", "content": prompt}],
        response_format={"type": "json_object"},
        temperature=temperature,
    )
    content = completion.choices[0].message.content
    if not content:
        raise UpstreamError("AI service returned an empty response")
    try:
        result = json.loads(content)
    except ValueError:
        result = None
    if isinstance(result, dict):
        return result

    logger.error(f"❌ AI returned invalid JSON: {content[:200]}")
    if not strict:
        return None
    raise UpstreamError("AI service returned an invalid response")


def generate_blog_post(title=None, topic=None, keywords=None, length="medium"):
    """
    Generate a blog post draft.

    Returns a dict with title, content (HTML), summary, imagePrompt, tags and
    readingTime in minutes.
    """
    keywords = keywords or []
    word_count = WORD_COUNTS.get(length, WORD_COUNTS["medium"])

    prompt = "Generate a professional blog post"
    if title:
        prompt += f' with the title "{title}"'
    if topic:
        prompt += f" about {topic}"
    if keywords:
        prompt += f" including the keywords: {', '.join(keywords)}"
    prompt += f""".
    The blog post should be approximately {word_count} words.

    Format your response as a valid JSON object with the following fields:
    - title: A catchy title for the blog post
    - content: The complete blog post content with HTML formatting
    - summary: A brief summary of the article (max 50 words)
    - imagePrompt: A prompt that could be used to generate a relevant image
    - tags: An array of 3-5 relevant tags for the blog post
    - readingTime: Estimated reading time in minutes
    """

    result = _complete_json(prompt, temperature=0.7)

    tags = result.get("tags") or []
    if isinstance(tags, str):
        tags = [t.strip() for t in tags.split(",") if t.strip()]
    try:
        reading_time = max(1, int(result.get("readingTime") or 1))
    except (TypeError, ValueError):
        reading_time = max(1, word_count // 200)

    return {
        "title": result.get("title") or title or "",
        "content": result.get("content", ""),
        "summary": result.get("summary", ""),
        "imagePrompt": result.get("imagePrompt", ""),
        "tags": tags,
        "readingTime": reading_time,
    }


def generate_blog_suggestions(user_profile, existing_topics=None):
    existing_topics = existing_topics or []
    prompt = f"""Based on this professional profile and existing blog topics, suggest 5 new blog post ideas that would be relevant to their expertise.

    Professional profile: {user_profile}
    """
    if existing_topics:
        prompt += f"Existing blog topics: {', '.join(existing_topics)}"
    prompt += """

    Provide your response as a JSON object with a "suggestions" array containing strings, each representing a blog post idea."""

    result = _complete_json(prompt, temperature=0.8)
    suggestions = result.get("suggestions") or []
    return [str(s) for s in suggestions]


def analyze_blog_content(content):
    """SEO suggestions and keyword density for a blog post body."""
    truncated = content[:4000] + "..." if len(content) > 4000 else content

    prompt = f"""Analyze this blog content for SEO improvement opportunities:

    {truncated}

    Provide your response as a JSON object with:
    1. "suggestions" - an array of specific SEO improvement suggestions
    2. "keywordDensity" - an object with key terms and their frequency percentages
    """

    result = _complete_json(prompt, temperature=0.5)
    return {
        "suggestions": result.get("suggestions") or [],
        "keywordDensity": result.get("keywordDensity") or {},
    }


def _clamp_score(value):
    try:
        return max(0, min(100, float(value)))
    except (TypeError, ValueError):
        return 0


def generate_content_recommendations(user_interests, current_content, catalog, count=3):
    """
    Rank catalog items (blogs, projects, skills) against the visitor's interests.

    ``catalog`` is ``{"blogs": [...], "projects": [...], "skills": [...]}`` as
    built by the recommendations route.
    """
    blogs = "\n".join(
        f"- {b['title']}: {b['summary']} (Tags: {', '.join(b['tags'])})" for b in catalog.get("blogs", [])
    )
    projects = "\n".join(
        f"- {p['title']}: {p['description']} (Category: {p['category']})" for p in catalog.get("projects", [])
    )
    skills = "\n".join(f"- {s['name']} (Category: {s['category']})" for s in catalog.get("skills", []))

    prompt = f"""Based on the user's interests and the current content they're viewing, recommend {count} other content items from the available portfolio content.

    User interests: {', '.join(user_interests)}

    Current content: {current_content}

    Available content:

    Blogs:
    {blogs}

    Projects:
    {projects}

    Skills:
    {skills}

    Provide your response as a JSON object with:
    1. "items" - an array of recommended content items, each with:
       - "title": The title of the content
       - "type": The type of content ("blog", "project", or "skill")
       - "description": A brief description of why this is relevant
       - "relevanceScore": A number from 0-100 indicating how relevant this is to the user
       - "url": The URL to the content (for blogs: "/blog/{{slug}}", for projects: "/projects#{{id}}", for skills: "/skills#{{id}}")
    2. "reasoning": A brief explanation of why these items were recommended
    """

    result = _complete_json(prompt, temperature=0.7, strict=False)
    if not isinstance(result, dict):
        return {"items": [], "reasoning": NO_RECOMMENDATIONS}

    items = []
    for item in (result.get("items") or [])[:count]:
        if not isinstance(item, dict):
            continue
        items.append({
            "title": item.get("title", ""),
            "type": item.get("type", ""),
            "description": item.get("description", ""),
            "relevanceScore": _clamp_score(item.get("relevanceScore")),
            "url": item.get("url", ""),
        })

    return {"items": items, "reasoning": result.get("reasoning") or ""}


def process_chat(messages):
    """
    Answer the latest turn of a conversation. The caller resends the whole
    history every time; nothing is kept here.
    """
    processed = list(messages)
    if not processed or processed[0]["role"] != "system":
        processed.insert(0, {"role": "system", "content": CHAT_SYSTEM_PROMPT})

    completion = _create_completion(messages=processed, max_tokens=500, temperature=0.7)

    message = completion.choices[0].message.content or "I'm sorry, I couldn't generate a response."
    usage = completion.usage
    if usage is not None:
        usage = {
            "prompt_tokens": usage.prompt_tokens,
            "completion_tokens": usage.completion_tokens,
            "total_tokens": usage.total_tokens,
        }
    return {"message": message, "usage": usage}
