"""Prompt templates for locating a Rumble video's thumbnail with Gemini"""

SYSTEM_PROMPT = """You are a video metadata assistant with access to Google Search.
Given a link to a Rumble video, find the public page for that video and report
its title and the direct URL of its cover image (thumbnail).

Rules:
- Use the highest resolution cover image you can find
- thumbnailUrl must be a direct image URL, not the video page
- Do not invent URLs. If no image can be found, set thumbnailUrl to null
- If the title cannot be determined, set title to null

Return ONLY a JSON object matching this schema, with no other text:
{
  "title": "string or null",
  "thumbnailUrl": "string or null"
}"""


def build_user_prompt(url: str) -> str:
    """Build the user prompt for one Rumble link"""
    return f"""Analyze this Rumble link: {url}

Find the video title and the direct URL of the highest resolution thumbnail available."""
