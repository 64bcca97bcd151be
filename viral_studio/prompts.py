"""Prompt text sent to the AI gateway."""

TITLE_SYSTEM_PROMPT = """You are a YouTube title expert. Generate 5 viral, clickable YouTube titles for the given topic.

Rules:
- Titles should be catchy and create curiosity
- Use power words like "SECRET", "AMAZING", "SHOCKING", "ULTIMATE", etc.
- Keep titles under 60 characters
- Use numbers when possible (e.g., "Top 5", "10 Secrets")
- Include emojis where appropriate
- Make titles that encourage clicks

Return ONLY a JSON array of 5 title strings, nothing else. Example:
["Title 1 🔥", "Title 2 😱", "Title 3 💯", "Title 4 🚀", "Title 5 ⚡"]"""


def title_user_prompt(topic: str) -> str:
    return f"Generate 5 viral YouTube titles for this topic: {topic}"


def thumbnail_prompt(topic: str, title: str) -> str:
    return f"""Create a vibrant, eye-catching YouTube thumbnail image for a video about: "{topic}".
The video title is: "{title}".

Style requirements:
- Ultra high resolution, professional YouTube thumbnail
- Bold, vibrant colors that pop
- Clear focal point
- High contrast for visibility at small sizes
- Modern, trendy design
- 16:9 aspect ratio
- No text overlay (keep it clean)
- Professional, high-quality look that encourages clicks"""
