"""Prompts for diary generation."""

from datetime import date

DIARY_SYSTEM_PROMPT = """\
You are an expert developer diary assistant. Your task is to summarize the developer's daily
activities, code snippets, decisions, and other information into a clean, well-structured markdown diary.
The diary should include:
1. A title with the current date, as a level-1 markdown heading
2. A brief executive summary of the day's work
3. Code highlights with proper markdown formatting and syntax highlighting
4. Key decisions and their rationale
5. Challenges faced and solutions implemented
6. Next steps or plans for tomorrow
Use a professional but conversational tone. Format the diary in a way that's easy to read and well-organized."""

ENHANCE_SYSTEM_PROMPT = """\
You are an expert developer diary assistant. Your task is to enhance the provided developer diary
by adding valuable insights, better organization, and professional polish. Consider:
1. Adding helpful section headers if missing
2. Suggesting optimizations or best practices based on code snippets
3. Highlighting potential areas for future improvement
4. Adding context to technical decisions
Maintain the original content and facts, only enhance the presentation and add insights.
Keep the level-1 title heading as the first line. Return only the diary markdown."""


def diary_user_prompt(activity_json: str, today: date) -> str:
    return (
        f"Today's date is {today.isoformat()}.\n\n"
        "Please create a developer diary entry based on the following activity data: "
        f"{activity_json}"
    )


def enhance_user_prompt(diary_markdown: str) -> str:
    return f"Please enhance the following developer diary:\n\n{diary_markdown}"


def diary_template(today: date) -> str:
    """Blank diary skeleton for writing an entry by hand."""
    return f"""# Dev Diary - {today.strftime("%B %d, %Y")}

## Summary
_Today I worked on..._

## Code Highlights

_Add your key code snippets here..._

## Decisions Made

_Document important decisions and their rationale..._

## Challenges & Solutions

_What challenges did you face and how did you solve them?_

## Next Steps

_What's planned for tomorrow?_
"""
