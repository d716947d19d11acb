"""
Habit Generator - suggests habits for a goal, with template fallback
"""
import json
import logging
import random
import re
from typing import Dict, List

from kaizen.core.constants import LLM_MODEL_DEFAULT, LLM_MAX_TOKENS, LLM_TEMPERATURE
from kaizen.core.dependencies import get_openai_client, is_openai_configured
from kaizen.models.report import GeneratedHabit
from kaizen.utils.prompts import HABIT_GENERATION_SYSTEM_PROMPT, format_habit_generation_prompt

logger = logging.getLogger(__name__)

SYSTEM_COLORS = [
    "#007AFF",  # Blue
    "#34C759",  # Green
    "#FF9500",  # Orange
    "#FF3B30",  # Red
    "#AF52DE",  # Purple
    "#FF2D55",  # Pink
    "#5AC8FA",  # Teal
    "#FFCC00",  # Yellow
]

HABIT_TEMPLATES: Dict[str, List[Dict[str, str]]] = {
    "health": [
        {"name": "Morning Exercise", "description": "30 minutes of cardio or strength training"},
        {"name": "Eat Vegetables", "description": "Include vegetables in at least 2 meals"},
        {"name": "Drink Water", "description": "Drink at least 8 glasses of water throughout the day"},
        {"name": "Sleep Schedule", "description": "Go to bed and wake up at consistent times"},
    ],
    "productivity": [
        {"name": "Morning Planning", "description": "Plan your top 3 priorities for the day"},
        {"name": "Deep Work Block", "description": "2 hours of focused work without distractions"},
        {"name": "Inbox Zero", "description": "Process all emails and messages by end of day"},
        {"name": "Learning Time", "description": "Dedicate 30 minutes to learning something new"},
    ],
    "mindfulness": [
        {"name": "Morning Meditation", "description": "10 minutes of quiet meditation or breathing"},
        {"name": "Gratitude Journal", "description": "Write 3 things you are grateful for"},
        {"name": "Evening Reflection", "description": "Review your day and note key learnings"},
        {"name": "Digital Detox", "description": "No screens 1 hour before bed"},
    ],
    "relationships": [
        {"name": "Quality Time", "description": "Spend 30 minutes with loved ones without devices"},
        {"name": "Reach Out", "description": "Message or call a friend or family member"},
        {"name": "Active Listening", "description": "Practice being fully present in conversations"},
        {"name": "Acts of Kindness", "description": "Do something thoughtful for someone"},
    ],
    "fitness": [
        {"name": "Daily Movement", "description": "At least 30 minutes of physical activity"},
        {"name": "Stretch Routine", "description": "10 minutes of stretching morning and evening"},
        {"name": "Track Nutrition", "description": "Log meals and stay within calorie goals"},
        {"name": "Stay Hydrated", "description": "Drink water before, during, and after workouts"},
    ],
    "learning": [
        {"name": "Read Daily", "description": "Read at least 20 pages of a book"},
        {"name": "Practice Skills", "description": "Dedicate 1 hour to deliberate practice"},
        {"name": "Take Notes", "description": "Summarize key learnings in your own words"},
        {"name": "Teach Others", "description": "Share what you learned with someone"},
    ],
}

# Checked in order when no template name appears in the goal
KEYWORD_TEMPLATES = [
    (re.compile(r"\b(fit|exercise|workout|gym|run|walk)\b"), "fitness"),
    (re.compile(r"\b(work|career|focus|time|task|project)\b"), "productivity"),
    (re.compile(r"\b(mind|mental|stress|calm|peace|anxiety)\b"), "mindfulness"),
    (re.compile(r"\b(family|friend|social|relationship|connect)\b"), "relationships"),
    (re.compile(r"\b(learn|study|skill|read|course|knowledge)\b"), "learning"),
]


def template_habits(goal: str) -> List[Dict[str, str]]:
    """
    Pick template habits for a goal by keyword

    Args:
        goal: What the user wants to improve

    Returns:
        Up to 4 habit dicts with name and description (health when nothing matches)
    """
    goal_lower = goal.lower()

    for key, habits in HABIT_TEMPLATES.items():
        if key in goal_lower:
            return habits[:4]

    for pattern, key in KEYWORD_TEMPLATES:
        if pattern.search(goal_lower):
            return HABIT_TEMPLATES[key][:4]

    return HABIT_TEMPLATES["health"][:4]


def _with_colors(habits: List[Dict[str, str]]) -> List[GeneratedHabit]:
    return [
        GeneratedHabit(
            name=habit["name"],
            description=habit["description"],
            color=random.choice(SYSTEM_COLORS)
        )
        for habit in habits
    ]


def _strip_code_fences(content: str) -> str:
    return re.sub(r"```(?:json)?\n?", "", content).strip()


def generate_habits(goal: str) -> List[GeneratedHabit]:
    """
    Suggest 3-5 habits for a goal.

    Uses the LLM when an API key is configured and falls back to templates
    when it is not, or when the call or its JSON fails.

    Args:
        goal: What the user wants to improve

    Returns:
        List of GeneratedHabit with random palette colours
    """
    if not is_openai_configured():
        logger.info("Using fallback habit generation (no OpenAI API key configured)")
        return _with_colors(template_habits(goal))

    try:
        response = get_openai_client().chat.completions.create(
            model=LLM_MODEL_DEFAULT,
            messages=[
                {"role": "system", "content": HABIT_GENERATION_SYSTEM_PROMPT},
                {"role": "user", "content": format_habit_generation_prompt(goal)}
            ],
            response_format={"type": "json_object"},
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS
        )
        content = _strip_code_fences(response.choices[0].message.content or "")
        result = json.loads(content)
        habits = result.get("habits", []) if isinstance(result, dict) else result
        suggestions = [
            {"name": str(h["name"]), "description": str(h.get("description", ""))}
            for h in habits
            if isinstance(h, dict) and h.get("name")
        ]
        if not suggestions:
            raise ValueError("LLM returned no habits")
        return _with_colors(suggestions)
    except Exception as e:
        logger.error(f"OpenAI error, falling back to template habits: {e}")
        return _with_colors(template_habits(goal))
