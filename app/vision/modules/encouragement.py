"""
Canned feedback strings for the mood and posture results.
"""

import random
from typing import Dict, List, Optional

from app.helpers.enums import MoodType, PostureType

MOOD_ENCOURAGEMENTS: Dict[MoodType, List[str]] = {
    MoodType.HAPPY: [
        "🌟 Amazing! Your smile is beautiful! Keep that positive energy flowing!",
        "😊 You're glowing! That smile looks great on you!",
        "✨ Wonderful! Your happiness is contagious!",
        "🎉 Perfect! You're radiating positive vibes!",
    ],
    MoodType.NEUTRAL: [
        "😊 Try giving us a smile! Even a forced smile releases endorphins!",
        "🌈 Come on, you can do it! A smile can change your whole mood!",
        "💪 Let's see that smile! Your brain will thank you for it!",
        "✨ Smile for me! It's scientifically proven to boost your mood!",
    ],
    MoodType.SAD: [
        "🤗 I know it might be hard, but try smiling! It really helps!",
        "💙 Even a small smile can make a difference. You've got this!",
        "🌸 Smiling releases serotonin - give it a try, even if you don't feel like it!",
        "🌟 Your smile matters! Let's turn that frown upside down!",
    ],
    MoodType.STRESSED: [
        "🧘 Take a deep breath and smile! It'll help reduce stress hormones!",
        "💆 Relax those facial muscles and smile! You're doing great!",
        "🌺 A smile can lower cortisol levels. Give it a try!",
        "✨ Let go of that tension with a smile! You deserve to feel better!",
    ],
    MoodType.ANALYZING: [
        "👀 Looking at your expression...",
        "🔍 Analyzing your mood...",
        "⏳ Just a moment, reading your face...",
    ],
}

POSTURE_ENCOURAGEMENTS: Dict[PostureType, List[str]] = {
    PostureType.GOOD: [
        "✅ Great! Keep maintaining this posture",
        "🌟 Nice and tall! Your spine thanks you!",
        "💪 Perfect alignment, keep it up!",
    ],
    PostureType.SLOUCHING: [
        "💡 Sit up straight, align your back",
        "🪑 Scoot back in your chair and lift your chest!",
        "🌱 Imagine a string pulling the top of your head up!",
    ],
    PostureType.LEANING_LEFT: [
        "💡 Move your shoulders up and level them",
        "⚖️ You're tilting left, even out your shoulders!",
        "🧍 Shift your weight back to the center!",
    ],
    PostureType.LEANING_RIGHT: [
        "💡 Move your shoulders up and level them",
        "⚖️ You're tilting right, even out your shoulders!",
        "🧍 Shift your weight back to the center!",
    ],
    PostureType.FORWARD_HEAD: [
        "💡 Pull your head back, align with shoulders",
        "🐢 Tuck your chin gently and bring your ears over your shoulders!",
        "🖥️ Try raising your screen to eye level!",
    ],
}

# Single-line suggestions shown in the analysis history
MOOD_SUGGESTIONS: Dict[MoodType, str] = {
    MoodType.SAD: "💡 Take a deep breath, try a quick stretch",
    MoodType.STRESSED: "💡 Take a deep breath, try a quick stretch",
    MoodType.HAPPY: "😊 Great mood! Keep it up!",
}
NEUTRAL_MOOD_SUGGESTION = "😐 Neutral mood detected"

ISSUE_SUGGESTIONS: Dict[str, str] = {
    "Slouching": "💡 Sit up straight, align your back",
    "Leaning": "💡 Move your shoulders up and level them",
    "Forward head": "💡 Pull your head back, align with shoulders",
}
GOOD_POSTURE_SUGGESTION = "✅ Great! Keep maintaining this posture"


def pick_mood_encouragement(mood: MoodType, rng: Optional[random.Random] = None) -> str:
    messages = MOOD_ENCOURAGEMENTS.get(mood) or MOOD_ENCOURAGEMENTS[MoodType.NEUTRAL]
    return (rng or random).choice(messages)


def pick_posture_encouragement(status: PostureType, rng: Optional[random.Random] = None) -> str:
    messages = POSTURE_ENCOURAGEMENTS.get(status) or POSTURE_ENCOURAGEMENTS[PostureType.GOOD]
    return (rng or random).choice(messages)


def mood_suggestion(mood: MoodType) -> str:
    return MOOD_SUGGESTIONS.get(mood, NEUTRAL_MOOD_SUGGESTION)


def posture_suggestions(issues: List[str]) -> List[str]:
    """One suggestion per issue family, in issue order."""
    if not issues:
        return [GOOD_POSTURE_SUGGESTION]

    suggestions: List[str] = []
    for prefix, suggestion in ISSUE_SUGGESTIONS.items():
        if any(issue.startswith(prefix) for issue in issues) and suggestion not in suggestions:
            suggestions.append(suggestion)
    return suggestions
