import enum


class MoodType(enum.Enum):
    HAPPY = 'Happy'
    NEUTRAL = 'Neutral'
    SAD = 'Sad'
    STRESSED = 'Stressed'
    ANALYZING = 'Analyzing...'


class PostureType(enum.Enum):
    GOOD = 'good'
    SLOUCHING = 'slouching'
    LEANING_LEFT = 'leaning_left'
    LEANING_RIGHT = 'leaning_right'
    FORWARD_HEAD = 'forward_head'


class AnalysisType(enum.Enum):
    MOOD = 'mood'
    POSTURE = 'posture'


class HealthIssue(enum.Enum):
    ANXIETY_STRESS = 'Anxiety/Stress'
    DEPRESSION_MOOD = 'Depression/Mood Issues'
    BACK_POSTURE = 'Back/Posture Problems'
    SLEEP = 'Sleep Issues'


class MentalHealthConcern(enum.Enum):
    ANXIETY = 'Anxiety'
    DEPRESSION = 'Depression'
    STRESS_MANAGEMENT = 'Stress Management'
    MOOD_SWINGS = 'Mood Swings'
