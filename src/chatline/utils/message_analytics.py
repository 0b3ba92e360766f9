from typing import Dict
from src.chatline.schemas import SentimentLabelEnum

FUNNY_TRIGGERS = ("😂", ":)", "haha")
LOVE_TRIGGERS = ("❤", "love", "pyaar")


def count_words(content: str) -> int:
    """Count words split on single spaces (runs of spaces collapse, tabs do not split)."""
    return len([w for w in content.split(" ") if w != ""])


def detect_sentiment(content: str) -> str:
    """Coarse sentiment label from emoji and keyword triggers. Funny wins over love."""
    lowered = content.lower()
    if any(trigger in lowered for trigger in FUNNY_TRIGGERS):
        return SentimentLabelEnum.funny.value
    if any(trigger in lowered for trigger in LOVE_TRIGGERS):
        return SentimentLabelEnum.love.value
    return SentimentLabelEnum.neutral.value


def compute_message_analytics(content: str) -> Dict:
    """Compute analytics for a message during parsing."""
    return {
        'word_count': count_words(content),
        'sentiment': detect_sentiment(content),
    }
