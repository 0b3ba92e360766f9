from dataclasses import dataclass
from typing import Dict, Any

@dataclass(frozen=True)
class ParsedMessage:
    """Structured representation of a single exported chat line."""
    date: str
    time: str
    sender: str
    text: str
    word_count: int
    sentiment: str

    def to_dict(self) -> Dict[str, Any]:
        """Output mapping with the camelCase keys downstream analytics expects."""
        return {
            "date": self.date,
            "time": self.time,
            "sender": self.sender,
            "text": self.text,
            "wordCount": self.word_count,
            "sentiment": self.sentiment,
        }
