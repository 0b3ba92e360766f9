import pytest

from src.chatline.utils.message_analytics import (
    compute_message_analytics,
    count_words,
    detect_sentiment,
)


@pytest.mark.parametrize("text, expected", [
    ("Bhai party kab hai? 😂", 5),
    ("I love this song", 4),
    ("single", 1),
    ("", 0),
    ("a  b   c", 3),
    ("tab\tseparated words", 2),
    ("line\nbreak", 1),
])
def test_count_words(text, expected):
    assert count_words(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("lol 😂", "funny"),
    ("nice :)", "funny"),
    ("HaHa good one", "funny"),
    ("sending ❤", "love"),
    ("I LOVE it", "love"),
    ("bahut pyaar", "love"),
    ("lovely haha", "funny"),
    ("❤ 😂", "funny"),
    ("see you tomorrow", "neutral"),
    (":(", "neutral"),
])
def test_detect_sentiment(text, expected):
    assert detect_sentiment(text) == expected


def test_compute_message_analytics():
    assert compute_message_analytics("Okay :) love it") == {
        "word_count": 4,
        "sentiment": "funny",
    }
