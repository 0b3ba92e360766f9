import logging
from typing import Optional

from src.chatline.utils.types import ParsedMessage
from src.chatline.utils.message_analytics import count_words, detect_sentiment

logger = logging.getLogger(__name__)

# Android export line: "25/01/2025, 14:30 - Rahul: Bhai party kab hai?"
DATE_SEP = ", "
SENDER_SEP = " - "
TEXT_SEP = ": "

# characters trimmed from export text: tab, line breaks, space, NBSP, Unicode Zs, LS/PS, BOM
TRIM_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ParseFailure(ValueError):
    """Raised when a line does not have the exported chat shape."""

    def __init__(self, reason: str, line: object = None):
        super().__init__(reason)
        self.reason = reason
        self.line = line


# --------------------
# Field extractors
# --------------------
def extract_date(line: str) -> Optional[str]:
    comma_idx = line.find(DATE_SEP)
    if comma_idx == -1:
        return None
    return line[:comma_idx]


def extract_time(line: str) -> Optional[str]:
    comma_idx = line.find(DATE_SEP)
    if comma_idx == -1:
        return None

    time_start = comma_idx + len(DATE_SEP)
    time_end = line.find(SENDER_SEP, time_start)
    if time_end == -1:
        return None
    return line[time_start:time_end]


def extract_sender(line: str) -> Optional[str]:
    dash_idx = line.find(SENDER_SEP)
    if dash_idx == -1:
        return None

    colon_idx = line.find(TEXT_SEP, dash_idx)
    if colon_idx == -1:
        return None
    return line[dash_idx + len(SENDER_SEP):colon_idx]


def extract_text(line: str) -> Optional[str]:
    # searched from the start of the line, not from the sender dash
    colon_idx = line.find(TEXT_SEP)
    if colon_idx == -1:
        return None
    return line[colon_idx + len(TEXT_SEP):].strip(TRIM_CHARS)


class WhatsAppLineParser:
    """
    Parses one line of a WhatsApp .txt export into a ParsedMessage.

    Expected shape:
        "DD/MM/YYYY, HH:MM - Sender Name: Message text here"

    Date and time are kept verbatim (no calendar or clock validation).
    Every field is extracted independently with first-occurrence
    delimiter scans; any missing or empty field fails the whole line.

      parse(line)        -> ParsedMessage | None
      parse_strict(line) -> ParsedMessage, raises ParseFailure
    """

    def parse(self, line: object) -> Optional[ParsedMessage]:
        """Parse a single line. Returns None if not a valid message line."""
        try:
            return self.parse_strict(line)
        except ParseFailure as e:
            logger.debug("Skipping line (%s): %r", e.reason, line)
            return None

    def parse_strict(self, line: object) -> ParsedMessage:
        if not isinstance(line, str) or not line.strip(TRIM_CHARS):
            raise ParseFailure("invalid_input", line)

        date = extract_date(line)
        time = extract_time(line)
        sender = extract_sender(line)
        text = extract_text(line)

        if date is None:
            raise ParseFailure("missing_date", line)
        if time is None:
            raise ParseFailure("missing_time", line)
        if sender is None:
            raise ParseFailure("missing_sender", line)
        # a sender match implies a ": " so text is always extracted here

        word_count = count_words(text)
        sentiment = detect_sentiment(text)

        if not (date and time and sender and text):
            raise ParseFailure("empty_field", line)

        return ParsedMessage(
            date=date,
            time=time,
            sender=sender,
            text=text,
            word_count=word_count,
            sentiment=sentiment,
        )


_default_parser = WhatsAppLineParser()


def parse_whatsapp_message(line: object) -> Optional[ParsedMessage]:
    return _default_parser.parse(line)
