from pydantic import BaseModel, ConfigDict, Field
import enum

class SentimentLabelEnum(str, enum.Enum):
    funny = "funny"
    love = "love"
    neutral = "neutral"


class ParsedMessageBase(BaseModel):
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    sender: str = Field(min_length=1)
    text: str = Field(min_length=1)


class ParsedMessageRead(ParsedMessageBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, use_enum_values=True)

    word_count: int = Field(ge=0, alias="wordCount")
    sentiment: SentimentLabelEnum
