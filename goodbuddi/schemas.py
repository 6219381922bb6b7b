from pydantic import BaseModel, Field


class ScratchpadIn(BaseModel):
    text: str = Field(default="", max_length=100_000)


class ReflectionIn(BaseModel):
    text: str = Field(default="", max_length=5000)


class KeydownIn(BaseModel):
    key: str
    shiftKey: bool = False
    text: str = ""
    selectionStart: int = Field(default=0, ge=0)
    selectionEnd: int | None = Field(default=None, ge=0)


class KeydownOut(BaseModel):
    handled: bool
    newText: str | None = None
    newCaretStart: int | None = None
    newCaretEnd: int | None = None


class ViewerOpenIn(BaseModel):
    date: str
    eventId: str


class TimerSelectIn(BaseModel):
    minutes: int


class PhrasesIn(BaseModel):
    phrases: list[str]


class PhraseSelectionIn(BaseModel):
    index: int | None = None
