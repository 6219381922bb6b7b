import uuid

from pydantic import BaseModel, ConfigDict, Field, computed_field


def new_id() -> str:
    return uuid.uuid4().hex


class Activity(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    details: list[str] = Field(default_factory=list)
    completed: bool = False
    skipped: bool = False


class Event(BaseModel):
    """A top-level planned item for a day.

    `completed` is derived from the activities and cannot be set directly;
    an event without activities is never completed.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    title: str
    time: str | None = None
    duration: str | None = None
    is_maybe: bool = Field(default=False, alias="isMaybe")
    activities: list[Activity] = Field(default_factory=list)

    @computed_field
    @property
    def completed(self) -> bool:
        return bool(self.activities) and all(a.completed for a in self.activities)

    @property
    def kind(self) -> str:
        if self.is_maybe:
            return "maybe"
        if self.time:
            return "timed"
        return "flexible"

    @property
    def progress(self) -> str:
        done = sum(1 for a in self.activities if a.completed)
        return f"{done}/{len(self.activities)} completed"

    def find_activity(self, activity_id: str) -> Activity | None:
        for a in self.activities:
            if a.id == activity_id:
                return a
        return None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls.model_validate(data)
