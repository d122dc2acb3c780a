"""Gender value object."""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHERS = "others"

    @classmethod
    def parse(cls, value: "str | Gender") -> "Gender":
        if isinstance(value, Gender):
            return value
        return cls(value.strip().lower())
