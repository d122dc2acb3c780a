"""URL checks shared by profile value objects."""

import re

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def is_valid_url(value: str) -> bool:
    return bool(URL_PATTERN.match(value))
