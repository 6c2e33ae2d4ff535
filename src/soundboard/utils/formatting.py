"""Display formatting helpers."""

import re

# Boundary between a lowercase and an uppercase letter ("KannFliegen").
# Umlauts count as letters so "WürdMirStinken" splits as expected.
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-zäöüß])(?=[A-ZÄÖÜ])")


def format_clip_name(name: str) -> str:
    """Turn a raw clip name into a display title.

    Underscores become spaces, then a space is inserted before every
    uppercase letter that follows a lowercase letter.

    Examples:
        >>> format_clip_name("IchKannFliegen")
        'Ich Kann Fliegen'
        >>> format_clip_name("Miau_Song")
        'Miau Song'
    """
    return _CAMEL_BOUNDARY.sub(" ", name.replace("_", " "))


def format_duration(seconds: float) -> str:
    """Format a duration as MM:SS (minutes wrap at 60).

    Examples:
        >>> format_duration(75.4)
        '01:15'
    """
    total = max(0, int(seconds))
    return f"{(total // 60) % 60:02d}:{total % 60:02d}"
