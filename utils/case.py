"""
Case conversion for upstream response normalization.
GitHub answers with snake_case keys; the API republishes them in camelCase.
"""
import re
from typing import Any

# a hyphen or underscore followed by one letter; anything else is left as-is
_DELIMITED_LETTER = re.compile(r"[-_]([a-zA-Z])")


def to_camel_key(s: str) -> str:
    """Convert a single snake_case or kebab-case key to camelCase."""
    return _DELIMITED_LETTER.sub(lambda m: m.group(1).upper(), s)


def dict_keys_to_camel(obj: Any) -> Any:
    """Recursively convert dict keys to camelCase, returning a new structure."""
    if isinstance(obj, dict):
        return {to_camel_key(k): dict_keys_to_camel(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [dict_keys_to_camel(x) for x in obj]
    return obj
