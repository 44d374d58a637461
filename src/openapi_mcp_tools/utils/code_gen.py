"""Identifier helpers shared by the extractor and the CLI."""
import re

_PATH_PARAM = re.compile(r"^\{([^}]+)\}$")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_INVALID_TOOL_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]

def generate_operation_id(method: str, path: str) -> str:
    """
    Builds a camelCase identifier from an HTTP method and a path template,
    e.g. ("get", "/users/{user_id}/posts") -> "getUsersByUserIdPosts".
    Returns an empty string when no method is given.
    """
    if not method:
        return ""

    parts = [method.lower()]
    for segment in path.split("/"):
        if not segment:
            continue
        match = _PATH_PARAM.match(segment)
        if match:
            words = re.split(r"[^A-Za-z0-9]+", match.group(1))
            parts.append("By" + "".join(_capitalize(w) for w in words if w))
        else:
            words = re.split(r"[^A-Za-z0-9]+", segment)
            parts.append("".join(_capitalize(w) for w in words if w))
    return _NON_ALNUM.sub("", "".join(parts))

def sanitize_tool_name(name: str) -> str:
    """Replaces '.' and then every character outside [A-Za-z0-9_-] with '_'."""
    return _INVALID_TOOL_CHARS.sub("_", name.replace(".", "_"))
