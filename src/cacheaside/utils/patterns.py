"""Redis-compatible glob matching for in-process stores."""

import functools
import re


@functools.lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a Redis glob pattern into a compiled regular expression.

    Supports ``*``, ``?``, ``[...]`` classes (with ``^`` negation and
    ``a-z`` ranges) and backslash escapes, as Redis KEYS/SCAN do.
    ``fnmatch`` is not used because it has no backslash escaping.

    Args:
        pattern: The glob pattern.

    Returns:
        A regex that must match the whole key.
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]
        i += 1

        if char == "\\" and i < n:
            parts.append(re.escape(pattern[i]))
            i += 1
        elif char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = pattern.find("]", i)
            if end <= i:
                parts.append(re.escape(char))
                continue
            body = pattern[i:end]
            i = end + 1
            negate = body.startswith("^")
            if negate:
                body = body[1:]
            members = "".join("-" if c == "-" else re.escape(c) for c in body)
            parts.append(f"[{'^' if negate else ''}{members}]")
        else:
            parts.append(re.escape(char))

    return re.compile("".join(parts), re.DOTALL)


def glob_match(pattern: str, key: str) -> bool:
    """Check whether ``key`` matches a Redis glob ``pattern``."""
    return compile_glob(pattern).fullmatch(key) is not None
