from typing import Any, Mapping

from pydantic import ValidationError

LIST_ESCAPE = "\\"


def split(value: str, delimiter: str, trim: bool = True) -> list[str]:
    """
    Split ``value`` at every unescaped ``delimiter``.

    A backslash escapes the delimiter and itself. Before any other character
    the backslash is kept as-is, so Windows paths survive. The result always
    holds at least one element (``""`` -> ``[""]``).
    """
    parts: list[str] = []
    token: list[str] = []
    in_escape = False
    for char in value:
        if in_escape:
            if char != delimiter and char != LIST_ESCAPE:
                token.append(LIST_ESCAPE)
            token.append(char)
            in_escape = False
        elif char == delimiter:
            parts.append(_finish(token, trim))
            token = []
        elif char == LIST_ESCAPE:
            in_escape = True
        else:
            token.append(char)

    # trailing lone backslash
    if in_escape:
        token.append(LIST_ESCAPE)
    parts.append(_finish(token, trim))
    return parts


def _finish(token: list[str], trim: bool) -> str:
    text = "".join(token)
    return text.strip() if trim else text


def deep_merge(a: Mapping[str, Any], b: Mapping[str, Any]) -> Mapping[str, Any]:
    out = dict(a)
    for k, v in b.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def validation_error_parser(
    error: ValidationError, component: str = "config.settings"
) -> list[dict[str, str]]:
    parsed_error = [
        {
            "component": component,
            "path": ".".join(map(str, err["loc"])),
            "message": err["msg"],
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    return parsed_error
