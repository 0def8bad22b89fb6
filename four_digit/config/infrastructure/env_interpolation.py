"""${ENV_VAR} and ${ENV_VAR:-default} interpolation over raw YAML data."""

import os
import re

# Group 1: variable name. Group 2: the default, present only with ":-".
_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of referenced env vars that are unset and have no default.

    The whole tree is walked so every missing name is reported at once, in
    first-seen order.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _REFERENCE.finditer(text):
            name, default = match.group(1), match.group(2)
            if default is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Substitute every reference with its env value, or its default when unset.

    Run `collect_missing_vars` first; a reference with neither raises KeyError.
    """
    if isinstance(data, str):
        return _REFERENCE.sub(_resolve, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _resolve(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []
