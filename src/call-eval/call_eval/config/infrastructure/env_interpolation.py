"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re

# group(1) is the variable name, group(2) the optional fallback after ":-".
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Walk the data tree and return the names of every referenced env var that
    is unset and has no inline default.  All of them are collected before
    returning so the caller can report them in one error.
    """
    missing: list[str] = []
    _collect(data, missing)
    return missing


def _collect(data: RawValue, missing: list[str]) -> None:
    if isinstance(data, str):
        for match in _ENV_VAR_PATTERN.finditer(data):
            var_name, fallback = match.group(1), match.group(2)
            if fallback is not None or var_name in os.environ:
                continue
            if var_name not in missing:
                missing.append(var_name)
    elif isinstance(data, list):
        for item in data:
            _collect(item, missing)
    elif isinstance(data, dict):
        for value in data.values():
            _collect(value, missing)


def interpolate(data: RawValue) -> RawValue:
    """
    Recursively substitute every ${ENV_VAR} occurrence with its runtime value,
    or with the inline default when the variable is unset.

    Call `collect_missing_vars` first; a reference without a default to an
    unset variable raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    var_name, fallback = match.group(1), match.group(2)
    if fallback is not None:
        return os.environ.get(var_name, fallback)
    return os.environ[var_name]
