"""Expansion of ${NAME} and ${NAME:-fallback} references in parsed YAML data."""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

_REF = re.compile(r"\$\{(?P<name>[A-Za-z_]\w*)(?::-(?P<fallback>[^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


@dataclass(frozen=True)
class UnsetReference:
    """A reference to an environment variable that is unset and has no fallback."""

    name: str
    key_path: str

    def __str__(self) -> str:
        return f"{self.name} (at {self.key_path})"


@dataclass(frozen=True)
class Expansion:
    value: RawValue
    unset: list[UnsetReference]


def expand_env_refs(
    data: RawValue, environ: Mapping[str, str] | None = None
) -> Expansion:
    """Substitute every reference in *data* in a single walk.

    References to unset variables without a fallback are left in place and
    listed in ``Expansion.unset`` together with the dotted key path they were
    found under, so the caller can report all of them at once.
    """
    env = os.environ if environ is None else environ
    unset: list[UnsetReference] = []
    value = _expand(data, key_path="", env=env, unset=unset)
    return Expansion(value=value, unset=unset)


def _expand(
    data: RawValue, key_path: str, env: Mapping[str, str], unset: list[UnsetReference]
) -> RawValue:
    match data:
        case str():
            return _expand_text(data, key_path, env, unset)
        case list():
            return [
                _expand(item, f"{key_path}[{index}]", env, unset)
                for index, item in enumerate(data)
            ]
        case dict():
            return {
                key: _expand(value, _child_path(key_path, key), env, unset)
                for key, value in data.items()
            }
        case _:
            return data


def _expand_text(
    text: str, key_path: str, env: Mapping[str, str], unset: list[UnsetReference]
) -> str:
    def replace(ref: re.Match[str]) -> str:
        name = ref.group("name")
        if name in env:
            return env[name]
        if ref.group("fallback") is not None:
            return ref.group("fallback")
        unset.append(UnsetReference(name=name, key_path=key_path or "<root>"))
        return ref.group(0)

    return _REF.sub(replace, text)


def _child_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else str(key)
