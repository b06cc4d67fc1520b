"""
Picks one published build per authlib version.

Ely.by publishes builds as ``X.Y.Z-ely.N``: the part before the first hyphen
is the authlib version the launcher asks for, and the last dot-separated
component is the Ely.by revision of that build.
"""

from typing import Iterable

from eplmeta.errors import GeneratorError


def _parse_int(value: str, version: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise GeneratorError(
            f"Invalid version '{version}': '{value}' is not a number"
        ) from None


def short_version(full_version: str) -> str:
    return full_version.split('-', 1)[0]


def patch_number(full_version: str) -> int:
    return _parse_int(full_version.split('.')[-1], full_version)


def build_version_table(full_versions: Iterable[str]) -> dict[str, str]:
    table: dict[str, str] = {}
    for full_version in full_versions:
        authlib_version = short_version(full_version)
        existing = table.get(authlib_version)
        # a later build only wins with a strictly higher revision
        if existing is not None and patch_number(full_version) <= patch_number(
            existing
        ):
            continue
        table[authlib_version] = full_version
    return table


def version_score(version: str) -> int:
    numbers = version.split('.')
    if len(numbers) < 2:
        raise GeneratorError(
            f"Invalid version '{version}': expected at least major and minor"
        )
    score = 1_000_000 * _parse_int(numbers[0], version)
    score += 1_000 * _parse_int(numbers[1], version)
    if len(numbers) > 2:
        score += _parse_int(numbers[2], version)
    return score


def sort_short_versions(versions: Iterable[str]) -> list[str]:
    return sorted(versions, key=version_score, reverse=True)


def resolve_versions(full_versions: Iterable[str]) -> list[tuple[str, str]]:
    table = build_version_table(full_versions)
    return [(x, table[x]) for x in sort_short_versions(table)]


__all__ = [
    'short_version',
    'patch_number',
    'build_version_table',
    'version_score',
    'sort_short_versions',
    'resolve_versions',
]
