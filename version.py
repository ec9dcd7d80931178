# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging
import typing

import semver

from release_stats.errors import MalformedVersion

logger = logging.getLogger(__name__)

TAG_PREFIX = 'v'

Version = semver.VersionInfo | str
T = typing.TypeVar('T')


def parse_tag_version(
    version: Version,
) -> semver.VersionInfo:
    '''
    parses the given tag name into a semver.VersionInfo object.

    Different from lenient version handling, tag names are parsed strictly: the name must
    start with a literal `v`, followed by a valid semver-v2 version
    (`MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`). There is no best-effort repair (e.g. no
    padding of missing patch-levels).

    @param version: either a tag name, or an already parsed semver.VersionInfo
    @raises MalformedVersion: if the name does not follow the `v<semver>` scheme
    '''
    if isinstance(version, semver.VersionInfo):
        return version
    if not isinstance(version, str):
        raise MalformedVersion(f'expected a tag name, got {type(version)}: {version!r}')

    if not version.startswith(TAG_PREFIX):
        raise MalformedVersion(f'tag name must start with `{TAG_PREFIX}`: `{version}`')

    try:
        return semver.VersionInfo.parse(version[len(TAG_PREFIX):])
    except ValueError:
        raise MalformedVersion(f'not a valid (semver) version: `{version}`')


def compare(left: Version, right: Version) -> int:
    '''
    returns a negative number if `left` precedes `right`, zero if both have equal precedence,
    and a positive number otherwise. Precedence follows semver-v2 (build-metadata is not
    considered; pre-releases precede their final release).
    '''
    return parse_tag_version(left).compare(parse_tag_version(right))


def sort_by_version(
    versions: typing.Iterable[T],
    converter: typing.Callable[[T], Version]=None,
) -> list[T]:
    '''
    sorts the given versions (ascending). If `converter` is passed, it
    is used to retrieve the version (tag name) from each element.

    Sorting is stable: elements of equal precedence (e.g. `v1.0.0` and `v1.0.0+build`) retain
    their original order. All versions are parsed before sorting, so a single malformed
    version fails the whole operation.
    '''
    versions = list(versions)

    def to_version(v: T) -> semver.VersionInfo:
        if converter:
            v = converter(v)
        return parse_tag_version(v)

    parsed = [to_version(v) for v in versions]

    # sorted is guaranteed to be stable
    ordered = sorted(
        range(len(versions)),
        key=lambda idx: parsed[idx],
    )

    return [versions[idx] for idx in ordered]


def greatest_versions(
    versions: typing.Iterable[T],
    count: int,
    converter: typing.Callable[[T], Version]=None,
) -> list[T]:
    '''
    returns the `count` greatest versions, greatest first.
    '''
    if count < 0:
        raise ValueError(f'{count=} must not be negative')

    ordered = sort_by_version(versions, converter=converter)
    greatest = ordered[len(ordered) - count:] if count else []
    logger.debug(f'greatest {count} of {len(ordered)} versions: {greatest}')
    return list(reversed(greatest))
