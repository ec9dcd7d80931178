# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging
import typing

import release_stats.errors as rse
import release_stats.model as rsm
import version

logger = logging.getLogger(__name__)


def newest_release_tags(
    tags: typing.Iterable[rsm.Tag],
) -> tuple[rsm.Tag, rsm.Tag]:
    '''
    returns the two greatest tags (by semver precedence) as a tuple `(newer, older)`.

    Tags of equal precedence retain the order in which they were passed (which is typically
    the order in which they were discovered in the repository); of those, the later one is
    considered the newer one.

    @raises InsufficientTags: if less than two tags are passed
    @raises MalformedVersion: if any tag name is not of the form `v<semver>`
    '''
    tags = tuple(tags)
    if len(tags) < 2:
        raise rse.InsufficientTags(
            f'at least two release tags are required, found {len(tags)}: '
            f'{", ".join(t.name for t in tags) or "none"}'
        )

    newer, older = version.greatest_versions(
        tags,
        count=2,
        converter=lambda tag: tag.name,
    )
    logger.info(f'comparing {newer.name} against {older.name} ({len(tags)} tags found)')

    return newer, older
