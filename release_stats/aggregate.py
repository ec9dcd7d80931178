# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import re
import typing

import release_stats.model as rsm

_whitespace = re.compile(r'\s')


def is_listed_committer(name: str) -> bool:
    '''
    committers are only listed if their name contains whitespace, which excludes single-token
    identities, such as bot-accounts or usernames w/o a display-name
    '''
    return bool(_whitespace.search(name))


def aggregate(
    commits: typing.Iterable[rsm.CommitLike],
) -> rsm.AggregationResult:
    '''
    aggregates the given commits by author.

    Contributors are counted by (distinct) author email, whereas commits are grouped by author
    name. Both identities are deliberately not reconciled: two emails sharing a name are
    grouped as one committer, two names sharing an email are listed separately.
    '''
    emails = set()
    committers: dict[str, rsm.Committer] = {}
    contributions = 0

    for commit in commits:
        contributions += 1
        author = commit.author
        emails.add(author.email)

        if not (committer := committers.get(author.name)):
            committer = committers[author.name] = rsm.Committer(name=author.name)
        committer.commits.append(commit)

    listed_committers = sorted(
        (c for c in committers.values() if is_listed_committer(c.name)),
        key=lambda c: c.name,
    )

    return rsm.AggregationResult(
        contributors=len(emails),
        contributions=contributions,
        committers=tuple(listed_committers),
    )
