# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging
import operator
import typing

import release_stats.model as rsm

logger = logging.getLogger(__name__)

ParentsLookup = typing.Callable[[rsm.CommitLike], typing.Sequence[rsm.CommitLike]]

default_parents_lookup: ParentsLookup = operator.attrgetter('parents')


def iter_ancestry(
    commit: rsm.CommitLike,
    parents: ParentsLookup=default_parents_lookup,
) -> typing.Generator[rsm.CommitLike, None, None]:
    '''
    yields the given commit, followed by all of its ancestors, in preorder: each commit is
    followed by the ancestry of its first parent, then by the ancestry of its second parent,
    and so on.

    Each commit is yielded at most once per walk (if reachable via multiple paths, it is
    yielded when it is first reached). The commit graph is expected to be acyclic.

    @param parents: callable returning the (ordered) parents of a commit. Defaults to reading
        the `parents` attribute. Errors raised from it are propagated unaltered.
    '''
    seen = set()
    stack = [commit]

    while stack:
        commit = stack.pop()
        if commit.hexsha in seen:
            continue
        seen.add(commit.hexsha)

        yield commit

        # last parent is pushed first, so first parent's ancestry is walked first
        stack.extend(reversed(parents(commit)))


def release_range(
    from_commits: typing.Iterable[rsm.CommitLike],
    to_commits: typing.Iterable[rsm.CommitLike],
) -> rsm.ReleaseRange:
    '''
    returns the commits from `from_commits` whose hexsha is not contained in `to_commits`,
    retaining their relative order. Commits occurring more than once in `from_commits` are
    only returned once.

    Note that this is not a symmetric difference: commits only contained in `to_commits` are
    ignored.
    '''
    excluded = {commit.hexsha for commit in to_commits}

    result = []
    for commit in from_commits:
        if commit.hexsha in excluded:
            continue
        excluded.add(commit.hexsha)
        result.append(commit)

    return result


def commits_between(
    newer: rsm.CommitLike,
    older: rsm.CommitLike,
    parents: ParentsLookup=default_parents_lookup,
) -> rsm.ReleaseRange:
    '''
    returns all commits reachable from `newer`, but not from `older` (newest first)
    '''
    from_commits = tuple(iter_ancestry(newer, parents=parents))
    to_commits = tuple(iter_ancestry(older, parents=parents))
    logger.debug(f'{len(from_commits)=} {len(to_commits)=}')

    commits = release_range(
        from_commits=from_commits,
        to_commits=to_commits,
    )
    logger.info(f'found {len(commits)} commits in release range')

    return commits
