# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import logging
import os

import git
import git.exc

import release_stats.errors as rse
import release_stats.model as rsm

logger = logging.getLogger(__name__)

# raised by GitPython (and gitdb) if objects cannot be read from the object database
_object_read_errors = (
    ValueError,
    git.exc.GitError,
    git.exc.ODBError,
)


def open_repository(path: str | os.PathLike) -> git.Repo:
    try:
        repo = git.Repo(path)
    except git.exc.NoSuchPathError:
        raise rse.RepositoryNotFound(f'no such path: {path}')
    except git.exc.InvalidGitRepositoryError:
        raise rse.RepositoryNotFound(f'not a git repository: {path}')

    logger.debug(f'opened repository at {repo.git_dir=}')
    return repo


class GitHelper:
    '''
    read-only access to tags and commits of a (local) git repository.

    Errors raised while reading objects are translated into `ObjectResolutionFailure`.
    '''
    def __init__(
        self,
        repo: git.Repo | str | os.PathLike,
    ):
        if repo is None:
            raise ValueError(repo)
        if isinstance(repo, (str, os.PathLike)):
            repo = open_repository(repo)
        if not isinstance(repo, git.Repo):
            raise ValueError(repo)

        self.repo = repo

    def tags(self) -> list[rsm.Tag]:
        '''
        returns all tags, in the order they are listed by the repository. Annotated tags are
        peeled to the commit they point to.
        '''
        tags = [
            rsm.Tag(name=tag_ref.name, commit=self.commit(tag_ref.path))
            for tag_ref in self.repo.tags
        ]

        logger.debug(f'found {len(tags)} tags: {", ".join(t.name for t in tags)}')
        return tags

    def commit(self, rev: str) -> git.Commit:
        '''
        resolves the given revision (hexsha, tag- or branch-ref) to a commit
        '''
        try:
            commit = self.repo.commit(rev)
            # objects are read lazily - force read to detect missing objects early
            commit.message
        except _object_read_errors as e:
            raise rse.ObjectResolutionFailure(f'cannot resolve {rev} to a commit: {e}')

        return commit

    def parents(self, commit: git.Commit) -> tuple[git.Commit, ...]:
        '''
        parents-lookup for `release_stats.ancestry.iter_ancestry`
        '''
        try:
            return tuple(commit.parents)
        except _object_read_errors as e:
            raise rse.ObjectResolutionFailure(
                f'cannot read parents of commit {commit.hexsha}: {e}'
            )
