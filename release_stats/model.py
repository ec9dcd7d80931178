# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import dataclasses
import datetime
import typing


class CommitLike(typing.Protocol):
    '''
    the subset of `git.Commit` the release-range computation relies on. In-memory commits
    (see `Commit`) expose the same attributes, so fixture graphs may stand in for a
    repository.
    '''
    hexsha: str
    message: str

    @property
    def author(self) -> 'Actor': ...

    @property
    def authored_datetime(self) -> datetime.datetime: ...

    @property
    def parents(self) -> typing.Sequence['CommitLike']: ...


@dataclasses.dataclass(frozen=True)
class Actor:
    name: str
    email: str


@dataclasses.dataclass(frozen=True)
class Commit:
    hexsha: str
    author: Actor
    authored_datetime: datetime.datetime
    message: str = ''
    parents: tuple['Commit', ...] = ()

    # identity is defined by hexsha only
    def __eq__(self, other):
        if not isinstance(other, Commit):
            return NotImplemented
        return self.hexsha == other.hexsha

    def __hash__(self):
        return hash(self.hexsha)


@dataclasses.dataclass(frozen=True)
class Tag:
    name: str
    commit: CommitLike


@dataclasses.dataclass
class Committer:
    name: str
    commits: list[CommitLike] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(frozen=True)
class AggregationResult:
    contributors: int # distinct author emails
    contributions: int # commits in release range
    committers: tuple[Committer, ...] = ()


ReleaseRange = list[CommitLike]


def first_line(message: str) -> str:
    return message.split('\n', 1)[0].rstrip('\r')


def short_hash(commit: CommitLike, length: int=7) -> str:
    return commit.hexsha[:length]
