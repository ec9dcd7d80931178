# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import datetime
import typing

import ctx
import release_stats.model as rsm


def format_date(
    when: datetime.datetime,
    date_format: str | None=None,
) -> str:
    '''
    formats the given date as, e.g., `Mon Jan  2 2006` (day of month padded to two chars),
    unless a (strftime) `date_format` is given
    '''
    if date_format:
        return when.strftime(date_format)
    return f'{when:%a %b} {when.day:>2} {when:%Y}'


def iter_summary_lines(
    release_tag_name: str,
    aggregation: rsm.AggregationResult,
    window_start: datetime.datetime,
    window_end: datetime.datetime,
    date_format: str | None=None,
) -> typing.Generator[str, None, None]:
    yield (
        f'{release_tag_name}  received {aggregation.contributions} commits '
        f'from {aggregation.contributors} contributors'
    )
    yield (
        f'commit window started  {format_date(window_start, date_format)} '
        f'and ended {format_date(window_end, date_format)} '
    )


def iter_committer_lines(
    committers: typing.Iterable[rsm.Committer],
    list_commit_subjects: bool=True,
) -> typing.Generator[str, None, None]:
    yield ' committers '
    yield ' -----------'
    for committer in committers:
        yield f'- {committer.name} '
        if not list_commit_subjects:
            continue
        for commit in committer.commits:
            yield f'    - {rsm.first_line(commit.message)} '


def iter_changelog_lines(
    newer_tag_name: str,
    older_tag_name: str,
    commits: rsm.ReleaseRange,
) -> typing.Generator[str, None, None]:
    yield '## Changelog'
    yield f'{newer_tag_name}..{older_tag_name}'
    for commit in commits:
        yield f'{rsm.short_hash(commit)} {rsm.first_line(commit.message)}'


def render(
    newer: rsm.Tag,
    older: rsm.Tag,
    commits: rsm.ReleaseRange,
    aggregation: rsm.AggregationResult,
    report_cfg: ctx.ReportCfg=None,
) -> str:
    '''
    renders the release statistics as text. The commit window spans from the (author-) date of
    the older tag's commit to the one of the newer tag's commit.
    '''
    if report_cfg is None:
        report_cfg = ctx.config().report

    list_commit_subjects = report_cfg.list_commit_subjects
    if list_commit_subjects is None:
        list_commit_subjects = True

    lines = [
        *iter_summary_lines(
            release_tag_name=newer.name,
            aggregation=aggregation,
            window_start=older.commit.authored_datetime,
            window_end=newer.commit.authored_datetime,
            date_format=report_cfg.date_format,
        ),
        '',
        *iter_committer_lines(
            committers=aggregation.committers,
            list_commit_subjects=list_commit_subjects,
        ),
        '',
        *iter_changelog_lines(
            newer_tag_name=newer.name,
            older_tag_name=older.name,
            commits=commits,
        ),
    ]

    return '\n'.join(lines) + '\n'
