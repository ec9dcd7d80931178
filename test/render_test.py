# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import datetime

import pytest

import ctx
import release_stats.aggregate
import release_stats.model as rsm
import release_stats.render as render

from _test_utils import commit


@pytest.fixture
def release():
    c1 = commit('c1', message='initial commit', days=1)
    c2 = commit('c2', c1, author='Jane Doe', email='jane@x.com', message='add feature\n\ndetails')
    c3 = commit('c3', c2, author='bot', email='bot@x.com', message='bump version', days=14)

    older = rsm.Tag(name='v1.0.0', commit=c1)
    newer = rsm.Tag(name='v1.1.0', commit=c3)
    commits = [c3, c2]

    return newer, older, commits


def test_format_date():
    # day of month is padded to width two
    assert render.format_date(datetime.datetime(2006, 1, 2)) == 'Mon Jan  2 2006'
    assert render.format_date(datetime.datetime(2024, 11, 23)) == 'Sat Nov 23 2024'

    assert render.format_date(
        datetime.datetime(2024, 11, 23),
        date_format='%Y-%m-%d',
    ) == '2024-11-23'


def test_render(release):
    newer, older, commits = release
    c3, c2 = commits

    report = render.render(
        newer=newer,
        older=older,
        commits=commits,
        aggregation=release_stats.aggregate.aggregate(commits),
        report_cfg=ctx.ReportCfg(list_commit_subjects=True),
    )

    assert report == '\n'.join((
        'v1.1.0  received 2 commits from 2 contributors',
        'commit window started  Tue Jan  2 2024 and ended Mon Jan 15 2024 ',
        '',
        ' committers ',
        ' -----------',
        '- Jane Doe ',
        '    - add feature ',
        '',
        '## Changelog',
        'v1.1.0..v1.0.0',
        f'{c3.hexsha[:7]} bump version',
        f'{c2.hexsha[:7]} add feature',
        '',
    ))


def test_render_without_commit_subjects(release):
    newer, older, commits = release

    report = render.render(
        newer=newer,
        older=older,
        commits=commits,
        aggregation=release_stats.aggregate.aggregate(commits),
        report_cfg=ctx.ReportCfg(list_commit_subjects=False),
    )

    assert '- Jane Doe ' in report
    assert '    - add feature ' not in report


def test_render_empty_release_range(release):
    newer, _, _ = release

    report = render.render(
        newer=newer,
        older=newer,
        commits=[],
        aggregation=release_stats.aggregate.aggregate([]),
        report_cfg=ctx.ReportCfg(),
    )

    assert report.splitlines()[0] == 'v1.1.0  received 0 commits from 0 contributors'
    assert report.endswith('## Changelog\nv1.1.0..v1.1.0\n')


@pytest.mark.parametrize('message,expected', [
    ('subject', 'subject'),
    ('subject\n\nbody', 'subject'),
    ('subject\r\nbody', 'subject'),
    ('', ''),
    ('\nbody', ''),
    # only newlines separate lines
    ('subject\x0cstill subject', 'subject\x0cstill subject'),
    ('subject\u2028still subject\nbody', 'subject\u2028still subject'),
    ('subject\r', 'subject'),
])
def test_first_line(message, expected):
    assert rsm.first_line(message) == expected
