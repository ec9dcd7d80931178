#! /usr/bin/env python3
# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
import os
import sys
import typing

import ctx
import gitutil
import release_stats.aggregate
import release_stats.ancestry
import release_stats.errors as rse
import release_stats.log
import release_stats.render
import release_stats.tags

logger = logging.getLogger(__name__)


def release_stats_report(
    repo_path: str | os.PathLike='.',
    report_cfg: ctx.ReportCfg=None,
) -> str:
    '''
    returns the release statistics report for the two greatest release tags of the git
    repository at `repo_path`

    @raises ReleaseStatsError: if the report cannot be created
    '''
    with gitutil.open_repository(repo_path) as repo:
        git_helper = gitutil.GitHelper(repo=repo)

        newer, older = release_stats.tags.newest_release_tags(git_helper.tags())

        commits = release_stats.ancestry.commits_between(
            newer=newer.commit,
            older=older.commit,
            parents=git_helper.parents,
        )
        aggregation = release_stats.aggregate.aggregate(commits)

        return release_stats.render.render(
            newer=newer,
            older=older,
            commits=commits,
            aggregation=aggregation,
            report_cfg=report_cfg,
        )


def parse_args(argv: typing.Sequence[str]=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='release-stats',
        description='Print statistics about the commits between the two latest release tags',
    )
    parser.add_argument(
        'repo_path',
        nargs='?',
        default='.',
        help='path to git repository (defaults to current working directory)',
    )

    return parser.parse_args(argv)


def main(argv: typing.Sequence[str]=None) -> int:
    args = parse_args(argv)

    try:
        cfg = ctx.load_config()
        release_stats.log.configure_default_logging(level=cfg.log.level_number())
    except (ValueError, OSError) as e:
        print(f'ERROR: invalid configuration: {e}', file=sys.stderr)
        return 1

    try:
        report = release_stats_report(
            repo_path=args.repo_path,
            report_cfg=cfg.report,
        )
    except rse.ReleaseStatsError as e:
        logger.error(e)
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == '__main__':
    sys.exit(main())
