# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import os

import git
import pytest

import gitutil
import release_stats.errors as rse


@pytest.fixture
def git_repo(tmp_path):
    repo = git.Repo.init(tmp_path)
    with repo.config_writer() as cfg:
        cfg.set_value('user', 'name', 'Test User')
        cfg.set_value('user', 'email', 'test@example.com')

    repo.index.commit('first commit')

    return repo


@pytest.fixture
def git_helper(git_repo):
    return gitutil.GitHelper(repo=git_repo)


def test_open_repository(git_repo):
    repo = gitutil.open_repository(git_repo.working_tree_dir)

    assert repo.head.commit == git_repo.head.commit


def test_open_repository_no_such_path(tmp_path):
    with pytest.raises(rse.RepositoryNotFound):
        gitutil.open_repository(tmp_path / 'does-not-exist')


def test_open_repository_not_a_repository(tmp_path):
    with pytest.raises(rse.RepositoryNotFound):
        gitutil.open_repository(tmp_path)


def test_git_helper_from_path(git_repo):
    git_helper = gitutil.GitHelper(repo=git_repo.working_tree_dir)

    assert git_helper.repo.head.commit == git_repo.head.commit

    with pytest.raises(ValueError):
        gitutil.GitHelper(repo=None)


def test_tags(git_helper):
    repo = git_helper.repo
    first = repo.head.commit
    second = repo.index.commit('second commit')

    repo.create_tag('v1.0.0', ref=first)
    # annotated tags are peeled to the commit they point to
    repo.create_tag('v1.1.0', ref=second, message='release v1.1.0')

    tags = {tag.name: tag for tag in git_helper.tags()}

    assert set(tags) == {'v1.0.0', 'v1.1.0'}
    assert tags['v1.0.0'].commit == first
    assert tags['v1.1.0'].commit == second


def test_tags_not_pointing_to_commit(git_helper):
    repo = git_helper.repo
    repo.create_tag('v1.0.0', ref=repo.head.commit.tree.hexsha)

    with pytest.raises(rse.ObjectResolutionFailure):
        git_helper.tags()


def test_commit(git_helper):
    head = git_helper.repo.head.commit

    assert git_helper.commit(head.hexsha) == head
    assert git_helper.commit(head.hexsha[:7]) == head


def test_commit_unknown(git_helper):
    with pytest.raises(rse.ObjectResolutionFailure):
        git_helper.commit('0' * 40)

    with pytest.raises(rse.ObjectResolutionFailure):
        git_helper.commit('no-such-ref')


def test_parents(git_helper):
    repo = git_helper.repo
    first = repo.head.commit
    second = repo.index.commit('second commit')

    assert git_helper.parents(second) == (first,)
    assert git_helper.parents(first) == ()


def test_commit_from_tag_ref(git_helper):
    repo = git_helper.repo
    head = repo.head.commit
    repo.create_tag('v1.0.0', ref=head, message='release v1.0.0')

    assert git_helper.commit('refs/tags/v1.0.0') == head


def test_tags_missing_commit(git_helper):
    repo = git_helper.repo
    first = repo.head.commit
    second = repo.index.commit('second commit')
    repo.create_tag('v1.0.0', ref=first)
    repo.create_tag('v1.1.0', ref=second)

    os.unlink(_loose_object_path(repo, second))

    with pytest.raises(rse.ObjectResolutionFailure):
        git_helper.tags()


def test_parents_missing_commit(git_helper):
    repo = git_helper.repo
    second = repo.index.commit('second commit')
    third = repo.index.commit('third commit')

    os.unlink(_loose_object_path(repo, second))
    # commits returned by index.commit hold their (already read) parent commits; re-read
    third = gitutil.GitHelper(repo=repo.working_tree_dir).commit(third.hexsha)

    (parent,) = git_helper.parents(third)
    assert parent.hexsha == second.hexsha
    with pytest.raises(rse.ObjectResolutionFailure):
        git_helper.parents(parent)


def _loose_object_path(repo: git.Repo, commit: git.Commit) -> str:
    return os.path.join(repo.git_dir, 'objects', commit.hexsha[:2], commit.hexsha[2:])
