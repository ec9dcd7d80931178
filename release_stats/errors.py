# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


class ReleaseStatsError(RuntimeError):
    '''
    base class for all errors that abort a run. There is no partial report: callers are
    expected to let these propagate to the entry point.
    '''
    pass


class RepositoryNotFound(ReleaseStatsError):
    pass


class InsufficientTags(ReleaseStatsError):
    pass


class MalformedVersion(ReleaseStatsError, ValueError):
    pass


class ObjectResolutionFailure(ReleaseStatsError):
    pass
