# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import dataclasses
import logging
import os
import typing

import dacite
import yaml

'''
Execution context. Configuration is read from (in ascending precedence):

- ~/.release-stats.cfg (YAML)
- file pointed to by env-var RELEASE_STATS_CFG (YAML)
- env-vars RELEASE_STATS_LOG_LEVEL, RELEASE_STATS_LIST_SUBJECTS
'''

logger = logging.getLogger(__name__)

cfg = None # initialised upon first call of `config`

CFG_FILE_NAME = '.release-stats.cfg'
CFG_FILE_ENV_VAR = 'RELEASE_STATS_CFG'
LOG_LEVEL_ENV_VAR = 'RELEASE_STATS_LOG_LEVEL'
LIST_SUBJECTS_ENV_VAR = 'RELEASE_STATS_LIST_SUBJECTS'


@dataclasses.dataclass
class LogCfg:
    level: typing.Optional[str] = None

    def level_number(self) -> int:
        if not self.level:
            return logging.WARNING
        level = logging.getLevelName(self.level.upper())
        if not isinstance(level, int):
            raise ValueError(f'unknown log level: {self.level}')
        return level


@dataclasses.dataclass
class ReportCfg:
    list_commit_subjects: typing.Optional[bool] = None
    date_format: typing.Optional[str] = None # strftime-format; defaults to e.g. `Mon Jan  2 2006`


@dataclasses.dataclass
class GlobalConfig:
    log: typing.Optional[LogCfg] = None
    report: typing.Optional[ReportCfg] = None


def merge_cfgs(ctor, left, right):
    if not left or not right:
        return left or right # nothing to merge

    left_dict = dataclasses.asdict(left)

    # do not overwrite existing values w/ None
    right_dict = {k: v for k, v in dataclasses.asdict(right).items() if v is not None}

    return dacite.from_dict(
        data_class=ctor,
        data=left_dict | right_dict,
    )


def merge_global_cfg(left: GlobalConfig, right: GlobalConfig) -> GlobalConfig:
    return GlobalConfig(
        log=merge_cfgs(LogCfg, left.log, right.log),
        report=merge_cfgs(ReportCfg, left.report, right.report),
    )


def _parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f'not a boolean: {value}')


def _config_from_file(path: str) -> GlobalConfig | None:
    if not os.path.isfile(path):
        return None

    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

        return dacite.from_dict(
            data_class=GlobalConfig,
            data=raw,
            config=dacite.Config(strict=True),
        )
    except (yaml.YAMLError, dacite.DaciteError) as e:
        raise ValueError(f'invalid config file {path}: {e}')


def _config_from_user_home() -> GlobalConfig | None:
    return _config_from_file(os.path.join(os.path.expanduser('~'), CFG_FILE_NAME))


def _config_from_env(env: typing.Mapping[str, str]=None) -> GlobalConfig:
    if env is None:
        env = os.environ

    if (list_subjects := env.get(LIST_SUBJECTS_ENV_VAR)) is not None:
        list_subjects = _parse_bool(list_subjects)

    return GlobalConfig(
        log=LogCfg(level=env.get(LOG_LEVEL_ENV_VAR)),
        report=ReportCfg(list_commit_subjects=list_subjects),
    )


def _config_from_env_cfg_file(env: typing.Mapping[str, str]=None) -> GlobalConfig | None:
    if env is None:
        env = os.environ

    if not (cfg_file := env.get(CFG_FILE_ENV_VAR)):
        return None

    if not os.path.isfile(cfg_file):
        raise ValueError(f'{CFG_FILE_ENV_VAR} does not point to an existing file: {cfg_file}')

    return _config_from_file(cfg_file)


def default_config() -> GlobalConfig:
    return GlobalConfig(
        log=LogCfg(level='WARNING'),
        report=ReportCfg(list_commit_subjects=True),
    )


def load_config(env: typing.Mapping[str, str]=None) -> GlobalConfig:
    global cfg
    cfg = default_config()

    additional_cfgs = (
        _config_from_user_home(),
        _config_from_env_cfg_file(env=env),
        _config_from_env(env=env),
    )

    for additional_cfg in additional_cfgs:
        if not additional_cfg:
            continue

        cfg = merge_global_cfg(cfg, additional_cfg)

    logger.debug(f'{cfg=}')
    return cfg


def config() -> GlobalConfig:
    if cfg is None:
        load_config()
    return cfg
