# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


from copy import copy
import logging
import sys


class Bcolors:
    RESET_ALL = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'


class LevelColourFormatter(logging.Formatter):
    '''
    colours the level name (exposed as `levelprefix`) if the log stream is a terminal
    '''
    level_colors = {
        logging.DEBUG: Bcolors.BLUE,
        logging.INFO: Bcolors.GREEN,
        logging.WARNING: Bcolors.YELLOW,
        logging.ERROR: Bcolors.RED,
        logging.CRITICAL: Bcolors.RED,
    }

    def __init__(self, *args, stream=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.stream = stream if stream is not None else sys.stderr

    def color_level_name(self, level_name: str, level_number: int) -> str:
        if not (color := self.level_colors.get(level_number)):
            return str(level_name)
        return f'{Bcolors.BOLD}{color}{level_name}{Bcolors.RESET_ALL}'

    def formatMessage(self, record):
        record_copy = copy(record)
        levelname = record_copy.levelname
        isatty = getattr(self.stream, 'isatty', None)
        if isatty and isatty():
            levelname = self.color_level_name(levelname, record_copy.levelno)
        record_copy.__dict__['levelprefix'] = levelname
        return super().formatMessage(record_copy)


def default_fmt_string() -> str:
    return '%(asctime)s [%(levelprefix)s] %(name)s: %(message)s'


def configure_default_logging(
    level=None,
    force=True,
    stream=None,
):
    '''
    installs a stream handler at the root logger. Log records are written to stderr (unless
    another stream is passed), so stdout is reserved for the report.
    '''
    if not level:
        level = logging.WARNING
    if stream is None:
        stream = sys.stderr

    # make sure to have a clean root logger (in case setup is called multiple times)
    if force:
        for h in list(logging.root.handlers):
            logging.root.removeHandler(h)
            h.close()

    sh = logging.StreamHandler(stream)
    sh.setLevel(level)
    sh.setFormatter(LevelColourFormatter(fmt=default_fmt_string(), stream=stream))

    logging.root.addHandler(hdlr=sh)
    logging.root.setLevel(level=level)

    # too verbose
    logging.getLogger('git').setLevel(max(level, logging.INFO))
