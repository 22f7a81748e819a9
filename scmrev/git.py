"""This module finds a git executable and runs it."""

import logging
import os
import subprocess
import sys
from collections import namedtuple
from typing import Callable, Iterable, List, Optional

# Names resolvable through the search path, in the order they are tried.
SEARCH_PATH_NAMES = ['git.cmd', 'git', 'git.bat']

# Program directories that may hold a git installation (Windows).
INSTALL_DIR_VARIABLES = ['PROGRAMFILES(x86)', 'PROGRAMFILES']
INSTALL_SUFFIX = os.path.join('Git', 'cmd', 'git.exe')

POSIX_INSTALL_PATHS = ['/usr/local/bin/git', '/usr/bin/git']

COMMIT_ARGS = ['rev-parse', 'HEAD']
VERSION_ARGS = ['describe', '--tags', '--always']

CommandResult = namedtuple('CommandResult', ['output', 'error'])


def configured_command(settings) -> List[str]:
    """The executable the user has configured, if any."""
    if settings is not None and settings.git_command:
        return [settings.git_command]
    return []


def search_path_commands(settings) -> List[str]:
    """Command names resolved through the search path."""
    return list(SEARCH_PATH_NAMES)


def install_path_commands(settings) -> List[str]:
    """Conventional installation locations for this platform."""
    candidates = []
    for variable in INSTALL_DIR_VARIABLES:
        directory = os.environ.get(variable)
        if directory:
            candidates.append(os.path.join(directory, INSTALL_SUFFIX))
    if sys.platform != 'win32':
        candidates.extend(POSIX_INSTALL_PATHS)
    return candidates


DEFAULT_STRATEGIES = [
    configured_command,
    search_path_commands,
    install_path_commands,
]


def can_start(command: str) -> bool:
    """Check whether :command can be started at all.

    The exit status is irrelevant; git without arguments prints its usage and
    fails, which still proves the executable works."""
    try:
        subprocess.run([command], stdin=subprocess.DEVNULL,
                       stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError:
        return False
    return True


def candidate_commands(settings, strategies=None) -> List[str]:
    """List every candidate command, in the order they should be tried."""
    if strategies is None:
        strategies = DEFAULT_STRATEGIES
    candidates = []
    for strategy in strategies:
        candidates.extend(strategy(settings))
    return candidates


def locate_git(settings,
               strategies: Optional[Iterable[Callable]] = None,
               starter: Callable[[str], bool] = can_start) -> Optional[str]:
    """Find the first git candidate that starts, or None."""
    for command in candidate_commands(settings, strategies):
        logging.debug(f'Trying {command}')
        if starter(command):
            logging.debug(f'Using {command}')
            return command
    return None


def first_line(command: List[str], cwd=None) -> CommandResult:
    """Run :command and capture the first line it prints.

    Standard error is merged into the captured output, so a git error message
    becomes the value. Only a failure to start the process is reported as an
    error."""
    logging.debug(f'Calling {" ".join(command)}')
    try:
        with subprocess.Popen(command, cwd=cwd,
                              stdin=subprocess.DEVNULL,
                              stdout=subprocess.PIPE,
                              stderr=subprocess.STDOUT,
                              encoding='utf-8',
                              errors='replace') as process:
            line = process.stdout.readline()
            # Drain the rest so the process can exit normally.
            process.stdout.read()
    except OSError as e:
        return CommandResult(None, e)
    return CommandResult(line.rstrip('\r\n'), None)


def commit_id(git: str, cwd=None) -> CommandResult:
    return first_line([git] + COMMIT_ARGS, cwd)


def version_descriptor(git: str, cwd=None) -> CommandResult:
    return first_line([git] + VERSION_ARGS, cwd)
