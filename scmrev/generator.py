"""This module queries git for the revision of the current checkout and
writes it to a header as GIT_COMMIT and GIT_VERSION.

The header is only rewritten when its content changes, so builds that depend
on it are not triggered needlessly."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from scmrev import __version__
from scmrev import git as _git
from scmrev import header
from scmrev.settings import Settings, load_settings

DEFAULT_OUTPUT = 'scmrev.h'


def create_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Write the git revision of a checkout to a C header')
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT,
                        help='header to generate (default: %(default)s)')
    parser.add_argument('-C', '--repository', dest='cwd', default=None,
                        help='directory to run git in')
    parser.add_argument('--settings', default=None,
                        help='settings file to read the git path from')
    parser.add_argument('--git', default=None,
                        help='preferred git executable')
    parser.add_argument('-V', type=int, dest='verbosity', default=1,
                        help='set verbosity')
    parser.add_argument('-v', '--version',
                        action='version', version=f'%(prog)s {__version__}',
                        help='show version and exit')
    return parser


def configure_logging(args: argparse.Namespace) -> None:
    if args.verbosity == 0:
        log_level = logging.WARN
    elif args.verbosity == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG
    logging.basicConfig(format='%(levelname)s:%(message)s', level=log_level)


def generate(output_path: str, settings: Settings, cwd=None,
             strategies=None, starter=_git.can_start) -> int:
    """Bring :output_path up to date and return the process exit code."""
    git_command = _git.locate_git(settings, strategies, starter)
    if git_command is None:
        tried = ', '.join(_git.candidate_commands(settings, strategies))
        logging.error(f'Cannot find git (tried {tried}), check your PATH:\n'
                      f'{os.environ.get("PATH", "")}')
        return 1

    values = []
    for extract, args in ((_git.commit_id, _git.COMMIT_ARGS),
                          (_git.version_descriptor, _git.VERSION_ARGS)):
        result = extract(git_command, cwd)
        if result.error is not None:
            command = ' '.join([git_command] + args)
            logging.error(f'Failed to exec {command}: {result.error}')
            return 1
        values.append(result.output)
    commit, version = values

    text = header.render(commit, version)
    if header.write_if_changed(output_path, text):
        logging.info(f'{output_path} updated to {version}')
    else:
        logging.info(f'{output_path} current at {version}')
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = create_argparser()
    args = parser.parse_args(argv)
    configure_logging(args)
    settings = load_settings(args.settings)
    if args.git:
        settings.git_command = args.git
    sys.exit(generate(args.output, settings, args.cwd))
