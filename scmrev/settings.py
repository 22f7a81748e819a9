"""This module loads the per-user settings for the generator."""

import logging
import os
import sys

import yaml


class Settings:
    """The user's persisted preferences."""

    def __init__(self, git_command=None):
        self.git_command = git_command

    def __repr__(self):
        return 'Settings(git_command={!r})'.format(self.git_command)


def default_settings_path():
    """Get the platform-appropriate location of the settings file."""
    if sys.platform == 'win32':
        base = os.environ.get('APPDATA') or os.path.expanduser('~')
    else:
        base = os.environ.get('XDG_CONFIG_HOME') or \
            os.path.join(os.path.expanduser('~'), '.config')
    return os.path.join(base, 'scmrev', 'settings.yml')


def _read_gitextensions_command():
    """Read the git command that GitExtensions records in the registry."""
    import winreg

    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER,
                            r'Software\GitExtensions') as key:
            value, _ = winreg.QueryValueEx(key, 'gitcommand')
    except OSError:
        return None
    return value or None


def load_settings(path=None):
    """Load the settings from :path (or the default location).

    A missing or unreadable file yields empty settings."""
    if path is None:
        path = default_settings_path()

    config = {}
    try:
        with open(path, 'r') as settings_file:
            config = yaml.safe_load(settings_file) or {}
    except FileNotFoundError:
        logging.debug(f'No settings file at {path}')
    except yaml.YAMLError as e:
        logging.warning(f'Ignoring malformed settings file {path}: {e}')

    if not isinstance(config, dict):
        logging.warning(f'Ignoring settings file {path}: not a mapping')
        config = {}

    git_command = config.get('git_command')
    if git_command is not None and not isinstance(git_command, str):
        logging.warning(
            f'Ignoring git_command in {path}: {git_command!r} is not a path')
        git_command = None

    if not git_command and sys.platform == 'win32':
        git_command = _read_gitextensions_command()

    settings = Settings(git_command=git_command)
    logging.debug(f'Loaded {settings!r}')
    return settings
