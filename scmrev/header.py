"""This module renders the revision header and keeps it up to date on disk."""

import logging
import os

import jinja2

from scmrev import jinja_filters

TEMPLATE_NAME = 'scmrev.h.j2'


def initialize_jinja_env():
    """Set up the Jinja2 environment."""

    # Templates are stored in a subdirectory of the directory where this module lives.
    template_dir = \
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

    jinja_env = \
        jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir),
            # Disable autoescaping.
            autoescape=lambda template_name: False,
            # Set sane whitespace policies.
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True)

    jinja_env.filters.update({
        k: v
        for k, v in jinja_filters.__dict__.items()
        if not k.startswith('_') and callable(v)
    })

    return jinja_env


def render(commit, version):
    """Render the header text for the given commit and version strings."""
    return initialize_jinja_env().get_template(TEMPLATE_NAME).render(
        commit=commit, version=version)


def read_existing(path):
    """Read the current bytes of :path, treating a missing file as empty."""
    try:
        with open(path, 'rb') as header_file:
            return header_file.read()
    except FileNotFoundError:
        # The file doesn't exist yet.
        return b""


def write_if_changed(path, text):
    """Write :text to :path unless the file already holds exactly that.

    Returns True if the file was written."""
    data = text.encode('utf-8')
    if read_existing(path) == data:
        return False
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    logging.debug(f'Writing {path}')
    with open(path, 'wb') as header_file:
        header_file.write(data)
    return True
