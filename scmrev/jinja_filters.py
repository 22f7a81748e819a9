"""
This module provides all our custom filters for the Jinja2 environment.

Any globals defined in this file are automatically imported as filters in
Jinja2. Anything that shouldn't be imported should have a name that starts with
an underscore.
"""


def c_string(value):
    """Quote a string as a C string literal."""
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'
