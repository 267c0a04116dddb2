"""
User-facing message templates for the shell.
"""

import re

ANONYMOUS = "Anonymous"

INTRO = "Welcome to the File Manager, {username}!"
OUTRO = "Thank you for using File Manager, {username}, goodbye!"
CURRENT_DIR = "You are currently in {dir}"

_PLACEHOLDER = re.compile(r"\{[^}]*\}")


def _form_message(template: str, value: str) -> str:
    # value is inserted verbatim, no backreference processing
    return _PLACEHOLDER.sub(lambda _: value, template)


def get_intro(username: str) -> str:
    return _form_message(INTRO, username)


def get_outro(username: str) -> str:
    return _form_message(OUTRO, username)


def get_current_dir(directory: str) -> str:
    return _form_message(CURRENT_DIR, directory)
