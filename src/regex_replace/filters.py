"""
Template filter adapter.
Nothing is registered on import; hosts call register_filters() on their own
Jinja2 environment.
"""

from typing import Callable, Dict

from jinja2 import Environment

from .substitutor import regex_replace, regex_replace_once

FILTERS: Dict[str, Callable[[str, str, str], str]] = {
    'regex_replace': regex_replace,
    'regex_replace_once': regex_replace_once,
}


def register_filters(environment: Environment, prefix: str = "") -> Environment:
    """
    Add the regex filters to a Jinja2 environment.

    Usage in templates: {{ text | regex_replace('(\\w+) (\\w+)', '\\2 \\1') }}

    Args:
        environment: Environment whose filters mapping is updated
        prefix: Optional prefix for the registered filter names

    Returns:
        The same environment, for chaining
    """
    for name, func in FILTERS.items():
        environment.filters[prefix + name] = func
    return environment
