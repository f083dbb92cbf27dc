"""Regex substitution in dot-all mode."""

from .substitutor import (
    InvalidPatternError,
    SubstitutionResult,
    Substitutor,
    regex_replace,
    regex_replace_once,
    replace_all,
    replace_first,
    validate_pattern,
)

__version__ = '1.0.0'

__all__ = [
    'InvalidPatternError',
    'SubstitutionResult',
    'Substitutor',
    'regex_replace',
    'regex_replace_once',
    'replace_all',
    'replace_first',
    'validate_pattern',
]
