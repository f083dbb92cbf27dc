"""
Regex substitution core.
Compiles a pattern string in dot-all mode and applies it to a subject string,
replacing either every match or only the first one.

Note on "multiline": patterns are compiled with DOTALL, so ``.`` also matches
newline characters. MULTILINE is NOT set, so ``^`` and ``$`` still anchor to
the start and end of the whole subject rather than to line boundaries.
"""

import logging
import re
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Tuple

import regex  # More powerful regex library with better Unicode support

logger = logging.getLogger(__name__)


class InvalidPatternError(ValueError):
    """Raised when a pattern string does not compile as a regular expression."""

    def __init__(self, pattern: str, message: str):
        super().__init__(f"Invalid regex pattern {pattern!r}: {message}")
        self.pattern = pattern
        self.message = message


@dataclass
class SubstitutionResult:
    """Result of a substitution."""
    text: str
    replacements: int


class Substitutor:
    """
    Applies regex substitutions to plain strings.
    """

    def __init__(self,
                 use_advanced_regex: bool = True,
                 cache_size: int = 0,
                 convert_dollar_refs: bool = False):
        """
        Initialize substitutor.

        Args:
            use_advanced_regex: Use 'regex' library instead of 're' for better Unicode support
            cache_size: Number of compiled patterns to keep (0 = compile on every call)
            convert_dollar_refs: Accept $1, $2 style group references in replacements
        """
        if cache_size < 0:
            raise ValueError("cache_size must be >= 0")

        self.regex_module = regex if use_advanced_regex else re
        self.cache_size = cache_size
        self.convert_dollar_refs = convert_dollar_refs
        self._cache = OrderedDict()
        self._lock = threading.Lock()

    @property
    def flags(self) -> int:
        """Compilation flags applied to every pattern (dot matches newline)."""
        return self.regex_module.DOTALL

    def compile(self, pattern: str):
        """
        Compile pattern in dot-all mode.

        Args:
            pattern: Regex source string

        Returns:
            Compiled pattern object of the active regex module

        Raises:
            InvalidPatternError: If the pattern is not a valid regular expression
        """
        if self.cache_size:
            with self._lock:
                compiled = self._cache.get(pattern)
                if compiled is not None:
                    self._cache.move_to_end(pattern)
                    logger.debug("Pattern cache hit: %r", pattern)
                    return compiled

        try:
            compiled = self.regex_module.compile(pattern, self.flags)
        except self.regex_module.error as e:
            raise InvalidPatternError(pattern, str(e)) from e

        logger.debug("Compiled pattern %r with %s", pattern, self.regex_module.__name__)

        if self.cache_size:
            with self._lock:
                self._cache[pattern] = compiled
                self._cache.move_to_end(pattern)
                while len(self._cache) > self.cache_size:
                    self._cache.popitem(last=False)

        return compiled

    @property
    def cached_patterns(self) -> List[str]:
        """Cached pattern strings, least recently used first."""
        with self._lock:
            return list(self._cache)

    def clear_cache(self) -> None:
        """Drop all cached compiled patterns."""
        with self._lock:
            self._cache.clear()

    def substitute(self,
                   subject: str,
                   pattern: str,
                   replacement: str,
                   count: int = 0) -> SubstitutionResult:
        """
        Replace matches of pattern in subject.

        Args:
            subject: Text to process
            pattern: Regex pattern
            replacement: Replacement string (supports backreferences like \\1, \\g<name>)
            count: Maximum number of replacements (0 = unlimited)

        Returns:
            SubstitutionResult with the new text and the number of replacements made
        """
        if count < 0:
            raise ValueError("count must be >= 0")

        compiled = self.compile(pattern)

        if self.convert_dollar_refs:
            # Convert JavaScript-style backreferences ($1, $2) to Python-style (\1, \2)
            replacement = re.sub(r'\$(\d+)', r'\\\1', replacement)

        new_text, replacements = compiled.subn(replacement, subject, count=count)
        return SubstitutionResult(text=new_text, replacements=replacements)

    def replace_all(self, subject: str, pattern: str, replacement: str) -> str:
        """Replace every non-overlapping match, scanning left to right."""
        return self.substitute(subject, pattern, replacement).text

    def replace_first(self, subject: str, pattern: str, replacement: str) -> str:
        """Replace only the leftmost match."""
        return self.substitute(subject, pattern, replacement, count=1).text

    def validate_pattern(self, pattern: str) -> Tuple[bool, str]:
        """
        Validate regex pattern.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            self.compile(pattern)
            return True, ""
        except InvalidPatternError as e:
            return False, e.message


_default = Substitutor()


def replace_all(subject: str, pattern: str, replacement: str) -> str:
    """
    Replace every match of pattern in subject.

    The pattern is compiled with DOTALL ("." matches newlines), not MULTILINE.
    """
    return _default.replace_all(subject, pattern, replacement)


def replace_first(subject: str, pattern: str, replacement: str) -> str:
    """
    Replace the first match of pattern in subject.

    The pattern is compiled with DOTALL ("." matches newlines), not MULTILINE.
    """
    return _default.replace_first(subject, pattern, replacement)


def validate_pattern(pattern: str) -> Tuple[bool, str]:
    return _default.validate_pattern(pattern)


# Names the functions are known by as template filters
regex_replace = replace_all
regex_replace_once = replace_first
