"""
Regex processor.
Pattern validation, flag parsing, searching and template replacement on plain text.
"""

import re
import regex  # More powerful regex library with better Unicode support
from typing import List, Tuple, Optional, Iterable

from .match_rewriter import MatchRewriter, Replace, RewriteResult, STRATEGY_OVERWRITE, iter_matches


FLAG_LETTERS = {
    'i': 'IGNORECASE',
    'm': 'MULTILINE',
    's': 'DOTALL',
    'x': 'VERBOSE',
    'u': 'UNICODE',
}


def match_substrings(match, groups: Optional[Iterable[int]] = None) -> List[str]:
    """
    Text of each group of a match.

    Args:
        match: Match object from the regex engine
        groups: Group indices to return; default is every group, 0 first

    Returns:
        List of group texts, '' for groups that did not participate
    """
    if groups is None:
        groups = range(len(match.groups()) + 1)
    return [match.group(index) or '' for index in groups]


class RegexProcessor:
    """
    Handles regex operations on plain text.
    """

    def __init__(self, use_advanced_regex: bool = True):
        """
        Initialize regex processor.

        Args:
            use_advanced_regex: Use 'regex' library instead of 're' for better Unicode support
        """
        self.regex_module = regex if use_advanced_regex else re

    def parse_flags(self, letters: str) -> int:
        """
        Convert flag letters (e.g. 'im') to regex flags.

        Raises:
            ValueError: On a letter that is not a known flag
        """
        flags = 0
        for letter in letters or '':
            name = FLAG_LETTERS.get(letter.lower())
            if name is None:
                raise ValueError(f"Unknown regex flag '{letter}' (use {''.join(FLAG_LETTERS)})")
            flags |= getattr(self.regex_module, name)
        return flags

    def find_in_text(self,
                     text: str,
                     pattern: str,
                     flags: int = 0,
                     search_range: Optional[Tuple[int, int]] = None) -> List[Tuple[int, int, str]]:
        """
        Find all matches of pattern in text.

        Args:
            text: Text to search in
            pattern: Regex pattern
            flags: Regex flags (e.g., regex.IGNORECASE)
            search_range: (start, end) character positions to search, see iter_matches

        Returns:
            List of (start, end, matched_text) tuples

        Raises:
            ValueError: If search_range is reversed or outside the text
        """
        try:
            compiled = self.regex_module.compile(pattern, flags)
        except self.regex_module.error as e:
            print(f"Regex error: {e}")
            return []

        return [(m.start(), m.end(), m.group(0)) for m in iter_matches(compiled, text, search_range)]

    def replace_in_text(self,
                        text: str,
                        pattern: str,
                        replacement: str,
                        flags: int = 0,
                        search_range: Optional[Tuple[int, int]] = None,
                        max_replacements: int = 0,
                        strategy: str = STRATEGY_OVERWRITE) -> Optional[RewriteResult]:
        """
        Replace matches in text with a template.

        Args:
            text: Text to process
            pattern: Regex pattern
            replacement: Replacement string (supports backreferences like \\1, \\2 or $1, $2)
            flags: Regex flags
            search_range: (start, end) character positions to search, see iter_matches
            max_replacements: Maximum number of replacements (0 = unlimited)
            strategy: 'overwrite' or 'splice', see MatchRewriter

        Returns:
            RewriteResult, or None if the pattern does not compile
        """
        # Convert JavaScript-style backreferences ($1, $2) to Python-style (\1, \2)
        template = re.sub(r'\$(\d+)', r'\\\1', replacement)

        rewriter = MatchRewriter(strategy=strategy,
                                 max_replacements=max_replacements,
                                 regex_module=self.regex_module)
        return rewriter.rewrite_detailed(
            text, pattern, lambda _text, match: Replace(match.expand(template)),
            flags=flags, search_range=search_range)

    def validate_pattern(self, pattern: str, flags: int = 0) -> Tuple[bool, str]:
        """
        Validate regex pattern.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            self.regex_module.compile(pattern, flags)
            return True, ""
        except self.regex_module.error as e:
            return False, str(e)
