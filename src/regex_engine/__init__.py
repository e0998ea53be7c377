"""Regex rewriting engine."""

from .match_rewriter import (MatchRewriter, Replace, SKIP, RewriteResult, ShiftedMatch,
                             iter_matches, replacing_matches, STRATEGY_OVERWRITE, STRATEGY_SPLICE)
from .regex_processor import RegexProcessor, match_substrings

__all__ = ['MatchRewriter', 'Replace', 'SKIP', 'RewriteResult', 'ShiftedMatch', 'iter_matches',
           'replacing_matches', 'STRATEGY_OVERWRITE', 'STRATEGY_SPLICE', 'RegexProcessor',
           'match_substrings']
