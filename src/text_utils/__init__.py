"""String helpers."""

from .string_helpers import (replacing_occurrences, appending, non_empty, join_optional,
                             drop_last, dropping_first, replace_at_index,
                             range_distance_of_string, distance_to_character,
                             distance_to, as_string)

__all__ = ['replacing_occurrences', 'appending', 'non_empty', 'join_optional',
           'drop_last', 'dropping_first', 'replace_at_index', 'range_distance_of_string',
           'distance_to_character', 'distance_to', 'as_string']
