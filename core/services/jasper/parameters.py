"""
Report parameter resolution.

Parameters are stored and supplied as a single ``;`` separated string.
Each token is either ``key=value`` or a bare positional value. Bare values
are given a synthetic key ``p<n>``, where ``n`` is the 1-based position of
the token in the string (not the count of bare values seen so far).

Caller supplied parameters replace the stored defaults entirely; the two
strings are never merged key by key.
"""

from typing import List, Optional, Tuple
from urllib.parse import quote

PARAM_DELIMITER = ';'
POSITIONAL_KEY_PREFIX = 'p'

ResolvedParameters = List[Tuple[str, str]]


def choose_parameter_source(override: Optional[str], defaults: Optional[str]) -> Optional[str]:
    """Return the caller string if non-empty, else the defaults, else None."""
    if override:
        return override
    if defaults:
        return defaults
    return None


def parse_parameters(source: Optional[str], *, skip_empty: bool = False) -> ResolvedParameters:
    """
    Split a parameter string into ordered (key, value) pairs.

    Only the first ``=`` of a token separates key from value. Empty tokens
    (``a=1;;b=2``) become an empty positional parameter unless
    ``skip_empty`` is set, in which case they are dropped. Positions are
    counted over all tokens either way.

    Values are returned unencoded.
    """
    if not source:
        return []

    resolved = []
    for position, token in enumerate(source.split(PARAM_DELIMITER), start=1):
        if not token and skip_empty:
            continue
        key, sep, value = token.partition('=')
        if sep:
            resolved.append((key, value))
        else:
            resolved.append((f"{POSITIONAL_KEY_PREFIX}{position}", token))
    return resolved


def encode_parameters(params: ResolvedParameters) -> str:
    """Build a query string, keeping token order."""
    return '&'.join(
        f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in params
    )


def resolve_parameters(
    override: Optional[str],
    defaults: Optional[str],
    *,
    skip_empty: bool = False,
) -> ResolvedParameters:
    """Resolve the effective parameters for a request."""
    return parse_parameters(choose_parameter_source(override, defaults), skip_empty=skip_empty)


def build_query_string(
    override: Optional[str],
    defaults: Optional[str],
    *,
    skip_empty: bool = False,
) -> str:
    """
    Resolve parameters and encode them as a query string.

    Returns an empty string when the request carries no parameters.

    Example:
        >>> build_query_string(None, "x=1;20")
        'x=1&p2=20'
    """
    return encode_parameters(resolve_parameters(override, defaults, skip_empty=skip_empty))
