"""``${name}`` variable substitution against a store and the environment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from propconf.errors import ExpansionLimitError, UnterminatedVariableError
from propconf.loglog import ErrorSink, get_loglog
from propconf.types import SubstitutionFlags
from propconf.variables import EnvironmentProvider, VariableProvider

if TYPE_CHECKING:
    from propconf.properties import Properties

__all__ = [
    "substitute",
    "expand_properties",
    "DELIM_START",
    "DELIM_STOP",
    "MAX_EXPANSIONS",
    "MAX_EXPANSION_PASSES",
]

logger = logging.getLogger(__name__)

DELIM_START = "${"
DELIM_STOP = "}"

# Nested re-expansions allowed for one reference in a recursive substitute() call.
MAX_EXPANSIONS = 1000
# Whole-store passes allowed in one recursive expand_properties() call.
MAX_EXPANSION_PASSES = 100


def substitute(
    text: str,
    properties: Properties | None,
    flags: SubstitutionFlags | None = None,
    *,
    provider: VariableProvider | None = None,
    sink: ErrorSink | None = None,
) -> tuple[str, bool]:
    """Replace ``${name}`` references in *text*.

    Markers do not nest: the first ``}`` after ``${`` closes it. With
    ``shadow_environment`` the store is consulted before *provider*
    (the process environment by default). Unresolved names stay literal
    unless ``allow_empty_substitution`` is set. With ``recursive_expansion``
    scanning restarts at the replaced position, so a replacement containing
    ``${...}`` is expanded as well.

    Example:
        ``substitute("Value is ${k}", Properties with k=v)`` gives
        ``("Value is v", True)``.

    Returns:
        ``(result, changed)``. If a ``${`` has no closing brace the error is
        reported through *sink* and ``(text, False)`` is returned.
    """
    if flags is None:
        flags = SubstitutionFlags()
    provider = provider if provider is not None else EnvironmentProvider()

    pattern = text
    pos = 0
    changed = False
    expansions = 0
    nested_end = 0

    while True:
        var_start = pattern.find(DELIM_START, pos)
        if var_start == -1:
            return pattern, changed

        var_end = pattern.find(DELIM_STOP, var_start)
        if var_end == -1:
            err = UnterminatedVariableError(text=pattern, position=var_start)
            _resolve_sink(sink).error(err.message, exc=err)
            return text, False

        name = pattern[var_start + len(DELIM_START) : var_end]
        replacement = ""
        if flags.shadow_environment and properties is not None:
            replacement = properties.get(name)
        if not flags.shadow_environment or (not flags.allow_empty_substitution and not replacement):
            env_value = provider.get(name)
            if env_value is not None:
                replacement = env_value

        if not replacement and not flags.allow_empty_substitution:
            # Leave the reference as written and move past it.
            pos = var_end + len(DELIM_STOP)
            continue

        span_end = var_end + len(DELIM_STOP)
        pattern = pattern[:var_start] + replacement + pattern[span_end:]
        changed = True
        if not flags.recursive_expansion:
            pos = var_start + len(replacement)
            continue

        # Only references found inside earlier replacement text count
        # toward the limit; independent references reset it.
        if var_start < nested_end:
            delta = len(replacement) - (span_end - var_start)
            nested_end = max(nested_end + delta, var_start + len(replacement))
            expansions += 1
        else:
            nested_end = var_start + len(replacement)
            expansions = 1
        if expansions > MAX_EXPANSIONS:
            limit = ExpansionLimitError(text=text, limit=MAX_EXPANSIONS)
            _resolve_sink(sink).error(limit.message, exc=limit)
            return text, False


def expand_properties(
    properties: Properties,
    flags: SubstitutionFlags | None = None,
    *,
    provider: VariableProvider | None = None,
    sink: ErrorSink | None = None,
) -> bool:
    """Substitute variables in every key and value of *properties* in place.

    A key whose name changes is moved, value and all, to the new name. With
    ``recursive_expansion`` passes repeat until nothing changes.

    Returns:
        True if any key or value was rewritten.
    """
    if flags is None:
        flags = SubstitutionFlags()
    any_changed = False

    for _ in range(MAX_EXPANSION_PASSES):
        changed = False
        for key in properties.keys():
            value = properties.get(key)
            new_key, key_changed = substitute(key, properties, flags, provider=provider, sink=sink)
            if key_changed:
                properties.remove(key)
                properties.set(new_key, value)
                changed = True

            new_value, value_changed = substitute(value, properties, flags, provider=provider, sink=sink)
            if value_changed:
                properties.set(new_key, new_value)
                changed = True

        any_changed = any_changed or changed
        if not (changed and flags.recursive_expansion):
            return any_changed

    logger.warning("Property expansion still changing after %d passes", MAX_EXPANSION_PASSES)
    return any_changed


def _resolve_sink(sink: ErrorSink | None) -> ErrorSink:
    return sink if sink is not None else get_loglog()
