"""Language registry lookup and selection."""

import os
from collections.abc import Mapping

from commentscan.constants import DEFAULT_LANGUAGE, LANGUAGE_ENV_VAR, LANGUAGES
from commentscan.exceptions import ConfigurationError
from commentscan.models import LanguageSpec


def available_languages() -> list[str]:
    """Return the registered language names, sorted."""
    return sorted(LANGUAGES)


def get_language(name: str) -> LanguageSpec:
    """Look up a registered language by name (case-insensitive).

    Args:
        name: Registry key such as ``c`` or ``Java``

    Returns:
        The matching LanguageSpec

    Raises:
        ConfigurationError: If no language is registered under that name

    Examples:
        >>> get_language("C").extensions == frozenset({".c", ".cpp", ".h", ".hpp"})
        True
    """
    key = name.strip().lower()
    try:
        return LANGUAGES[key]
    except KeyError:
        raise ConfigurationError(name, available_languages()) from None


def language_from_env(environ: Mapping[str, str] | None = None) -> LanguageSpec:
    """Select the active language from the environment.

    Reads ``COMMENTSCAN_LANGUAGE``; an unset or blank value selects the
    default language.
    """
    env = os.environ if environ is None else environ
    name = env.get(LANGUAGE_ENV_VAR, "").strip() or DEFAULT_LANGUAGE
    return get_language(name)
