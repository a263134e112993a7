"""Branch prefix resolution."""

import getpass
import os
from collections.abc import Mapping

from .constants import PREFIX_ENV_VAR
from .exceptions import IdentityError


def resolve_prefix(environ: Mapping[str, str] | None = None) -> str:
    """
    Determine the namespace segment for new branch names.

    The ``GNB_PREFIX`` override wins when it is set to something other than
    whitespace; otherwise the current system username is used. The value is
    trimmed but otherwise taken verbatim.

    Args:
        environ: Environment to read the override from (defaults to os.environ)

    Returns:
        Non-empty prefix string

    Raises:
        IdentityError: If neither the override nor the username is usable
    """
    if environ is None:
        environ = os.environ

    override = environ.get(PREFIX_ENV_VAR, "").strip()
    if override:
        return override

    try:
        username = getpass.getuser()
    except (OSError, KeyError) as e:
        raise IdentityError(
            f"Cannot determine your username. Set {PREFIX_ENV_VAR} to choose a branch prefix."
        ) from e

    username = (username or "").strip()
    if not username:
        raise IdentityError(
            f"Username is empty. Set {PREFIX_ENV_VAR} to choose a branch prefix."
        )
    return username
