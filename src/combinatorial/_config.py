"""Invariant-check configuration for the combinatorial package.

Controls whether the permutation engine's available list verifies its
link invariants on every restore.  The checks catch callers that
re-add entries out of LIFO order, at a small constant cost per step.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_invariant_checks`.
    2. The ``COMBINATORIAL_INVARIANT_CHECKS`` environment variable.
    3. ``__debug__``: on, unless Python runs with ``-O``.

Valid modes are ``"on"``, ``"off"`` and ``"auto"`` (case-insensitive).
The environment variable additionally accepts ``1``/``0`` and
``true``/``false``.

Examples:
    Disable checks globally from the shell::

        export COMBINATORIAL_INVARIANT_CHECKS=off

    Disable checks programmatically::

        import combinatorial
        combinatorial.set_invariant_checks("off")

    Re-enable the default resolution::

        combinatorial.set_invariant_checks("auto")

Generators read the setting once, at construction.
"""

from __future__ import annotations

import os

ENV_VAR = "COMBINATORIAL_INVARIANT_CHECKS"

_VALID_MODES = {"on", "off", "auto"}

_ENV_ALIASES = {
    "on": True,
    "1": True,
    "true": True,
    "off": False,
    "0": False,
    "false": False,
}

# Sentinel indicating "no programmatic override has been set".
_checks_override: str | None = None


def get_invariant_checks() -> bool:
    """Return ``True`` if invariant checks are active.

    Resolution order:
        1. Value set by :func:`set_invariant_checks` (unless ``"auto"``).
        2. ``COMBINATORIAL_INVARIANT_CHECKS`` environment variable.
        3. ``__debug__``.

    Returns:
        Whether new generators should verify their internal invariants.
    """
    # 1. Programmatic override
    if _checks_override is not None and _checks_override != "auto":
        return _checks_override == "on"

    # 2. Environment variable
    env = os.environ.get(ENV_VAR, "").strip().lower()
    if env in _ENV_ALIASES:
        return _ENV_ALIASES[env]

    # 3. Interpreter default
    return __debug__


def set_invariant_checks(mode: str | bool) -> None:
    """Override the invariant-check selection.

    Args:
        mode: One of ``"on"``, ``"off"``, or ``"auto"``
            (case-insensitive), or a bool.  ``"auto"`` restores the
            default resolution order.

    Raises:
        ValueError: If *mode* is not a recognised mode.
    """
    global _checks_override
    if isinstance(mode, bool):
        _checks_override = "on" if mode else "off"
        return
    normalised = mode.strip().lower()
    if normalised not in _VALID_MODES:
        raise ValueError(
            f"Unknown invariant-check mode '{mode}'. "
            f"Choose from: {sorted(_VALID_MODES)}"
        )
    _checks_override = normalised
