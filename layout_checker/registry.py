"""Registry of layout checks.

Every module under layout_checker/checks/ that exposes a `check` (a Check)
is registered under the check's CLI name, e.g. 'color-scheme'. The module
docstring is attached to the check as its `doc`, which `layout-checker help`
prints. Checks come back sorted by name, the order `all` runs them in.
"""

import functools
import importlib
import inspect
import pkgutil
from collections.abc import Collection

from layout_checker.core.types import Check, CheckContext


@functools.cache
def discover() -> dict[str, Check]:
    """Import every check module once and return checks keyed by name.

    Raises RuntimeError if two modules register the same name.
    """
    import layout_checker.checks as pkg

    found: dict[str, Check] = {}
    for info in pkgutil.iter_modules(pkg.__path__, prefix=f'{pkg.__name__}.'):
        module = importlib.import_module(info.name)
        chk = getattr(module, 'check', None)
        if not isinstance(chk, Check):
            continue
        if chk.name in found:
            raise RuntimeError(f'Check name {chk.name!r} registered twice ({info.name})')
        chk.doc = inspect.getdoc(module) or ''
        found[chk.name] = chk
    return dict(sorted(found.items()))


def get(name: str) -> Check:
    """Get a check by name."""
    checks = discover()
    if name not in checks:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(checks)}')
    return checks[name]


def all_checks() -> dict[str, Check]:
    """Return all registered checks, sorted by name."""
    return discover()


def plan(ctx: CheckContext, exclude: Collection[str] = ()) -> tuple[list[Check], dict[str, str]]:
    """Split the registered checks into those runnable with ctx and skip reasons for the rest."""
    runnable: list[Check] = []
    skipped: dict[str, str] = {}
    for name, chk in discover().items():
        if name in exclude:
            continue
        flags = chk.missing_flags(ctx)
        if flags:
            skipped[name] = 'requires ' + ', '.join(flags)
        else:
            runnable.append(chk)
    return runnable, skipped
