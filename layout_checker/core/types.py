"""Shared types for layout-checker: Diagnostic variants, PageHandle, Check, CheckContext, Report."""

from __future__ import annotations

import enum
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol

from layout_checker.core.config import CheckConfig


class DiagnosticId(str, enum.Enum):
    """Every diagnostic id a check can emit."""

    NOT_COLOR_SCHEME = 'notColorScheme'
    SWITCH_BUTTONS_CHANGED = 'switchButtonsChanged'
    NOT_DARK_COLOR_SCHEME = 'notDarkColorScheme'
    BLOCK_NOT_FULL_SCREEN = 'blockNotFullScreen'
    SEMANTIC_TAGS_MISSING = 'semanticTagsMissing'
    NOT_RESET_MARGINS = 'notResetMargins'
    NOT_FIXED_BACKGROUND = 'notFixedBackground'


@dataclass(frozen=True)
class Diagnostic:
    """A rule violation reported by a check.

    Subclasses fix the id and carry only the fields their message needs.
    `values` exposes those fields under the keys the message templates use.
    """

    id: ClassVar[DiagnosticId]

    @property
    def values(self) -> dict[str, str]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {'id': self.id.value}
        if self.values:
            obj['values'] = dict(self.values)
        return obj


@dataclass(frozen=True)
class NotColorScheme(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.NOT_COLOR_SCHEME


@dataclass(frozen=True)
class SwitchButtonsChanged(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.SWITCH_BUTTONS_CHANGED


@dataclass(frozen=True)
class NotDarkColorScheme(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.NOT_DARK_COLOR_SCHEME


@dataclass(frozen=True)
class BlockNotFullScreen(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.BLOCK_NOT_FULL_SCREEN

    name: str

    @property
    def values(self) -> dict[str, str]:
        return {'name': self.name}


@dataclass(frozen=True)
class SemanticTagsMissing(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.SEMANTIC_TAGS_MISSING

    tag_names: str  # comma-space joined selectors

    @property
    def values(self) -> dict[str, str]:
        return {'tagNames': self.tag_names}


@dataclass(frozen=True)
class NotResetMargins(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.NOT_RESET_MARGINS

    tag_names: str  # comma-space joined selectors

    @property
    def values(self) -> dict[str, str]:
        return {'tagNames': self.tag_names}


@dataclass(frozen=True)
class NotFixedBackground(Diagnostic):
    id: ClassVar[DiagnosticId] = DiagnosticId.NOT_FIXED_BACKGROUND

    selector: str

    @property
    def values(self) -> dict[str, str]:
        return {'selector': self.selector}


class PageHandle(Protocol):
    """The async page operations checks rely on. A Playwright Page satisfies it."""

    async def query_selector(self, selector: str) -> Any: ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any: ...

    async def emulate_media(self, *, color_scheme: str | None = None) -> None: ...

    async def wait_for_timeout(self, timeout: float) -> None: ...

    async def screenshot(self, *, path: str | None = None, full_page: bool = False) -> bytes: ...


# CLI flag that supplies each optional CheckContext input
INPUT_FLAGS: dict[str, str] = {
    'selector': '--selector',
    'tags': '--tag',
}


@dataclass
class CheckContext:
    """Inputs handed to a registered check's run function.

    `page` is None for checks that open their own browser session.
    """

    url: str
    page: PageHandle | None = None
    selector: str | None = None
    tags: list[str] = field(default_factory=list)
    config: CheckConfig = field(default_factory=CheckConfig)


class Check:
    """A self-registering layout check.

    Usage in a check module:

        check = Check(name='color-scheme', help='...', needs_page=True)

        @check.run
        async def run(ctx, report):
            ...

    `requires` names the CheckContext fields that must be set for the check
    to be runnable (keys of INPUT_FLAGS). `doc` is filled in by the registry
    from the check module's docstring.
    """

    def __init__(self, name: str, help: str = '', needs_page: bool = True, requires: tuple[str, ...] = ()):
        self.name = name
        self.help = help
        self.needs_page = needs_page
        self.requires = requires
        self.doc = ''
        self._run_fn: Callable[[CheckContext, Report], Awaitable[None]] | None = None

    def run(self, fn: Callable[[CheckContext, Report], Awaitable[None]]) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    @property
    def summary(self) -> str:
        """First line of the module docs, or the short help."""
        return self.doc.splitlines()[0] if self.doc else self.help

    def missing_inputs(self, ctx: CheckContext) -> list[str]:
        """Return the names of required context fields that are empty."""
        return [name for name in self.requires if not getattr(ctx, name)]

    def missing_flags(self, ctx: CheckContext) -> list[str]:
        """CLI flags that would supply the missing inputs."""
        return [INPUT_FLAGS[name] for name in self.missing_inputs(ctx)]

    async def execute(self, ctx: CheckContext, report: Report) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        await self._run_fn(ctx, report)


@dataclass
class Report:
    """Accumulates diagnostics from checks for text/JSON output."""

    url: str = ''
    results: dict[str, list[Diagnostic]] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, check_name: str, diagnostics: list[Diagnostic]) -> None:
        """Record the outcome of one check."""
        self.results[check_name] = list(diagnostics)
        if diagnostics:
            self.fail_count += 1
        else:
            self.pass_count += 1

    def skip(self, check_name: str, reason: str) -> None:
        self.skipped[check_name] = reason

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for diags in self.results.values() for d in diags]
