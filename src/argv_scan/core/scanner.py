"""The option scanner — incremental extraction of options from argv.

Usage
-----
The caller drives a loop; each iteration the scanner announces at most
one pending option and the caller offers its whole menu of accessors::

    output = Slot(None)
    verbosity = Slot(0)
    scanner = OptionScanner(sys.argv, "Usage: {name} [options] FILE...")
    while scanner:
        scanner.string("o", "--output", output)
        scanner.counter("v", "--verbose", verbosity)
    files = scanner.argv[1:]

Rules
-----
* ``-h`` / ``--help`` are reserved and checked before anything else.
* Positional arguments and a lone ``-`` stay where they are.
* ``--`` is removed and ends option scanning for good.
* Short options bundle (``-abc``); a short option taking a value uses the
  rest of the bundle (``-ofile``) or the next argument (``-o file``).
* Long options match exactly; one taking a value also accepts
  ``--long=value``.
* Accessors only act on the announced option, so at most one of them
  succeeds per iteration.  A bundle is announced once per character.
* An announced option that no accessor claims is reported on the next
  check as an unknown option.

Every diagnostic is written to a
:class:`~argv_scan.core.protocols.DiagnosticReporter` (stderr by default)
right before the matching :class:`~argv_scan.exceptions.ArgvError` is
raised.  Help text is never written here; it travels in
:class:`~argv_scan.exceptions.HelpRequested`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

from argv_scan.core.conversion import ConversionError, convert
from argv_scan.core.help_text import program_name, render_help, try_help_hint
from argv_scan.core.models import DOUBLE, INT64, NumericType, Slot
from argv_scan.core.protocols import DiagnosticReporter, StderrReporter
from argv_scan.exceptions import (
    ArgvError,
    ConstructionError,
    HelpRequested,
    InvalidArgumentError,
    MissingArgumentError,
    UsageError,
)

HELP_SHORT: str = "h"
HELP_LONG: str = "--help"


class OptionScanner:
    """Scan an argument vector for options, removing them as they match.

    Parameters
    ----------
    argv:
        The full argument vector, program path first.  The scanner works
        on its own copy; read the residue back from :attr:`argv`.
    help_text:
        Text shown for ``--help``.  Every ``{name}`` is replaced with the
        program's display name.
    reporter:
        Sink receiving each diagnostic before it is raised.  Defaults to
        :class:`~argv_scan.core.protocols.StderrReporter`.

    Raises
    ------
    ConstructionError
        If *argv* is empty or any entry is ``None``.
    """

    def __init__(
        self,
        argv: Sequence[str | None],
        help_text: str = "",
        *,
        reporter: DiagnosticReporter | None = None,
    ) -> None:
        if len(argv) < 1 or any(arg is None for arg in argv):
            raise ConstructionError("invalid arguments")

        self._args: list[str] = [str(arg) for arg in argv]
        self._help_text: str = help_text
        self._reporter: DiagnosticReporter = (
            reporter if reporter is not None else StderrReporter()
        )
        self._name: str = program_name(self._args[0])

        self._cursor: int = 1
        self._handling: bool = False
        self._finished: bool = False

        # Short-option bundle currently being consumed, and the index of
        # its next unconsumed character.
        self._bundle: str | None = None
        self._offset: int = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """The program's display name (base name of ``argv[0]``)."""
        return self._name

    @property
    def argv(self) -> tuple[str, ...]:
        """The argument vector as it stands now.

        Once the scan loop has finished this is the program path followed
        by the positional arguments in their original order.
        """
        return tuple(self._args)

    @property
    def argc(self) -> int:
        return len(self._args)

    # ------------------------------------------------------------------
    # Scan loop
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self.more()

    def more(self) -> bool:
        """Return ``True`` if another option is waiting to be handled.

        Raises
        ------
        HelpRequested
            If ``-h`` or ``--help`` is the pending option.
        UsageError
            If the option announced by the previous call was not claimed
            by any accessor.
        """
        if self._finished:
            return False

        if self.flag(HELP_SHORT, HELP_LONG, Slot(False)):
            raise HelpRequested(render_help(self._help_text, self._name))

        if self._handling:
            if self._bundle is not None:
                self._fail(UsageError, f"unknown option: -{self._bundle[self._offset]}")
            self._fail(UsageError, f"unknown option: {self._args[self._cursor]}")

        if self._bundle is not None:
            self._handling = True
            return True

        while (arg := self._peek()) is not None:
            if not arg.startswith("-") or arg == "-":
                self._cursor += 1
                continue
            if arg == "--":
                self._shift()
                break
            self._handling = True
            return True

        self._finished = True
        return False

    def try_help(self, message: str) -> NoReturn:
        """Report *message* as a usage error and raise :class:`UsageError`."""
        self._fail(UsageError, message)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def flag(self, short: str | None, long: str | None, slot: Slot[bool]) -> bool:
        """Consume a boolean option; set ``slot.value`` to ``True``."""
        if self._take_short(short) or self._take_long(long):
            slot.value = True
            return True
        return False

    def counter(self, short: str | None, long: str | None, slot: Slot[int]) -> bool:
        """Consume a repeatable option; increment ``slot.value``."""
        if self._take_short(short) or self._take_long(long):
            slot.value += 1
            return True
        return False

    def string(self, short: str | None, long: str | None, slot: Slot[str | None]) -> bool:
        """Consume an option taking a text value; store it in ``slot.value``."""
        value = self._take_short_with_arg(short)
        if value is None:
            value = self._take_long_with_arg(long)
        if value is None:
            return False
        slot.value = value
        return True

    def number(
        self,
        short: str | None,
        long: str | None,
        slot: Slot[int] | Slot[float],
        kind: NumericType | None = None,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
    ) -> bool:
        """Consume an option taking a numeric value.

        *kind* selects the conversion and the default bounds.  When
        omitted it is :data:`DOUBLE` for a slot holding a ``float`` and
        :data:`INT64` otherwise.

        Raises
        ------
        InvalidArgumentError
            If the value does not convert or lies outside
            ``[minimum, maximum]``.
        """
        if kind is None:
            kind = DOUBLE if isinstance(slot.value, float) else INT64

        option = f"-{short}"
        text = self._take_short_with_arg(short)
        if text is None:
            option = str(long)
            text = self._take_long_with_arg(long)
        if text is None:
            return False

        try:
            slot.value = convert(text, kind, minimum, maximum)
        except ConversionError:
            self._fail(InvalidArgumentError, f"invalid argument '{text}' for option {option}")
        return True

    # ------------------------------------------------------------------
    # Vector primitives
    # ------------------------------------------------------------------

    def _peek(self) -> str | None:
        if self._cursor < len(self._args):
            return self._args[self._cursor]
        return None

    def _shift(self) -> None:
        """Remove the argument under the cursor; later ones slide down."""
        del self._args[self._cursor]

    def _enter_bundle(self) -> str | None:
        """Return the active short-option bundle, starting one if possible.

        Pulls the argument under the cursor out of the vector when it is
        a short-option token.  Returns ``None`` when there is no bundle.
        """
        if self._bundle is not None:
            return self._bundle
        arg = self._peek()
        if arg is None or len(arg) < 2 or arg[0] != "-" or arg[1] == "-":
            return None
        self._shift()
        self._bundle = arg
        self._offset = 1
        return arg

    # ------------------------------------------------------------------
    # Match-and-consume primitives
    # ------------------------------------------------------------------

    def _take_short(self, short: str | None) -> bool:
        if not self._handling or not short:
            return False
        bundle = self._enter_bundle()
        if bundle is None or bundle[self._offset] != short:
            return False
        self._handling = False
        self._offset += 1
        if self._offset == len(bundle):
            self._bundle = None
        return True

    def _take_short_with_arg(self, short: str | None) -> str | None:
        if not self._handling or not short:
            return None
        bundle = self._enter_bundle()
        if bundle is None or bundle[self._offset] != short:
            return None
        self._handling = False

        rest = bundle[self._offset + 1:]
        self._bundle = None
        if rest:
            return rest

        value = self._peek()
        if value is None:
            self._fail(MissingArgumentError, f"expected argument for option -{short}")
        self._shift()
        return value

    def _take_long(self, long: str | None) -> bool:
        if not self._handling or self._bundle is not None or not long:
            return False
        if self._peek() != long:
            return False
        self._shift()
        self._handling = False
        return True

    def _take_long_with_arg(self, long: str | None) -> str | None:
        if not self._handling or self._bundle is not None or not long:
            return None
        arg = self._peek()
        if arg is None:
            return None

        if arg == long:
            self._shift()
            value = self._peek()
            if value is None:
                self._fail(MissingArgumentError, f"expected argument for option {long}")
            self._shift()
            self._handling = False
            return value

        prefix = f"{long}="
        if arg.startswith(prefix):
            self._shift()
            self._handling = False
            return arg[len(prefix):]

        return None

    # ------------------------------------------------------------------
    # Error reporting
    # ------------------------------------------------------------------

    def _fail(self, error_class: type[ArgvError], problem: str) -> NoReturn:
        error = error_class(problem, hint=try_help_hint(self._name), program=self._name)
        self._reporter.report(error.diagnostic)
        raise error
