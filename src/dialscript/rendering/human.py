# topmark:header:start
#
#   project      : DialScript
#   file         : human.py
#   file_relpath : src/dialscript/rendering/human.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Human-readable rendering of compile results, fixes and the example script.

Renderers are pure: they return lines of text and leave printing to the
caller. Styling goes through the console's ``styled()`` so that it disappears
when color is disabled.

Layout (one gutter column with the line number):

    ```
      12 │ ✗ Missing space after ':'
         │   Alan:Hello
         │        ^
         │   Hint: add a space after the colon, e.g. 'Name: Text'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dialscript.parser.kinds import LineKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from dialscript.cli.console_api import ConsoleLike
    from dialscript.compiler.result import CompileResult
    from dialscript.diagnostic.model import Diagnostic
    from dialscript.fixer.engine import LineFix
    from dialscript.parser.events import LineEvent

GUTTER: str = "│"
ERROR_MARK: str = "✗"
FIX_MARK: str = "◼"
SCENE_MARK: str = "◉"
DIALOG_MARK: str = "◆"


def _num(line_number: int) -> str:
    return f"{line_number:4d} {GUTTER}"


def _cont() -> str:
    return f"     {GUTTER}"


def render_diagnostic(diagnostic: Diagnostic, console: ConsoleLike) -> list[str]:
    """Render one diagnostic with its source line, caret and hint."""
    out: list[str] = []
    title: str = f"{_num(diagnostic.line_number)} {ERROR_MARK} {diagnostic.message}"
    tag: str = f"[{diagnostic.code.key}]"
    if console.enable_color:
        tag = diagnostic.category.color(tag)
    out.append(f"{console.styled(title, fg='red', bold=True)} {tag}")

    if diagnostic.line_content:
        cont: str = console.styled(_cont(), fg="bright_black")
        out.append(f"{cont}   {console.styled(diagnostic.line_content, fg='red')}")
        if diagnostic.has_caret:
            caret: str = console.styled("^", fg="red", bold=True)
            out.append(f"{cont}   {' ' * diagnostic.caret}{caret}")

    if diagnostic.hint:
        hint_label: str = console.styled("Hint:", bold=True)
        out.append(
            f"{console.styled(_cont(), fg='bright_black')}   {hint_label} "
            f"{console.styled(diagnostic.hint, fg='bright_black')}"
        )
    return out


def render_event(event: LineEvent, console: ConsoleLike) -> str:
    """Render one classified line for the ``--list`` view."""
    gutter: str = _num(event.line_number)
    match event.kind:
        case LineKind.EMPTY:
            return console.styled(gutter, fg="bright_black")
        case LineKind.COMMENT:
            return console.styled(f"{gutter} – {event.value}", fg="bright_black", dim=True)
        case LineKind.SCENE_HEADER:
            return console.styled(
                f"{gutter} {SCENE_MARK} Scene {event.number}", fg="cyan", bold=True
            )
        case LineKind.DIALOG_HEADER:
            return console.styled(
                f"{gutter} {DIALOG_MARK} Dialog {event.number}", fg="magenta", bold=True
            )
        case LineKind.LEVEL | LineKind.LOCATION | LineKind.CHARACTERS:
            label: str = console.styled(f"{event.kind.value.capitalize()}:", fg="cyan")
            return f"{console.styled(gutter, fg='bright_black')}   {label} {event.value}"
        case LineKind.DIALOG:
            name: str = console.styled(f"{event.name}:", bold=True)
            line: str = f"{console.styled(gutter, fg='bright_black')}   {name} {event.text}"
            if event.metadata:
                line += f" {console.styled(event.metadata, fg='yellow')}"
            return line
        case _:
            return console.styled(f"{gutter} {ERROR_MARK} {event.raw}", fg="red")


def render_header(path: Path | str, console: ConsoleLike) -> str:
    """Render the ``Compiling: <path>`` banner."""
    return f"{console.styled('Compiling:', fg='cyan', bold=True)} {path}"


def render_footer(result: CompileResult, console: ConsoleLike) -> str:
    """Render the one-line compile summary."""
    if result.success:
        label: str = console.styled("Parsing completed:", fg="green", bold=True)
        return f"{label} {result.total_lines} lines processed"
    label = console.styled("Parsing broken:", fg="red", bold=True)
    return f"{label} {result.total_lines} lines processed, {result.error_count} error(s)"


def render_result(
    path: Path | str,
    result: CompileResult,
    console: ConsoleLike,
    *,
    list_events: bool = False,
    verbosity: int = 0,
) -> list[str]:
    """Render a full ``check`` report for one file.

    Args:
        path: File the result belongs to.
        result: The compile result.
        console: Console used for styling.
        list_events: Also list every classified line.
        verbosity: ``-1`` prints diagnostics only; ``>= 1`` adds the banner.

    Returns:
        The report lines.
    """
    out: list[str] = []
    if verbosity > 0 or list_events:
        out.append(render_header(path, console))
    if list_events:
        out.extend(render_event(event, console) for event in result.events)
    for diagnostic in result.diagnostics:
        out.extend(render_diagnostic(diagnostic, console))
    if verbosity >= 0:
        out.append(render_footer(result, console))
    return out


def render_fix(fix: LineFix, console: ConsoleLike) -> list[str]:
    """Render one applied fix as a removed/added pair."""
    cont: str = console.styled(_cont(), fg="bright_black")
    title: str = f"{_num(fix.line_number)} {FIX_MARK} Fixed ({fix.rule.value})"
    return [
        console.styled(title, fg="blue", bold=True),
        f"{cont}   {console.styled(f'- {fix.before}', fg='red')}",
        f"{cont}   {console.styled(f'+ {fix.after}', fg='green')}",
    ]


def render_example(lines: Sequence[str], console: ConsoleLike) -> list[str]:
    """Render the bundled example script with syntax coloring."""
    out: list[str] = [console.styled("Example .ds file:", fg="cyan", bold=True), ""]
    for line in lines:
        stripped: str = line.strip()
        if stripped.startswith("[Scene"):
            out.append(console.styled(line, fg="cyan", bold=True))
        elif stripped.startswith("[Dialog"):
            out.append(console.styled(line, fg="magenta", bold=True))
        elif stripped.startswith("//"):
            out.append(console.styled(line, fg="bright_black"))
        elif ":" in line:
            key, rest = line.split(":", 1)
            if key in ("Level", "Location", "Characters"):
                out.append(f"{console.styled(key + ':', fg='cyan')}{rest}")
                continue
            text, brace, meta = rest.partition("{")
            styled_meta: str = console.styled(brace + meta, fg="yellow") if brace else ""
            out.append(f"{console.styled(key + ':', bold=True)}{text}{styled_meta}")
        else:
            out.append(line)
    return out
