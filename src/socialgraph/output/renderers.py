"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from socialgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from socialgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_message(result: ServiceResult) -> str:
    """Render a failed result as its bare message (interactive shell)."""
    console = create_console()
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text(msg), soft_wrap=True)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "friends":
        return _join_ids(result.data.get("friends", []))
    if result.op == "connection":
        return "yes" if result.data.get("connected") else "no"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _join_ids(ids: list[int]) -> str:
    return " ".join(str(i) for i in ids)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sg.key")
    style = "sg.id" if key.endswith("_id") else ""
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sg.error")
    op = Text(f"  {result.op}", style="sg.op")
    console.print(label, op, Text(" — "), Text(msg), sep="", soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"), soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="sg.ok"), Text(f"  {result.op}", style="sg.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


# ── Graph renderers ───────────────────────────────────────────────────


def _render_load(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    console.print(Text("Graph file loaded!", style="sg.ok"))
    _field(console, "source", data.get("source", ""))
    _field(console, "persons", data.get("persons", 0))
    _field(console, "friendships", data.get("friendships", 0))
    if verbose:
        _field(console, "declared_edges", data.get("declared_edges", 0))


def _render_friends(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ``Person X has N friends!`` followed by the sorted friend list."""
    data = result.data
    person = data.get("person_id")
    count = data.get("count", 0)
    headline = Text.assemble(
        "Person ",
        (str(person), "sg.id"),
        " has ",
        (str(count), "sg.count"),
        " friends!",
    )
    console.print(headline, soft_wrap=True)
    console.print(
        Text.assemble("List of friends: ", _join_ids(data.get("friends", []))),
        soft_wrap=True,
    )


def _render_connection(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the trace (if requested) and the found/not-found verdict."""
    data = result.data
    first = data.get("source_id")
    second = data.get("target_id")

    for line in data.get("trace", []):
        console.print(Text(line, style="sg.trace"), soft_wrap=True)

    if data.get("connected"):
        console.print(
            Text.assemble(
                "There is a connection from ",
                (str(first), "sg.id"),
                " to ",
                (str(second), "sg.id"),
                "!",
            ),
            soft_wrap=True,
        )
        if verbose and data.get("path"):
            chain = " → ".join(str(p) for p in data["path"])
            console.print(Text(f"  path: {chain}", style="sg.key"), soft_wrap=True)
    else:
        console.print(
            Text.assemble(
                "Cannot find a connection between ",
                (str(first), "sg.id"),
                " and ",
                (str(second), "sg.id"),
                style="sg.miss",
            ),
            soft_wrap=True,
        )


_OP_RENDERERS: dict[str, Any] = {
    "load": _render_load,
    "friends": _render_friends,
    "connection": _render_connection,
}
