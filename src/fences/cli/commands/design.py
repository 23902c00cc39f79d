"""Interactive design session.

Reads one command per line and applies it to a DesignController, printing
a short status after every change. This is the terminal counterpart of the
pole and gate buttons, the turn selector and the undo/reset controls.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from fences.application import DesignController, DesignSnapshot
from fences.cli.commands.settings import load_fence_config
from fences.domain import PoleLength
from fences.infrastructure import (
    BillOfMaterialsFormatter,
    ElevationFormatter,
    JsonExporter,
    PlanFormatter,
)

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  1.8 | 2.4 | 3.6      add a pole section of that length
  gate                 add a 1m gate
  turn <deg>           set the turn for the next sections (negative = left)
  left <deg>           same as turn -<deg>
  right <deg>          same as turn <deg>
  undo                 remove the last section
  reset                clear the design
  overlap <m>          change the joint overlap
  height <m>           change the fence height
  spacing <m>          change the rail spacing
  show                 print the material bill
  plan                 print segment positions
  elevation            print rail heights and post stations
  json                 print the design as JSON
  help                 show this help
  quit                 leave the session"""

QUIT_WORDS = frozenset({"quit", "exit", "q"})


class DesignSession:
    """Dispatches text commands to a DesignController.

    Attributes:
        controller: The controller holding the design state.
    """

    def __init__(self, controller: DesignController) -> None:
        self.controller = controller
        self._commands: dict[str, Callable[[list[str]], str]] = {
            "gate": self._gate,
            "turn": self._turn,
            "left": lambda args: self._turn(args, sign=-1.0),
            "right": self._turn,
            "undo": self._undo,
            "reset": self._reset,
            "overlap": lambda args: self._configure(args, "overlap"),
            "height": lambda args: self._configure(args, "fence_height"),
            "spacing": lambda args: self._configure(args, "rail_spacing"),
            "show": lambda args: BillOfMaterialsFormatter().format(self.snapshot.bill),
            "plan": lambda args: PlanFormatter().format(
                self.snapshot.design, self.snapshot.geometry
            ),
            "elevation": lambda args: ElevationFormatter().format(self.snapshot.elevation),
            "json": lambda args: JsonExporter().format(self.snapshot),
            "help": lambda args: HELP_TEXT,
        }

    @property
    def snapshot(self) -> DesignSnapshot:
        return self.controller.snapshot()

    def handle(self, line: str) -> str:
        """Apply one command line and return the text to show.

        Raises:
            ValueError: If the command or its argument is invalid.
        """
        words = line.strip().lower().split()
        if not words:
            return ""
        name, args = words[0], words[1:]
        logger.debug(f"Session command: {name} {args}")
        if name.removesuffix("m") in {f"{pole.value:g}" for pole in PoleLength}:
            self.controller.add_pole(float(name.removesuffix("m")))
            return self.status()
        handler = self._commands.get(name)
        if handler is None:
            raise ValueError(f"Unknown command '{name}'. Type 'help' for commands.")
        return handler(args)

    def status(self) -> str:
        """One-line summary of the current design."""
        snap = self.snapshot
        bill = snap.bill
        shape = "closed loop" if snap.geometry.is_closed_loop else "open run"
        return (
            f"{bill.segment_count} sections, {bill.total_length:.2f}m, {shape}, "
            f"{bill.total_posts} posts, est. {bill.currency_symbol}{bill.total_cost:,.2f} "
            f"[next turn {snap.pending_turn:g}]"
        )

    def _gate(self, args: list[str]) -> str:
        self.controller.add_gate()
        return self.status()

    def _turn(self, args: list[str], sign: float = 1.0) -> str:
        angle = _single_number(args, "turn")
        self.controller.select_turn(sign * angle)
        return self.status()

    def _undo(self, args: list[str]) -> str:
        self.controller.remove_last()
        return self.status()

    def _reset(self, args: list[str]) -> str:
        self.controller.reset()
        return self.status()

    def _configure(self, args: list[str], field_name: str) -> str:
        value = _single_number(args, field_name)
        config = self.controller.config.with_changes(**{field_name: value})
        self.controller.update_configuration(config)
        return self.status()


def _single_number(args: list[str], name: str) -> float:
    if len(args) != 1:
        raise ValueError(f"'{name}' takes exactly one number")
    try:
        value = float(args[0])
    except ValueError:
        raise ValueError(f"'{args[0]}' is not a number")
    if not math.isfinite(value):
        raise ValueError(f"'{args[0]}' is not a finite number")
    return value


def design_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
) -> None:
    """Design a fence interactively, one section at a time.

    Type a pole length (1.8, 2.4, 3.6) or 'gate' to add a section, 'turn 90'
    to change direction, 'undo' or 'reset' to correct mistakes, and 'show'
    for the material bill. Type 'help' for every command.

    Example:
        fences design --config kraal.json
    """
    fence_config, _ = load_fence_config(config_file)
    session = DesignSession(DesignController(config=fence_config))
    typer.echo("Fence designer. Type 'help' for commands, 'quit' to finish.")

    while True:
        try:
            line = typer.prompt("fence", default="", show_default=False)
        except typer.Abort:
            break
        if line.strip().lower() in QUIT_WORDS:
            break
        try:
            output = session.handle(line)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            continue
        if output:
            typer.echo(output)

    typer.echo(BillOfMaterialsFormatter().format(session.snapshot.bill))
