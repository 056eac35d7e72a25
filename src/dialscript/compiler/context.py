# topmark:header:start
#
#   project      : DialScript
#   file         : context.py
#   file_relpath : src/dialscript/compiler/context.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Per-compile validation state."""

from __future__ import annotations

from dataclasses import dataclass, field


def parse_character_list(value: str | None) -> set[str]:
    """Split a ``Characters:`` value into a set of trimmed, non-empty names."""
    return set(ordered_characters(value))


def ordered_characters(value: str | None) -> tuple[str, ...]:
    """Split a ``Characters:`` value, keeping declaration order and dropping repeats."""
    if not value:
        return ()
    return tuple(dict.fromkeys(name.strip() for name in value.split(",") if name.strip()))


@dataclass
class SceneContext:
    """Mutable state threaded through one validator run.

    The three logical validator states are derived from the flags:
    outside a scene (``current_scene == 0``), inside a scene before any dialog
    block, and inside a dialog block (``in_dialog``).

    Attributes:
        current_scene (int): Number of the accepted scene; ``0`` when none is open.
        has_scene (bool): A scene header was accepted.
        has_level (bool): The scene declared its level.
        has_location (bool): The scene declared its location.
        has_characters (bool): The scene declared its characters.
        in_dialog (bool): A dialog block is open.
        known_characters (set[str]): Names declared by the scene (case-sensitive).
        character_order (tuple[str, ...]): The same names in declaration order.
    """

    current_scene: int = 0
    has_scene: bool = False
    has_level: bool = False
    has_location: bool = False
    has_characters: bool = False
    in_dialog: bool = False
    known_characters: set[str] = field(default_factory=set)
    character_order: tuple[str, ...] = ()

    @property
    def in_scene(self) -> bool:
        """Return True once a scene header has been accepted."""
        return self.current_scene != 0

    def enter_scene(self, number: int) -> None:
        """Accept a scene header and reset everything the scene owns."""
        self.current_scene = number
        self.has_scene = True
        self.in_dialog = False
        self.has_level = False
        self.has_location = False
        self.has_characters = False
        self.known_characters.clear()
        self.character_order = ()

    def declare_characters(self, value: str | None) -> None:
        """Accept the scene's ``Characters:`` line."""
        self.character_order = ordered_characters(value)
        self.known_characters = set(self.character_order)
        self.has_characters = True
