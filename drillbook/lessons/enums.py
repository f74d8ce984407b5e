"""Messages as variant types and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Change the current colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether quitting was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")