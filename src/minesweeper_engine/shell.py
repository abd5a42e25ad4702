"""
Line-oriented text shell for playing the engine in a terminal.

Parses one command per line and applies it to a Session:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           new game at the same difficulty
    d NAME      change difficulty
    b           back to difficulty selection
    q           quit
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import UnknownDifficultyError
from .game.difficulty import DIFFICULTIES, get_difficulty
from .game.environment import board_to_text, to_observation
from .game.flags import mines_remaining, toggle_flag
from .game.reveal import reveal
from .game.session import (
    Phase,
    Session,
    back_to_selection,
    new_session,
    reset,
    select_difficulty,
)

HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), "
    "d NAME (difficulty), b (back), q (quit)"
)


@dataclass
class Command:
    """A parsed shell command."""

    name: str
    position: Optional[Tuple[int, int]] = None
    argument: Optional[str] = None


def parse_command(line: str) -> Optional[Command]:
    """
    Parse a line of input.

    Returns:
        The command, or None if the line is not understood.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None
    name = parts[0]
    if name in ("r", "f") and len(parts) == 3:
        try:
            return Command(name, position=(int(parts[1]), int(parts[2])))
        except ValueError:
            return None
    if name == "d" and len(parts) == 2:
        return Command(name, argument=parts[1])
    if name in ("n", "b", "q", "h") and len(parts) == 1:
        return Command(name)
    return None


class TextShell:
    """Applies commands to a session and describes the result."""

    def __init__(self, session: Optional[Session] = None) -> None:
        self.session = session or new_session()
        self.finished = False

    def handle(self, line: str) -> str:
        """Apply one line of input and return the text to show."""
        command = parse_command(line)
        if command is None:
            return HELP

        if command.name == "q":
            self.finished = True
            return "Bye."
        if command.name == "h":
            return HELP
        if command.name == "d":
            try:
                profile = get_difficulty(command.argument)
            except UnknownDifficultyError as e:
                return str(e)
            select_difficulty(profile, self.session)
        elif command.name == "n":
            reset(self.session)
        elif command.name == "b":
            back_to_selection(self.session)
        elif command.name == "r":
            reveal(self.session, *command.position)
        elif command.name == "f":
            toggle_flag(self.session, *command.position)

        return self.status()

    def status(self) -> str:
        """Board dump plus a one-line summary of the session."""
        session = self.session
        if session.phase == Phase.DIFFICULTY_SELECTION:
            tiers = ", ".join(
                f"{name} ({profile.label}, {profile.mine_count} mines)"
                for name, profile in DIFFICULTIES.items()
            )
            return f"Select difficulty with d NAME: {tiers}"

        lines = [board_to_text(to_observation(session))]
        lines.append(
            f"Mines: {session.difficulty.mine_count}  "
            f"Flags: {session.flag_count}  "
            f"Left: {mines_remaining(session)}"
        )
        if session.is_won:
            lines.append("You win! (n for a new game)")
        elif session.is_lost:
            lines.append("Boom. Game over. (n for a new game)")
        return "\n".join(lines)
