"""Manual move input and the interactive game loop."""
import logging
import sys

from config import INTEGER_RE, MARK_CHARS, SAVE_COMMAND
from errors import SaveFileWriteError, UnexpectedEOFError
from savefile import save_game

logger = logging.getLogger(__name__)


class SaveRequest:
    """A manual input line asking to save the game to `path`."""
    def __init__(self, path):
        self.path = path

    def __eq__(self, other):
        return isinstance(other, SaveRequest) and other.path == self.path

    def __repr__(self):
        return f"SaveRequest({self.path!r})"


def parse_command(line):
    """
    Translates one manual input line.
    Returns a SaveRequest, a (row, col) tuple, or None for a line to ignore.
    """
    line = line.rstrip("\n")
    if line.startswith(SAVE_COMMAND):
        return SaveRequest(line[len(SAVE_COMMAND):])
    tokens = line.split()
    if len(tokens) != 2 or not all(INTEGER_RE.fullmatch(t) for t in tokens):
        return None
    return int(tokens[0]), int(tokens[1])


def read_manual_move(game, stdin=sys.stdin, stdout=sys.stdout):
    """
    Prompts the current manual player until a valid move is entered.
    Save requests are served in between. Raises UnexpectedEOFError when
    input runs out.
    """
    player = game.current_player
    while True:
        stdout.write(f"Player {player.name}] ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise UnexpectedEOFError(context={"player": player.name})
        command = parse_command(line)
        if isinstance(command, SaveRequest):
            try:
                save_game(game, command.path)
            except SaveFileWriteError as e:
                logger.info("Save failed: %s", e)
                print(e.message, file=stdout)
            continue
        if command is not None and game.is_move_valid(*command):
            return command


def play(game, stdin=sys.stdin, stdout=sys.stdout):
    """Runs the turn loop until somebody wins. Returns the winner's mark."""
    while not game.is_over:
        player = game.current_player
        if player.is_manual:
            row, col = read_manual_move(game, stdin, stdout)
        else:
            row, col = game.generate_auto_move()
            print(f"Player {player.name} => {row} {col}", file=stdout)
        game.make_move(row, col)
        print(game.render(), file=stdout)
    print(f"Player {MARK_CHARS[game.winner]} wins", file=stdout)
    return game.winner
