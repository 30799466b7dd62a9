"""
Save file format.

    turn,height,width,movesO,movesX
    <height rows of exactly width characters from '.', 'O', 'X'>

turn is 1 when X moves next. Any deviation rejects the whole file.
"""
import logging

from config import AUTOMATIC, CHAR_MARKS, INTEGER_RE, MAX_DIMENSION
from engine import Grid, HexGame
from errors import InvalidSaveFileError, SaveFileReadError, SaveFileWriteError

logger = logging.getLogger(__name__)


def _parse_int(token, low, high=None):
    if not INTEGER_RE.fullmatch(token):
        raise InvalidSaveFileError(context={"token": token})
    value = int(token)
    if value < low or (high is not None and value > high):
        raise InvalidSaveFileError(context={"token": token})
    return value


def parse_save(text, player_types=(AUTOMATIC, AUTOMATIC)):
    """Builds a HexGame from save file text. Raises InvalidSaveFileError."""
    lines = text.split("\n")
    # A final newline leaves an empty trailing piece.
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise InvalidSaveFileError(context={"reason": "empty file"})

    tokens = lines[0].split(",")
    if len(tokens) != 5:
        raise InvalidSaveFileError(context={"reason": "header", "tokens": len(tokens)})
    turn = _parse_int(tokens[0], 0, 1)
    height = _parse_int(tokens[1], 1, MAX_DIMENSION)
    width = _parse_int(tokens[2], 1, MAX_DIMENSION)
    moves_o = _parse_int(tokens[3], 0)
    moves_x = _parse_int(tokens[4], 0)

    rows = lines[1:]
    if len(rows) != height:
        raise InvalidSaveFileError(context={"reason": "row count", "rows": len(rows)})
    for index, row in enumerate(rows):
        if len(row) != width or any(ch not in CHAR_MARKS for ch in row):
            raise InvalidSaveFileError(context={"reason": "row", "row": index})

    return HexGame(height, width, player_types=player_types, x_turn=turn == 1,
                   move_counters=(moves_o, moves_x), grid=Grid.from_rows(rows))


def format_save(game):
    """Returns the save file text of a game."""
    header = "{},{},{},{},{}".format(int(game.x_turn), game.height, game.width,
                                     game.players[0].move_counter, game.players[1].move_counter)
    return "\n".join([header] + game.grid.rows()) + "\n"


def load_game(path, player_types=(AUTOMATIC, AUTOMATIC)):
    try:
        f = open(path, "r", encoding="ascii", newline="")
    except OSError as e:
        raise SaveFileReadError(context={"path": path, "error": str(e)}) from e
    with f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise InvalidSaveFileError(context={"path": path, "reason": "encoding"}) from e
    game = parse_save(text, player_types)
    logger.info("Loaded %dx%d game from %s", game.height, game.width, path)
    return game


def save_game(game, path):
    """Writes the game to path. Raises SaveFileWriteError on failure."""
    if not path:
        raise SaveFileWriteError(context={"reason": "no file name"})
    try:
        with open(path, "w", newline="") as f:
            f.write(format_save(game))
    except OSError as e:
        raise SaveFileWriteError(context={"path": path, "error": str(e)}) from e
    logger.info("Saved game to %s", path)
