import logging
import sys

from config import INTEGER_RE, LOG_LEVEL, MAX_DIMENSION, PLAYER_TYPES
from console import play
from engine import HexGame
from errors import DimensionsError, HexError, PlayerTypeError, UsageError
from savefile import load_game

logger = logging.getLogger(__name__)


def parse_player_type(arg):
    if len(arg) != 1 or arg not in PLAYER_TYPES:
        raise PlayerTypeError(context={"type": arg})
    return arg


def parse_dimension(arg):
    if not INTEGER_RE.fullmatch(arg):
        raise DimensionsError(context={"value": arg})
    value = int(arg)
    if value <= 0 or value > MAX_DIMENSION:
        raise DimensionsError(context={"value": arg})
    return value


def build_game(args):
    """
    Creates the game session from the command line arguments
    (program name excluded): p1type p2type [height width | savefile].
    """
    if len(args) not in (3, 4):
        raise UsageError(context={"args": len(args)})
    player_types = (parse_player_type(args[0]), parse_player_type(args[1]))
    if len(args) == 4:
        height, width = parse_dimension(args[2]), parse_dimension(args[3])
        return HexGame(height, width, player_types=player_types)
    return load_game(args[2], player_types=player_types)


def run(args, stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr):
    """Plays one game. Returns the process exit status."""
    try:
        game = build_game(args)
        print(game.render(), file=stdout)
        play(game, stdin, stdout)
    except HexError as e:
        logger.debug("Exiting with %s", e)
        print(e.message, file=stderr)
        return e.exit_code
    return 0


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(run(sys.argv[1:]))


if __name__ == '__main__':
    main()
