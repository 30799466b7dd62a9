from collections import Counter

from tqdm import tqdm

from config import MARK_CHARS, O, X
from engine import HexGame

# --- Configuration ---
CONFIG = {
    'min_size': 1,
    'max_size': 12,
    'rectangular': True,  # also play boards whose height differs from width
}


def board_sizes(min_size, max_size, rectangular):
    """Returns the (height, width) pairs swept by evaluate()."""
    sizes = []
    for height in range(min_size, max_size + 1):
        for width in range(min_size, max_size + 1):
            if rectangular or height == width:
                sizes.append((height, width))
    return sizes


def play_auto_game(height, width):
    """Plays automatic O against automatic X silently. Returns (winner, stones placed)."""
    game = HexGame(height, width)
    stones = 0
    while not game.is_over:
        game.make_move(*game.generate_auto_move())
        stones += 1
    return game.winner, stones


def evaluate():
    """Pits the two automatic players against each other on every board size."""
    sizes = board_sizes(CONFIG['min_size'], CONFIG['max_size'], CONFIG['rectangular'])
    wins = Counter()
    total_stones = 0
    for height, width in tqdm(sizes, desc="Boards"):
        winner, stones = play_auto_game(height, width)
        wins[winner] += 1
        total_stones += stones

    print("\n--- Overall Results ---")
    for mark in (O, X):
        print(f"Total Wins for Player {MARK_CHARS[mark]}: {wins[mark]}/{len(sizes)}")
    if sizes:
        print(f"Average stones per game: {total_stones / len(sizes):.2f}")
    return wins


if __name__ == '__main__':
    evaluate()
