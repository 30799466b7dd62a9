from config import AUTO_MOVE_CONSTANTS


def auto_move(mark, move_counter, height, width):
    """
    Returns the (row, col) candidate an automatic player with the given mark
    proposes on its move_counter-th attempt.
    The formula only looks at the board dimensions, never at its contents,
    so the candidate may be occupied; callers retry with the next counter.
    """
    multiplier, modulus, offset = AUTO_MOVE_CONSTANTS[mark]
    m = max(height, width)
    t = (move_counter * multiplier % modulus) + offset
    return (t // m) % height, t % width
