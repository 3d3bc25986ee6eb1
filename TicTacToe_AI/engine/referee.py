"""Move validation for the host-facing API."""

try:
    from Board import Mark
    from engine.errors import CellOccupied, InvalidCoordinate
except ImportError:
    from TicTacToe_AI.Board import Mark
    from TicTacToe_AI.engine.errors import CellOccupied, InvalidCoordinate


def check_move(move, board, mark):
    """
    Validate a move against bounds and occupancy.
    Raises InvalidCoordinate/CellOccupied on invalid moves, ValueError on a bad mark.
    """
    if mark not in (Mark.CROSS, Mark.CIRCLE):
        raise ValueError("mark must be CROSS or CIRCLE")

    try:
        x, y = move
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(move, None, board.size) from exc
    if not board.in_bounds(x, y):
        raise InvalidCoordinate(x, y, board.size)
    if not board.is_empty(x, y):
        raise CellOccupied(x, y, board.cells[x][y])

    return True
