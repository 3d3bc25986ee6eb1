"""Abstract player interface for human or AI controllers."""

try:
    from engine import referee
    from engine.errors import TicTacToeError
except ImportError:
    from TicTacToe_AI.engine import referee
    from TicTacToe_AI.engine.errors import TicTacToeError


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board):
        """Return (x, y) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, input_fn=input, output=print):
        super().__init__(mark)
        self.input_fn = input_fn
        self.output = output

    def next_move(self, board):
        """Text-input player; keeps asking until the move is legal on `board`."""
        prompt = f"{self.mark.symbol} to move, enter 'x y' (row col, 0-indexed): "
        while True:
            raw = self.input_fn(prompt).strip()
            try:
                move = parse_move(raw)
                referee.check_move(move, board, self.mark)
            except TicTacToeError as exc:
                self.output(f"Illegal move: {exc}")
                continue
            except ValueError as exc:
                self.output(str(exc))
                continue
            return move


def parse_move(raw):
    try:
        x_str, y_str = raw.replace(",", " ").split()
        return int(x_str), int(y_str)
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers") from exc
