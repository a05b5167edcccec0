#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py layout [--difficulty NAME | --rows R --cols C --mines M]
                          [--first ROW,COL] [--seed N]
    python main.py play --moves "r4,4 f0,1 c3,3" [--seed N] [...]
"""
import argparse
import json
from typing import List, Optional, Tuple

from src.mine_engine.board import prepare_with_mines
from src.mine_engine.config import BoardConfig, DIFFICULTIES, get_difficulty, clamp_custom
from src.mine_engine.session import Game


MOVE_KINDS = {"r": "reveal", "f": "mark", "c": "chord"}


def parse_position(text: str) -> Tuple[int, int]:
    """Parse 'ROW,COL' into a position."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected ROW,COL but got '{text}'"
        ) from None
    return row, col


def parse_moves(script: str) -> List[Tuple[str, int, int]]:
    """
    Parse a move script such as 'r4,4 f0,1 c3,3'.

    Returns:
        List of (kind, row, col) where kind is reveal, mark or chord.
    """
    moves = []
    for token in script.split():
        kind = MOVE_KINDS.get(token[:1])
        if kind is None:
            raise argparse.ArgumentTypeError(
                f"Unknown move '{token}' (use r, f or c)"
            )
        row, col = parse_position(token[1:])
        moves.append((kind, row, col))
    return moves


def resolve_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from command-line flags."""
    if args.rows is not None or args.cols is not None or args.mines is not None:
        return clamp_custom(
            args.rows if args.rows is not None else 10,
            args.cols if args.cols is not None else 10,
            args.mines if args.mines is not None else 10,
        )
    return get_difficulty(args.difficulty)


def off_board_error(config: BoardConfig, position: Tuple[int, int]) -> Optional[str]:
    """Describe why a position is off the board, or None if it fits."""
    row, col = position
    if 0 <= row < config.rows and 0 <= col < config.cols:
        return None
    return (
        f"First click {row},{col} is outside the "
        f"{config.rows}x{config.cols} board"
    )


def layout(args: argparse.Namespace) -> None:
    """Print the mine layout produced for a first click and seed."""
    config = resolve_config(args)
    grid = prepare_with_mines(
        config.rows, config.cols, config.num_mines, args.first, args.seed
    )
    mines = [[cell.row, cell.col] for cell in grid if cell.is_mine]
    print(json.dumps({
        "rows": config.rows,
        "cols": config.cols,
        "mines": mines,
        "first_click": list(args.first),
        "seed": args.seed,
    }))


def play(args: argparse.Namespace) -> None:
    """Replay a move script and report each outcome."""
    config = resolve_config(args)
    game = Game(config, seed=args.seed)

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")

    for step, (kind, row, col) in enumerate(args.moves, start=1):
        if kind == "reveal":
            changed = game.reveal(row, col)
        elif kind == "mark":
            changed = game.toggle_mark(row, col)
        else:
            changed = game.chord(row, col)

        print(
            f"Move {step}: {kind} ({row}, {col}) | "
            f"{'applied' if changed else 'no effect'} | "
            f"Revealed: {game.cells_revealed} | "
            f"Mines left: {game.mines_left} | "
            f"Status: {game.status.name}"
        )
        if game.is_over:
            break

    print(f"\nFinal status: {game.status.name}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine - generate layouts and replay games"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    board_options = argparse.ArgumentParser(add_help=False)
    board_options.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size",
    )
    board_options.add_argument("--rows", type=int, help="Custom row count")
    board_options.add_argument("--cols", type=int, help="Custom column count")
    board_options.add_argument("--mines", type=int, help="Custom mine count")
    board_options.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible layout"
    )

    # Layout command
    layout_parser = subparsers.add_parser(
        "layout", parents=[board_options], help="Print a mine layout"
    )
    layout_parser.add_argument(
        "--first",
        type=parse_position,
        default=(0, 0),
        help="First click as ROW,COL",
    )

    # Play command
    play_parser = subparsers.add_parser(
        "play", parents=[board_options], help="Replay a move script"
    )
    play_parser.add_argument(
        "--moves",
        type=parse_moves,
        required=True,
        help="Moves such as 'r4,4 f0,1 c3,3' (reveal, mark, chord)",
    )

    args = parser.parse_args()

    if args.command == "layout":
        error = off_board_error(resolve_config(args), args.first)
        if error:
            parser.error(error)
        layout(args)
    elif args.command == "play":
        play(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
