"""Bingo against a giant squid."""

import copy
import re
from dataclasses import dataclass
from typing import Optional

BOARD_SIZE = 5

_U32 = re.compile(r"\+?[0-9]+")


def _as_u32(text: str) -> Optional[int]:
    if _U32.fullmatch(text) and int(text) <= 0xFFFFFFFF:
        return int(text)
    return None


@dataclass
class BingoBoard:
    """A grid of numbers with a mark for each cell."""

    values: list[list[int]]
    marked: Optional[list[list[bool]]] = None

    def __post_init__(self) -> None:
        if self.marked is None:
            self.marked = [[False] * len(row) for row in self.values]

    def mark(self, number: int) -> bool:
        """Mark the first cell holding number; return whether one was found."""
        for values, marks in zip(self.values, self.marked):
            for column, value in enumerate(values):
                if value == number:
                    marks[column] = True
                    return True
        return False

    def is_complete(self) -> bool:
        """Return whether any full row or column is marked."""
        return any(all(row) for row in self.marked) or any(
            all(column) for column in zip(*self.marked)
        )

    def score(self, number: int) -> int:
        """Return the sum of unmarked numbers times the last number called."""
        unmarked = sum(
            value
            for values, marks in zip(self.values, self.marked)
            for value, mark in zip(values, marks)
            if not mark
        )
        return unmarked * number


@dataclass
class BingoGame:
    numbers: list[int]
    boards: list[BingoBoard]


def _parse_board(lines: list[str]) -> BingoBoard:
    grid = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for row, line in zip(grid, lines):
        for column, element in enumerate(line.split()):
            value = _as_u32(element)
            if value is None or column >= BOARD_SIZE:
                raise ValueError("Failed to parse boards")
            row[column] = value
    return BingoBoard(grid)


def parse_input(text: str) -> BingoGame:
    """Parse the drawn numbers and the boards."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    numbers = [
        value for value in map(_as_u32, lines[0].split(",")) if value is not None
    ]
    board_lines = [line for line in lines[1:] if line]
    boards = [
        _parse_board(board_lines[start:start + BOARD_SIZE])
        for start in range(0, len(board_lines), BOARD_SIZE)
    ]
    return BingoGame(numbers, boards)


def part_one(game: BingoGame) -> int:
    """Return the score of the first board to win, or 0 if none wins."""
    boards = copy.deepcopy(game.boards)
    for number in game.numbers:
        for board in boards:
            if board.mark(number) and board.is_complete():
                return board.score(number)
    return 0


def part_two(game: BingoGame) -> int:
    """Return the score of the last board to win."""
    numbers = iter(game.numbers)
    boards = copy.deepcopy(game.boards)

    def draw() -> int:
        number = next(numbers, None)
        if number is None:
            raise ValueError("inputs don't match")
        return number

    while len(boards) > 1:
        number = draw()
        for board in boards:
            board.mark(number)
        boards = [board for board in boards if not board.is_complete()]
    if not boards:
        raise ValueError("no board left to win")
    board = boards[0]
    number = 0
    while not board.is_complete():
        number = draw()
        board.mark(number)
    return board.score(number)