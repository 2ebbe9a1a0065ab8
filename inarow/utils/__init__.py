from .visualization import (
    BoardFormatter,
    GridBoardFormatter,
    SimpleBoardFormatter,
    ColorBoardFormatter,
    create_formatter,
    format_outcome,
    format_standings,
)

__all__ = [
    'BoardFormatter',
    'GridBoardFormatter',
    'SimpleBoardFormatter',
    'ColorBoardFormatter',
    'create_formatter',
    'format_outcome',
    'format_standings',
]
