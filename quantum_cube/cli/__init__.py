"""Text-mode presentation layer for quantum cube games.

Usage:
    from quantum_cube.cli import main

    main(["--seed", "7"])
"""

from quantum_cube.cli.play import build_parser, main, run_game
from quantum_cube.cli.render import cell_glyph, describe_collapse, describe_turn, render_board

__all__ = [
    "build_parser",
    "cell_glyph",
    "describe_collapse",
    "describe_turn",
    "main",
    "render_board",
    "run_game",
]
