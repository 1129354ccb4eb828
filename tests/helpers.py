"""Small constructors shared by the test modules."""

from quantum_cube.models import Coordinate, SymbolKind

X = SymbolKind.X
O = SymbolKind.O


def coord(x: int, y: int, z: int) -> Coordinate:
    return Coordinate(x=x, y=y, z=z)
