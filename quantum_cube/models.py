"""
Pydantic Models for Quantum Cube Game State

Value objects shared by the board, the rules modules and the game engine.
Cell states and marker kinds are closed enumerations validated on
construction, so combinations such as a collapsed cell without a symbol or
a collapsed marker still claiming both symbols cannot be built.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import InvalidCoordinateError, InvalidStateError

GRID_SIZE = 3


class SymbolKind(str, Enum):
    """Player symbol enumeration"""
    X = "x"
    O = "o"

    @property
    def opponent(self) -> "SymbolKind":
        return SymbolKind.O if self is SymbolKind.X else SymbolKind.X


class CellStatus(str, Enum):
    """Cell status tag"""
    EMPTY = "empty"
    TENTATIVE = "tentative"
    ENTANGLED = "entangled"
    COLLAPSED = "collapsed"


class MarkerKind(str, Enum):
    """Marker kind enumeration"""
    PENDING_X = "pending_x"
    PENDING_O = "pending_o"
    PENDING_BOTH = "pending_both"

    @classmethod
    def for_symbol(cls, symbol: SymbolKind) -> "MarkerKind":
        return cls.PENDING_X if symbol is SymbolKind.X else cls.PENDING_O

    @property
    def symbol(self) -> Optional[SymbolKind]:
        """Symbol carried by the marker, ``None`` for ``PENDING_BOTH``."""
        if self is MarkerKind.PENDING_X:
            return SymbolKind.X
        if self is MarkerKind.PENDING_O:
            return SymbolKind.O
        return None


class CollapseBranch(str, Enum):
    """Outcome of a collapse event"""
    NO_OP = "no_op"
    CLASSIC = "classic"
    INDEPENDENT = "independent"
    BOTH_TO_O = "both_to_o"
    BOTH_TO_X = "both_to_x"


class GameStatus(str, Enum):
    """Game status enumeration"""
    ACTIVE = "active"
    WON = "won"
    DRAWN = "drawn"


CoordinateLike = Union["Coordinate", Sequence[int], str]


class Coordinate(BaseModel):
    """Cell position in the 3x3x3 cube"""
    x: int
    y: int
    z: int

    class Config:
        frozen = True

    @field_validator("x", "y", "z")
    @classmethod
    def _within_cube(cls, value: int) -> int:
        if not 0 <= value < GRID_SIZE:
            raise InvalidCoordinateError(
                f"coordinate component {value} outside [0, {GRID_SIZE - 1}]",
                coordinate=value,
            )
        return value

    @classmethod
    def parse(cls, value: CoordinateLike) -> "Coordinate":
        """Build a Coordinate from a Coordinate, an (x, y, z) sequence or an
        ``"x,y,z"`` key string."""
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, str):
            parts = [p for p in value.replace(",", " ").split() if p]
        else:
            parts = list(value)
        if len(parts) != 3:
            raise InvalidCoordinateError(
                "coordinate needs exactly three components", coordinate=value
            )
        try:
            return cls(x=parts[0], y=parts[1], z=parts[2])
        except ValidationError as exc:
            raise InvalidCoordinateError(
                "coordinate components must be integers", coordinate=value
            ) from exc

    def to_key(self) -> str:
        """Convert position to string key"""
        return f"{self.x},{self.y},{self.z}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


def all_coordinates() -> List[Coordinate]:
    """All 27 coordinates in x, y, z order."""
    return [
        Coordinate(x=x, y=y, z=z)
        for x in range(GRID_SIZE)
        for y in range(GRID_SIZE)
        for z in range(GRID_SIZE)
    ]


class CellState(BaseModel):
    """Symbolic state of one cell.

    ``symbol`` is set exactly when ``status`` is TENTATIVE or COLLAPSED.
    """
    status: CellStatus = CellStatus.EMPTY
    symbol: Optional[SymbolKind] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _symbol_matches_status(self) -> "CellState":
        needs_symbol = self.status in (CellStatus.TENTATIVE, CellStatus.COLLAPSED)
        if needs_symbol and self.symbol is None:
            raise InvalidStateError(f"{self.status.value} cell requires a symbol")
        if not needs_symbol and self.symbol is not None:
            raise InvalidStateError(f"{self.status.value} cell cannot carry a symbol")
        return self

    @classmethod
    def empty(cls) -> "CellState":
        return cls()

    @classmethod
    def tentative(cls, symbol: SymbolKind) -> "CellState":
        return cls(status=CellStatus.TENTATIVE, symbol=symbol)

    @classmethod
    def entangled(cls) -> "CellState":
        return cls(status=CellStatus.ENTANGLED)

    @classmethod
    def collapsed(cls, symbol: SymbolKind) -> "CellState":
        return cls(status=CellStatus.COLLAPSED, symbol=symbol)

    @property
    def is_empty(self) -> bool:
        return self.status is CellStatus.EMPTY

    @property
    def is_pending(self) -> bool:
        return self.status in (CellStatus.TENTATIVE, CellStatus.ENTANGLED)

    def is_collapsed_to(self, symbol: SymbolKind) -> bool:
        return self.status is CellStatus.COLLAPSED and self.symbol is symbol

    def __str__(self) -> str:
        if self.symbol is not None:
            return f"{self.status.value}({self.symbol.value})"
        return self.status.value


class Marker(BaseModel):
    """Registry entry for a placed marker.

    ``owning_cell`` is a back-reference by coordinate; the Board owns both
    the cell and the marker. Once collapsed a marker is an inert record of
    the symbol its cell resolved to.
    """
    id: int
    kind: MarkerKind
    owning_cell: Coordinate = Field(alias="owningCell")
    collapsed: bool = False

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="after")
    def _collapsed_has_single_symbol(self) -> "Marker":
        if self.collapsed and self.kind is MarkerKind.PENDING_BOTH:
            raise InvalidStateError(
                "collapsed marker must resolve to a single symbol",
                context={"marker_id": self.id},
            )
        return self

    @property
    def symbol(self) -> Optional[SymbolKind]:
        return self.kind.symbol

    def as_collapsed(self, symbol: SymbolKind) -> "Marker":
        """Return the inert record replacing this marker after it collapses."""
        return Marker(
            id=self.id,
            kind=MarkerKind.for_symbol(symbol),
            owning_cell=self.owning_cell,
            collapsed=True,
        )


class MoveOutcome(BaseModel):
    """Result of registering a move on the board"""
    coordinate: Coordinate
    player: SymbolKind
    new_state: CellState = Field(alias="newState")
    marker_kind: MarkerKind = Field(alias="markerKind")

    class Config:
        frozen = True
        populate_by_name = True


class WinResult(BaseModel):
    """Winning line endpoints and the winning symbol"""
    start: Coordinate
    end: Coordinate
    winner: SymbolKind

    class Config:
        frozen = True


class CollapseReport(BaseModel):
    """Summary of one collapse event.

    ``roll`` is only drawn when an entangled marker took part.
    """
    branch: CollapseBranch
    roll: Optional[float] = None
    collapsed: List[Tuple[Coordinate, SymbolKind]] = Field(default_factory=list)
    destroyed: List[Coordinate] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def is_noop(self) -> bool:
        return self.branch is CollapseBranch.NO_OP


class TurnResult(BaseModel):
    """Everything a presentation layer needs after one move"""
    outcome: MoveOutcome
    collapse: Optional[CollapseReport] = None
    win: Optional[WinResult] = None
    status: GameStatus
    next_player: SymbolKind = Field(alias="nextPlayer")
    move_number: int = Field(alias="moveNumber")

    class Config:
        frozen = True
        populate_by_name = True
