"""
Baking Container Specifications
Tagged union over the six supported container geometries. Size fields
are optional so partially-entered containers stay usable; calculators
fall back to the most common size for the geometry.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from proofed_scaling.errors import ContainerSpecError
from proofed_scaling.rounding import format_number


class ContainerType(str, Enum):
    ROUND_CAKE_TIN = "round_cake_tin"
    SQUARE_CAKE_TIN = "square_cake_tin"
    LOAF_TIN = "loaf_tin"
    SHEET_PAN = "sheet_pan"
    BUNDT_TIN = "bundt_tin"
    MUFFIN_TIN = "muffin_tin"


class CupSize(str, Enum):
    MINI = "mini"
    STANDARD = "standard"
    JUMBO = "jumbo"


CONTAINER_LABELS = {
    ContainerType.ROUND_CAKE_TIN: "Round Cake Tin",
    ContainerType.SQUARE_CAKE_TIN: "Square Cake Tin",
    ContainerType.LOAF_TIN: "Loaf Tin",
    ContainerType.SHEET_PAN: "Sheet Pan",
    ContainerType.BUNDT_TIN: "Bundt Tin",
    ContainerType.MUFFIN_TIN: "Muffin Tin",
}

# Standard tin sizes in inches.
CONTAINER_SIZES = (4, 5, 6, 7, 8, 9, 10, 12)

DEFAULT_TIN_SIZE = 8.0
DEFAULT_LOAF_DIMENSIONS = (9.0, 5.0)
DEFAULT_SHEET_DIMENSIONS = (13.0, 9.0)
DEFAULT_BUNDT_CAPACITY = 10.0
DEFAULT_CUPS_PER_TRAY = 12


class _Container(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        alias_generator=to_camel,
        populate_by_name=True,
    )

    count: int = Field(1, ge=1, description="Identical containers used together")


class RoundTin(_Container):
    type: Literal["round_cake_tin"] = "round_cake_tin"
    size: Optional[float] = Field(None, gt=0, description="Diameter in inches")

    @property
    def effective_size(self) -> float:
        return self.size or DEFAULT_TIN_SIZE


class SquareTin(_Container):
    type: Literal["square_cake_tin"] = "square_cake_tin"
    size: Optional[float] = Field(None, gt=0, description="Side length in inches")

    @property
    def effective_size(self) -> float:
        return self.size or DEFAULT_TIN_SIZE


class LoafTin(_Container):
    type: Literal["loaf_tin"] = "loaf_tin"
    length: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)

    @property
    def effective_dimensions(self) -> Tuple[float, float]:
        return (self.length or DEFAULT_LOAF_DIMENSIONS[0],
                self.width or DEFAULT_LOAF_DIMENSIONS[1])


class SheetPan(_Container):
    type: Literal["sheet_pan"] = "sheet_pan"
    length: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)

    @property
    def effective_dimensions(self) -> Tuple[float, float]:
        return (self.length or DEFAULT_SHEET_DIMENSIONS[0],
                self.width or DEFAULT_SHEET_DIMENSIONS[1])


class BundtTin(_Container):
    type: Literal["bundt_tin"] = "bundt_tin"
    capacity: Optional[float] = Field(None, gt=0, description="Capacity in cups")

    @property
    def effective_capacity(self) -> float:
        return self.capacity or DEFAULT_BUNDT_CAPACITY


class MuffinTin(_Container):
    """Muffin tray; count is the number of trays."""
    type: Literal["muffin_tin"] = "muffin_tin"
    cup_size: CupSize = CupSize.STANDARD
    cups_per_tray: Optional[int] = Field(None, ge=1)

    @property
    def effective_cups_per_tray(self) -> int:
        return self.cups_per_tray or DEFAULT_CUPS_PER_TRAY


ContainerSpec = Annotated[
    Union[RoundTin, SquareTin, LoafTin, SheetPan, BundtTin, MuffinTin],
    Field(discriminator="type"),
]

FLAT_TINS = (RoundTin, SquareTin)

_container_adapter = TypeAdapter(ContainerSpec)


def parse_container(data: Dict[str, Any]) -> ContainerSpec:
    """
    Build a container spec from a UI payload.

    Keys may be camelCase ('cupsPerTray') or snake_case ('cups_per_tray').

    Raises:
        ContainerSpecError: unknown type, invalid dimension or a field that
            does not belong to the container's geometry
    """
    try:
        return _container_adapter.validate_python(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ContainerSpecError(
            f"Invalid container specification: {'; '.join(errors)}",
            validation_errors=errors,
            details={"container": data}
        ) from e


def container_label(container_type: Union[ContainerType, str]) -> str:
    """Display label for a container type, e.g. 'Round Cake Tin'."""
    try:
        return CONTAINER_LABELS[ContainerType(container_type)]
    except ValueError:
        return str(container_type)


def describe_container(container: ContainerSpec) -> str:
    """Short human description, e.g. '2× 9" round tin'."""
    prefix = f"{container.count}× " if container.count > 1 else ""

    if isinstance(container, RoundTin):
        return f'{prefix}{format_number(container.effective_size)}" round tin'
    if isinstance(container, SquareTin):
        return f'{prefix}{format_number(container.effective_size)}" square tin'
    if isinstance(container, LoafTin):
        return f"{prefix}loaf tin"
    if isinstance(container, BundtTin):
        return f"{prefix}{format_number(container.effective_capacity)}-cup bundt"
    if isinstance(container, SheetPan):
        if container.length and container.width:
            return (f"{prefix}{format_number(container.length)}×"
                    f'{format_number(container.width)}" sheet pan')
        return f"{prefix}sheet pan"
    if isinstance(container, MuffinTin):
        return (f"{prefix}{container.effective_cups_per_tray}-cup "
                f"{container.cup_size.value} muffin tin")

    raise TypeError(f"Unsupported container: {container!r}")
