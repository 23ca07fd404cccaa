"""Service catalog models: atomic services, combos and selectable items."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    SERVICE = "service"
    COMBO = "combo"


class Service(BaseModel):
    """Atomic service offered by the salon."""

    id: int
    name: str
    duration_minutes: int = Field(gt=0)
    price_cents: int = Field(ge=0)
    active: bool = True


class ServiceCombo(BaseModel):
    """Bundle of services sold together at a single price."""

    id: int
    name: str
    price_cents: int = Field(ge=0)
    service_ids: list[int] = Field(default_factory=list)
    active: bool = True


class SelectableItem(BaseModel):
    """A service or combo as offered on the booking screen.

    A plain service lists itself as its only component; a combo lists every
    service it bundles, in booking order.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    kind: ItemKind
    name: str = ""
    duration_minutes: int = Field(gt=0)
    price_cents: int = Field(default=0, ge=0)
    component_service_ids: list[int] = Field(min_length=1)
