"""Service catalog helpers: selectable items, totals and appointment chains."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Iterable, Union

from salon_scheduler.config import settings
from salon_scheduler.schemas.catalog_schema import (
    ItemKind,
    SelectableItem,
    Service,
    ServiceCombo,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedAppointment:
    """One service of a multi-service booking, placed on the timeline."""

    service_id: int
    start: datetime
    end: datetime


def parse_duration(value: Union[str, int]) -> int:
    """Parse a catalog duration such as ``"45 min"`` into minutes.

    Unparsable or non-positive values fall back to the configured default.

    Examples:
        >>> parse_duration("45 min")
        45
    """
    if isinstance(value, int):
        minutes = value
    else:
        head = value.strip().split(" ")[0] if value.strip() else ""
        try:
            minutes = int(head)
        except ValueError:
            minutes = 0
    if minutes <= 0:
        logger.debug("Unparsable duration %r, using default", value)
        return settings.booking.default_service_duration_minutes
    return minutes


def parse_price(value: str) -> int:
    """Parse a decimal price string such as ``"60.00"`` into cents."""
    try:
        amount = Decimal(value.strip().replace(",", "."))
    except InvalidOperation:
        raise ValueError(f"Invalid price: {value!r}") from None
    if amount < 0:
        raise ValueError(f"Price cannot be negative: {value!r}")
    return int((amount * 100).quantize(Decimal("1")))


def build_selectable_items(
    services: Iterable[Service], combos: Iterable[ServiceCombo]
) -> list[SelectableItem]:
    """Active combos followed by active services, as offered for booking.

    A combo lasts as long as its component services together. Components
    missing from the catalog are dropped; a combo left with none is skipped.
    """
    services = list(services)
    by_id = {s.id: s for s in services}
    items: list[SelectableItem] = []

    for combo in combos:
        if not combo.active:
            continue
        components = [by_id[sid] for sid in combo.service_ids if sid in by_id]
        if len(components) != len(combo.service_ids):
            logger.warning(
                "Combo %s references unknown services %s",
                combo.id, [sid for sid in combo.service_ids if sid not in by_id],
            )
        if not components:
            continue
        items.append(
            SelectableItem(
                id=combo.id,
                kind=ItemKind.COMBO,
                name=combo.name,
                duration_minutes=sum(s.duration_minutes for s in components),
                price_cents=combo.price_cents,
                component_service_ids=[s.id for s in components],
            )
        )

    for service in services:
        if not service.active:
            continue
        items.append(
            SelectableItem(
                id=service.id,
                kind=ItemKind.SERVICE,
                name=service.name,
                duration_minutes=service.duration_minutes,
                price_cents=service.price_cents,
                component_service_ids=[service.id],
            )
        )

    return items


def find_item(items: Iterable[SelectableItem], kind: ItemKind, item_id: int) -> SelectableItem:
    """Look up a selectable item by kind and id."""
    for item in items:
        if item.kind == kind and item.id == item_id:
            return item
    raise KeyError(f"No {kind.value} with id {item_id}")


def total_duration(items: Iterable[SelectableItem]) -> int:
    return sum(item.duration_minutes for item in items)


def total_price_cents(items: Iterable[SelectableItem]) -> int:
    return sum(item.price_cents for item in items)


def required_service_ids(items: Iterable[SelectableItem]) -> list[int]:
    """Every service the selection needs, first occurrence order, no repeats."""
    seen: dict[int, None] = {}
    for item in items:
        for service_id in item.component_service_ids:
            seen.setdefault(service_id, None)
    return list(seen)


def plan_appointment_chain(
    start: datetime, items: Iterable[SelectableItem], services: Iterable[Service]
) -> list[PlannedAppointment]:
    """
    Split a selection into back-to-back appointments, one per service.

    Services follow selection order, combos expanding in place; each one
    starts where the previous ended. Unknown service ids are skipped.
    """
    by_id = {s.id: s for s in services}
    chain = []
    current = start
    for item in items:
        for service_id in item.component_service_ids:
            service = by_id.get(service_id)
            if service is None:
                logger.warning("Skipping unknown service %s in booking chain", service_id)
                continue
            end = current + timedelta(minutes=service.duration_minutes)
            chain.append(PlannedAppointment(service_id, current, end))
            current = end
    return chain
