"""In-memory portfolio store with property/refinance relationships."""

from dataclasses import dataclass, field
from datetime import datetime

from propfolio.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from propfolio.models.property import PropertyRecord, RefinanceRecord, sort_refinances


@dataclass
class PortfolioStore:
    """Holds a user's properties and their refinances."""

    properties: dict[str, PropertyRecord] = field(default_factory=dict)
    refinances: dict[str, RefinanceRecord] = field(default_factory=dict)

    # Relationship index
    _property_refinances: dict[str, list[str]] = field(default_factory=dict)

    def add_property(self, prop: PropertyRecord) -> None:
        """Add a property to the store."""
        if prop.created_at is None:
            prop.created_at = datetime.now()
        self.properties[prop.property_id] = prop
        self._property_refinances.setdefault(prop.property_id, [])

    def add_refinance(self, refinance: RefinanceRecord) -> None:
        """Add a refinance, rejecting unknown properties and pre-purchase dates."""
        prop = self.properties.get(refinance.property_id)
        if prop is None:
            raise ReferentialIntegrityError(f"Property {refinance.property_id} not found")

        if refinance.refinance_date < prop.purchase_date:
            raise InvalidEntityStateError(
                f"Refinance {refinance.refinance_id} dated {refinance.refinance_date} "
                f"precedes purchase on {prop.purchase_date}"
            )

        self.refinances[refinance.refinance_id] = refinance
        self._property_refinances[refinance.property_id].append(refinance.refinance_id)

    def remove_refinance(self, refinance_id: str) -> None:
        """Delete a refinance independently of its property."""
        refinance = self.refinances.pop(refinance_id, None)
        if refinance is None:
            raise EntityNotFoundError(f"Refinance {refinance_id} not found")
        self._property_refinances[refinance.property_id].remove(refinance_id)

    def remove_property(self, property_id: str) -> None:
        """Delete a property together with its refinances."""
        if property_id not in self.properties:
            raise EntityNotFoundError(f"Property {property_id} not found")
        for refinance_id in self._property_refinances.pop(property_id, []):
            self.refinances.pop(refinance_id, None)
        del self.properties[property_id]

    def get_property(self, property_id: str) -> PropertyRecord:
        try:
            return self.properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None

    def refinances_for(self, property_id: str) -> list[RefinanceRecord]:
        """Refinances of one property, oldest first."""
        ids = self._property_refinances.get(property_id, [])
        return sort_refinances([self.refinances[i] for i in ids])

    def refinances_by_property(self) -> dict[str, list[RefinanceRecord]]:
        return {pid: self.refinances_for(pid) for pid in self.properties}

    def mark_profit_alert_sent(self, property_id: str) -> None:
        self.get_property(property_id).target_profit_alert_sent = True

    def summary(self) -> dict[str, int]:
        """Entity counts."""
        return {
            "properties": len(self.properties),
            "refinances": len(self.refinances),
        }
