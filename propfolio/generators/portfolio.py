"""Synthetic Singapore property portfolios for demos and load checks."""

from datetime import date, datetime, timedelta
from typing import Iterator

from propfolio.calculations.dates import add_months, resolve_as_of
from propfolio.calculations.taxes import calculate_bsd
from propfolio.generators.base import BaseGenerator
from propfolio.models.enums import PropertyType
from propfolio.models.property import PropertyRecord, RefinanceRecord
from propfolio.rates import get_mas_rates

# Purchase price ranges in SGD by property type
PRICE_RANGES = {
    PropertyType.HDB: (350_000, 900_000),
    PropertyType.CONDO: (900_000, 2_500_000),
    PropertyType.LANDED: (2_500_000, 6_000_000),
}

DEVELOPMENT_SUFFIXES = ["Residences", "Heights", "Gardens", "Park", "View", "Court"]


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property records with realistic costs and mortgages."""

    def generate(self, as_of: date | None = None) -> PropertyRecord:
        """Generate a property bought within the last six years.

        Parameters
        ----------
        as_of : date | None
            Latest possible purchase date (defaults to today).

        Returns
        -------
        PropertyRecord
            Generated property.
        """
        as_of = resolve_as_of(as_of)
        property_type = self.rng.choice(list(PropertyType))
        low, high = PRICE_RANGES[property_type]
        price = float(self.rng.randint(low // 1000, high // 1000) * 1000)
        purchase_date = as_of - timedelta(days=self.rng.randint(30, 365 * 6))

        # Loan-to-value 55-75%, remainder split between cash and CPF
        mortgage = round(price * self.rng.uniform(0.55, 0.75), -3)
        cpf = round((price - mortgage) * self.rng.uniform(0.3, 0.8), -3)

        base_rate = get_mas_rates().rates.estimated_home_loan_rate
        growth = self.rng.uniform(-0.05, 0.20)

        return PropertyRecord(
            property_id=self.fake.uuid4(),
            name=f"{self.fake.last_name()} {self.rng.choice(DEVELOPMENT_SUFFIXES)}",
            purchase_price=price,
            purchase_date=purchase_date,
            property_type=property_type,
            address=self.fake.street_address(),
            stamp_duty=calculate_bsd(price),
            renovation_cost=float(self.rng.randint(0, 120) * 1000),
            agent_fees=round(price * 0.01, 2),
            current_value=round(price * (1 + growth), -3),
            cpf_amount=cpf,
            mortgage_amount=mortgage,
            mortgage_interest_rate=round(base_rate + self.rng.uniform(-0.6, 0.8), 2),
            mortgage_tenure=self.rng.choice([20, 25, 30]),
            monthly_rental=float(self.rng.choice([0, 0, 2800, 3500, 4200, 5500])),
            target_profit_percentage=float(self.rng.choice([0, 5, 10, 15])),
            created_at=datetime.combine(purchase_date, datetime.min.time()),
        )

    def generate_batch(self, count: int, as_of: date | None = None) -> Iterator[PropertyRecord]:
        """Generate multiple properties."""
        for _ in range(count):
            yield self.generate(as_of)


class RefinanceGenerator(BaseGenerator):
    """Generate refinances for an existing property."""

    def generate_for(
        self,
        prop: PropertyRecord,
        count: int = 1,
        as_of: date | None = None,
    ) -> list[RefinanceRecord]:
        """Generate up to ``count`` refinances spaced two or more years apart.

        Refinances that would fall after ``as_of`` are not generated.
        """
        as_of = resolve_as_of(as_of)
        refinances = []
        refinance_date = prop.purchase_date
        balance = prop.mortgage_amount
        rate = prop.mortgage_interest_rate

        for _ in range(count):
            refinance_date = add_months(refinance_date, self.rng.randint(24, 42))
            if refinance_date > as_of or balance <= 0:
                break

            balance = round(balance * self.rng.uniform(0.80, 0.92), -3)
            rate = round(max(1.0, rate + self.rng.uniform(-0.7, 0.5)), 2)
            refinances.append(
                RefinanceRecord(
                    refinance_id=self.fake.uuid4(),
                    property_id=prop.property_id,
                    refinance_date=refinance_date,
                    loan_amount=balance,
                    interest_rate=rate,
                    tenure=self.rng.choice([20, 25, 30]),
                    description=self.rng.choice(
                        ["Lock-in expired", "Repriced with bank", "Switched to SORA package"]
                    ),
                )
            )

        return refinances
