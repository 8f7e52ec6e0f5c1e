"""Generate synthetic property listings."""

from __future__ import annotations

from datetime import timezone

from property_store.generators.base import BaseGenerator
from property_store.models import AddressInput, CoordinatesInput, PropertyInput

PROPERTY_TYPES = ["House", "Apartment", "Condo", "Townhouse", "Land"]

FEATURES = [
    "Garage",
    "Pool",
    "Garden",
    "Fireplace",
    "Central Air",
    "Hardwood Floors",
    "Walk-in Closet",
    "Balcony",
    "Gym",
    "Solar Panels",
    "Smart Home",
    "Basement",
]


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings ready to create on a store."""

    def generate(self) -> PropertyInput:
        """Generate a property listing.

        Returns
        -------
        PropertyInput
            Complete create payload (no ``Id``).
        """
        property_type = self.random.choice(PROPERTY_TYPES)
        bedrooms = 0 if property_type == "Land" else self.random.randint(1, 6)
        square_feet = self.random.randint(450, 5200)
        listed_at = self.fake.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc)

        return PropertyInput(
            title=f"{self.fake.word().title()} {property_type} in {self.fake.city()}",
            price=self.random.randint(80, 2500) * 1000,
            type=property_type,
            bedrooms=bedrooms,
            bathrooms=max(1, bedrooms - self.random.randint(0, 2)) if bedrooms else 0,
            square_feet=square_feet,
            address=AddressInput(
                street=self.fake.street_address(),
                city=self.fake.city(),
                state=self.fake.state_abbr(),
                zip_code=self.fake.postcode(),
            ),
            images=[
                f"https://picsum.photos/seed/{self.fake.uuid4()}/1200/800"
                for _ in range(self.random.randint(1, 5))
            ],
            description=self.fake.paragraph(nb_sentences=4),
            features=self.random.sample(FEATURES, self.random.randint(0, 5)),
            year_built=self.random.randint(1900, 2024),
            listing_date=listed_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            coordinates=CoordinatesInput(
                lat=float(self.fake.latitude()),
                lng=float(self.fake.longitude()),
            ),
        )

    def generate_batch(self, count: int) -> list[PropertyInput]:
        """Generate ``count`` property listings."""
        return [self.generate() for _ in range(count)]
