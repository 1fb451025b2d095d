import pytest

from proximate.schemas import Listing

@pytest.fixture
def make_listing():
    def _make(id="l1", price=1000, bedrooms=2, bathrooms=1, amenities=None,
              distance=1.0, images=None, description="A place to live.", **extra):
        return Listing(
            id=id,
            title=f"Listing {id}",
            description=description,
            price=price,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            amenities=amenities or [],
            distance_to_campus=distance,
            images=images or [],
            **extra,
        )
    return _make
