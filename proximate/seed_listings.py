"""Catálogo semilla para correr la API sin un store externo (campus Blacksburg)."""

SEED_LISTINGS: list[dict] = [
    {
        "id": "modern-apartment-near-campus",
        "title": "Modern Apartment Near Campus",
        "description": "Beautiful 2-bedroom apartment with modern amenities, perfect for students.",
        "address": "123 Main St",
        "price": 1200,
        "bedrooms": 2,
        "bathrooms": 1.5,
        "amenities": ["Parking", "Laundry", "WiFi", "Furnished"],
        "distanceToCampus": 0.8,
        "images": ["https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=800&h=600&fit=crop"],
        "available": True,
    },
    {
        "id": "cozy-house-with-yard",
        "title": "Cozy House with Yard",
        "description": "Charming 3-bedroom house with a private yard, ideal for students who want more space.",
        "address": "456 Oak Ave",
        "price": 1800,
        "bedrooms": 3,
        "bathrooms": 2,
        "amenities": ["Parking", "Laundry", "WiFi", "Yard", "Dishwasher"],
        "distanceToCampus": 1.5,
        "available": True,
    },
    {
        "id": "studio-apartment-downtown",
        "title": "Studio Apartment Downtown",
        "description": "Compact studio apartment in the heart of downtown Blacksburg.",
        "address": "789 College Ave",
        "price": 800,
        "bedrooms": 1,
        "bathrooms": 1,
        "amenities": ["WiFi", "Furnished"],
        "distanceToCampus": 0.5,
        "available": True,
    },
    {
        "id": "luxury-condo-complex",
        "title": "Luxury Condo Complex",
        "description": "High-end 2-bedroom condo with premium amenities including gym and pool.",
        "address": "321 University Blvd",
        "price": 2200,
        "bedrooms": 2,
        "bathrooms": 2,
        "amenities": ["Parking", "Laundry", "WiFi", "Furnished", "Gym", "Pool"],
        "distanceToCampus": 1.2,
        "available": True,
    },
    {
        "id": "shared-house-room",
        "title": "Shared House - Room Available",
        "description": "Private room in a 4-bedroom shared house with common kitchen and backyard.",
        "address": "555 Campus Dr",
        "price": 650,
        "bedrooms": 1,
        "bathrooms": 1,
        "amenities": ["WiFi", "Laundry", "Shared Kitchen", "Backyard"],
        "distanceToCampus": 1.8,
        "available": True,
    },
    {
        "id": "pet-friendly-apartment-complex",
        "title": "Pet-Friendly Apartment Complex",
        "description": "Spacious 1-bedroom apartment perfect for pet owners, with a dog park on site.",
        "address": "789 Pet Lane",
        "price": 1100,
        "bedrooms": 1,
        "bathrooms": 1,
        "amenities": ["Pet Friendly", "Parking", "Laundry", "WiFi", "Dog Park"],
        "distanceToCampus": 2.1,
        "available": True,
    },
    {
        "id": "budget-friendly-studio",
        "title": "Budget-Friendly Studio",
        "description": "Affordable studio apartment for budget-conscious students.",
        "address": "456 Budget St",
        "price": 600,
        "bedrooms": 1,
        "bathrooms": 1,
        "amenities": ["WiFi", "Basic Furnished"],
        "distanceToCampus": 2.8,
        "available": True,
    },
    {
        "id": "furnished-2br-apartment",
        "title": "Furnished 2BR Apartment",
        "description": "Fully furnished 2-bedroom apartment with modern appliances.",
        "address": "321 Furnished Ave",
        "price": 1400,
        "bedrooms": 2,
        "bathrooms": 2,
        "amenities": ["Furnished", "Parking", "Laundry", "WiFi", "Dishwasher"],
        "distanceToCampus": 1.0,
        "available": True,
    },
    {
        "id": "quiet-suburban-house",
        "title": "Quiet Suburban House",
        "description": "Peaceful 3-bedroom house in a quiet neighborhood, perfect for graduate students.",
        "address": "789 Quiet Rd",
        "price": 1600,
        "bedrooms": 3,
        "bathrooms": 2,
        "amenities": ["Parking", "Laundry", "WiFi", "Yard", "Garage"],
        "distanceToCampus": 3.5,
        "available": True,
    },
    {
        "id": "modern-loft-downtown",
        "title": "Modern Loft Downtown",
        "description": "Stylish loft apartment with exposed brick and high ceilings.",
        "address": "555 Loft St",
        "price": 1300,
        "bedrooms": 1,
        "bathrooms": 1,
        "amenities": ["WiFi", "Furnished", "Exposed Brick", "High Ceilings"],
        "distanceToCampus": 0.7,
        "available": False,
    },
]
