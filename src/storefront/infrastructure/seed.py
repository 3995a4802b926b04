"""Demo data written to the JSON files the first time they are created."""

from __future__ import annotations

SEED_PRODUCTS: list[dict] = [
    {
        "id": "1",
        "code": "CAM-Q-101",
        "name": "Quantum Lens Camera",
        "brand": "Lumina Optics",
        "category": "Electronics",
        "description": "A high-performance mirrorless camera for professionals.",
        "price": "1299.99",
        "currency": "USD",
        "stock": 15,
        "image": "https://images.unsplash.com/photo-1516035069371-29a1b244cc32?auto=format&fit=crop&q=80&w=400",
    },
    {
        "id": "2",
        "code": "CHR-NX-202",
        "name": "Nexus Gaming Chair",
        "brand": "Apex Comfort",
        "category": "Furniture",
        "description": "Ergonomic design with lumbar support for long sessions.",
        "price": "249.99",
        "currency": "USD",
        "stock": 8,
        "image": "https://images.unsplash.com/photo-1598550476439-6847785fcea6?auto=format&fit=crop&q=80&w=400",
    },
    {
        "id": "3",
        "code": "AUD-AS-303",
        "name": "Aero Stream Earbuds",
        "brand": "Sonic Labs",
        "category": "Audio",
        "description": "Noise cancelling true wireless earbuds with 40h battery.",
        "price": "159.99",
        "currency": "USD",
        "stock": 25,
        "image": "https://images.unsplash.com/photo-1590658268037-6bf12165a8df?auto=format&fit=crop&q=80&w=400",
    },
]

SEED_CUSTOMERS: list[dict] = [
    {"id": "CUST-001", "name": "Rahim Ahmed", "email": "rahim@example.com",
     "phone": "01711111111", "type": "REGULAR", "joined_at": None},
    {"id": "CUST-002", "name": "Karim Ullah", "email": "karim@example.com",
     "phone": "01822222222", "type": "PREMIUM", "joined_at": None},
    {"id": "CUST-003", "name": "Sultana Razia", "email": "sultana@example.com",
     "phone": "01933333333", "type": "VIP", "joined_at": None},
]

SEED_DISCOUNTS: list[dict] = [
    {"id": "d1", "code": "WELCOME10", "percentage": 10, "is_active": True,
     "is_automatic": False, "target_product_id": None, "target_customer_id": None,
     "description": "10% off for everyone"},
    {"id": "d2", "code": "01933333333", "percentage": 30, "is_active": True,
     "is_automatic": False, "target_product_id": None, "target_customer_id": "CUST-003",
     "description": "Exclusive 30% for Sultana"},
    {"id": "d3", "code": "01822222222", "percentage": 20, "is_active": True,
     "is_automatic": False, "target_product_id": None, "target_customer_id": "CUST-002",
     "description": "20% off for Karim"},
]
