#!/usr/bin/env python3
"""
Seed script to create demo customers and reservations
"""

import asyncio
from datetime import datetime, timedelta


async def seed_demo_data():
    """Seed demo data for development"""
    from app.database import SessionLocal, init_db
    from app.models.customer import Customer
    from app.models.reservation import Reservation
    from sqlalchemy import select

    # Create tables
    await init_db()

    async with SessionLocal() as db:
        # Check if demo data already exists
        result = await db.execute(select(Customer).limit(1))
        existing = result.scalar_one_or_none()

        if existing:
            print("Demo data already exists. Skipping...")
            return

        print("Creating demo customers...")

        customers_data = [
            {"first_name": "Ann", "last_name": "Lee", "phone": "555-1111", "notes": "Prefers the patio"},
            {"first_name": "Anne", "last_name": "Marsh", "phone": "555-1212"},
            {"first_name": "Bob", "last_name": "Anderson", "phone": None, "notes": "Allergic to peanuts"},
            {"first_name": "Carla", "last_name": "Diaz", "phone": "555-3434"},
            {"first_name": "Dev", "last_name": "Patel", "phone": "555-5656"},
            {"first_name": "Erin", "last_name": "Kowalski", "phone": "555-7878", "notes": "Regular on Fridays"},
            {"first_name": "Frank", "last_name": "Nguyen"},
            {"first_name": "Grace", "last_name": "Okafor", "phone": "555-9090"},
        ]

        customers = []
        for data in customers_data:
            customer = Customer(**data)
            await customer.create(db)
            customers.append(customer)

        print("Creating demo reservations...")

        base = datetime.now().replace(hour=18, minute=0, second=0, microsecond=0)
        reservation_count = 0
        for index, customer in enumerate(customers):
            # Earlier customers get more bookings so the best-customers list has an order
            for visit in range(len(customers) - index):
                reservation = Reservation(
                    customer_id=customer.id,
                    num_guests=2 + (visit % 4),
                    start_at=base + timedelta(days=visit * 7 + index, minutes=30 * (visit % 3)),
                    notes="Birthday dinner" if visit == 0 and index % 3 == 0 else "",
                )
                await reservation.create(db)
                reservation_count += 1

        print(f"""
Demo data created successfully!

Customers: {len(customers)} created
Reservations: {reservation_count} created
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
