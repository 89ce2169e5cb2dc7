"""
Seed the database with a demo owner and a two-property portfolio.
"""
import sys
import os
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.database import get_db_context, init_db
from app.db.models import (
    Expense,
    ExpenseCategory,
    LeaseFinancial,
    LeaseStatus,
    Listing,
    Property,
    RentalApplication,
    RentalUnit,
    User,
)

DEMO_EMAIL = "demo-owner@example.com"


def add_signed_lease(db, unit, price, periods):
    """Create a listing, a signed application and its financial periods."""
    listing = Listing(rental_unit_id=unit.id, title=f"{unit.name} for rent", price=price)
    db.add(listing)
    db.flush()

    application = RentalApplication(listing_id=listing.id, lease_status=LeaseStatus.SIGNED)
    db.add(application)
    db.flush()

    for start, end, base_rent_cents, charges_cents in periods:
        db.add(
            LeaseFinancial(
                application_id=application.id,
                start_date=start,
                end_date=end,
                base_rent_cents=base_rent_cents,
                service_charges_cents=charges_cents,
            )
        )
    return listing


def main():
    init_db()

    with get_db_context() as db:
        existing = db.query(User).filter(User.email == DEMO_EMAIL).first()
        if existing:
            print(f"Demo owner already exists (ID: {existing.id})")
            return

        owner = User(email=DEMO_EMAIL, first_name="Demo", last_name="Owner")
        db.add(owner)
        db.flush()
        print(f"Created owner: {owner.email} (ID: {owner.id})")

        # Flat let as a whole unit, rent revised in July 2024
        flat = Property(
            name="Rue des Lilas",
            owner_id=owner.id,
            address_street="12 Rue des Lilas",
            address_city="Lyon",
            address_zip="69003",
            purchase_price=165000,
        )
        db.add(flat)
        db.flush()

        flat_unit = RentalUnit(property_id=flat.id, name="T2", is_room=False)
        db.add(flat_unit)
        db.flush()

        add_signed_lease(
            db,
            flat_unit,
            price=650,
            periods=[
                (date(2023, 9, 1), date(2024, 6, 30), 60000, 5000),
                (date(2024, 7, 1), None, 62000, 5000),
            ],
        )

        # Shared house let by the room, one room still vacant
        house = Property(
            name="Colocation Croix-Rousse",
            owner_id=owner.id,
            address_street="4 Montée de la Grande Côte",
            address_city="Lyon",
            address_zip="69001",
            purchase_price=310000,
        )
        db.add(house)
        db.flush()

        for room_name, price, rent_cents in [("Chambre 1", 520, 48000), ("Chambre 2", 540, 50000)]:
            room = RentalUnit(property_id=house.id, name=room_name, is_room=True)
            db.add(room)
            db.flush()
            add_signed_lease(
                db,
                room,
                price=price,
                periods=[(date(2024, 1, 1), None, rent_cents, 4000)],
            )

        vacant_room = RentalUnit(property_id=house.id, name="Chambre 3", is_room=True)
        db.add(vacant_room)
        db.flush()
        db.add(Listing(rental_unit_id=vacant_room.id, title="Chambre 3 for rent", price=500))

        expenses = [
            (flat, ExpenseCategory.TAX_PROPERTY, date(2024, 10, 15), 98000, 98000, 0, False),
            (flat, ExpenseCategory.INSURANCE, date(2024, 1, 10), 21000, 21000, 0, False),
            (flat, ExpenseCategory.COLD_WATER, date(2024, 3, 31), 18000, 0, 18000, True),
            (house, ExpenseCategory.TAX_PROPERTY, date(2024, 10, 15), 162000, 162000, 0, False),
            (house, ExpenseCategory.MAINTENANCE, date(2024, 5, 20), 45000, 45000, 0, False),
            (house, ExpenseCategory.INSURANCE_GLI, date(2024, 2, 1), 36000, 36000, 0, False),
            (flat, ExpenseCategory.TAX_PROPERTY, date(2023, 10, 15), 95000, 95000, 0, False),
        ]
        for prop, category, occurred, total, deductible, recoverable, is_recoverable in expenses:
            db.add(
                Expense(
                    property_id=prop.id,
                    category=category,
                    date_occurred=occurred,
                    amount_total_cents=total,
                    amount_deductible_cents=deductible,
                    amount_recoverable_cents=recoverable,
                    is_recoverable=is_recoverable,
                )
            )

        db.flush()
        print(f"Created properties: {flat.name} (ID: {flat.id}), {house.name} (ID: {house.id})")
        print("\nDemo portfolio created successfully!")
        print(f"\nPortfolio report: /api/analytics/users/{owner.id}/reports/2024")

if __name__ == "__main__":
    main()
