"""
Tests for the SQLAlchemy analytics data source.
"""

import pytest
from datetime import date, datetime

from app.db.models import (
    LeaseFinancial,
    LeaseStatus,
    Listing,
    Property,
    RentalApplication,
)
from app.services.analytics_source import AnalyticsDataSource, AuthorizationError


@pytest.fixture
def source(db_session):
    return AnalyticsDataSource(db_session)


class TestResolveProperties:
    """Test scope lookup and ownership checks."""

    def test_portfolio_scope(self, source, db_session, owner, other_owner, leased_property):
        """Without a property id, all live properties of the owner are returned."""
        db_session.add(Property(name="Second", owner_id=owner.id, purchase_price=None))
        db_session.add(Property(name="Sold", owner_id=owner.id, is_deleted=True))
        db_session.add(Property(name="Not mine", owner_id=other_owner.id))
        db_session.commit()

        records = source.resolve_properties(owner.id)
        assert len(records) == 2
        values = sorted(r.acquisition_value or 0 for r in records)
        assert values == [0, 200000]

    def test_single_property(self, source, owner, leased_property):
        records = source.resolve_properties(owner.id, leased_property.id)
        assert [r.id for r in records] == [leased_property.id]

    def test_foreign_property_rejected(self, source, other_owner, leased_property):
        """Asking for someone else's property raises AuthorizationError."""
        with pytest.raises(AuthorizationError):
            source.resolve_properties(other_owner.id, leased_property.id)

    def test_unknown_property_rejected(self, source, owner):
        with pytest.raises(AuthorizationError):
            source.resolve_properties(owner.id, "does-not-exist")

    def test_unknown_user_has_empty_scope(self, source):
        assert source.resolve_properties("nobody") == []


class TestFetchRecords:
    """Test record fetching."""

    def test_only_signed_leases(self, source, db_session, leased_property):
        """Pending applications are ignored."""
        unit = leased_property.rental_units.first()
        listing = Listing(rental_unit_id=unit.id, title="Again", price=1200)
        db_session.add(listing)
        db_session.flush()
        pending = RentalApplication(listing_id=listing.id, lease_status=LeaseStatus.PENDING)
        db_session.add(pending)
        db_session.flush()
        db_session.add(
            LeaseFinancial(
                application_id=pending.id,
                start_date=date(2024, 1, 1),
                base_rent_cents=999,
                service_charges_cents=0,
            )
        )
        db_session.commit()

        periods = source.fetch_signed_lease_periods([leased_property.id])
        assert len(periods) == 1
        assert periods[0].property_id == leased_property.id
        assert periods[0].base_rent_cents == 100000
        assert periods[0].end_date == date(2024, 12, 31)

    def test_deleted_listing_excludes_leases(self, source, db_session, leased_property):
        """Leases under a soft-deleted listing bring no income."""
        listing = leased_property.rental_units.first().listings.first()
        listing.is_deleted = True
        db_session.commit()

        assert source.fetch_signed_lease_periods([leased_property.id]) == []

    def test_deleted_unit_excludes_leases_and_listings(self, source, db_session, leased_property):
        """A soft-deleted unit contributes neither income nor potential rent."""
        unit = leased_property.rental_units.first()
        unit.is_deleted = True
        db_session.commit()

        assert source.fetch_signed_lease_periods([leased_property.id]) == []
        assert source.fetch_active_listings_per_unit([leased_property.id]) == []

    def test_expenses_within_window(self, source, leased_property):
        """Only expenses dated inside [start, end] are returned."""
        expenses = source.fetch_expenses(
            [leased_property.id], date(2024, 1, 1), date(2024, 12, 31)
        )
        assert len(expenses) == 1
        assert expenses[0].category == "TAX_PROPERTY"
        assert expenses[0].amount_total_cents == 50000

    def test_latest_listing_per_unit(self, source, db_session, leased_property):
        """Each unit yields one listing: the most recently created one."""
        unit = leased_property.rental_units.first()
        db_session.add(
            Listing(
                rental_unit_id=unit.id,
                title="Relisted",
                price=1250,
                created_at=datetime(2099, 1, 1),
            )
        )
        db_session.commit()

        listings = source.fetch_active_listings_per_unit([leased_property.id])
        assert len(listings) == 1
        assert listings[0].monthly_price == 1250

    def test_empty_ids_short_circuit(self, source):
        assert source.fetch_signed_lease_periods([]) == []
        assert source.fetch_expenses([], date(2024, 1, 1), date(2024, 12, 31)) == []
        assert source.fetch_active_listings_per_unit([]) == []

    def test_snapshot_includes_prior_year_expenses(self, source, owner, leased_property):
        """The snapshot covers year - 1 for the evolution pass."""
        snapshot = source.load_snapshot(owner.id, 2024)
        assert len(snapshot.properties) == 1
        assert len(snapshot.lease_periods) == 1
        assert sorted(e.date_occurred.year for e in snapshot.expenses) == [2023, 2024]
        assert len(snapshot.listings) == 1
