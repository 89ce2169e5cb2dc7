"""
Tests for the demo portfolio seed script.
"""

import importlib.util
import os
from datetime import date

import pytest
from sqlalchemy.orm import sessionmaker

import app.db.database as database
from app.db.models import Property, User
from app.services.analytics import build_annual_report

SCRIPT_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "scripts",
    "seed_demo_portfolio.py",
)


@pytest.fixture
def seed_script(monkeypatch, db_session):
    """Load the seed script bound to the test database."""
    monkeypatch.setattr(
        database, "SessionLocal", sessionmaker(bind=db_session.get_bind())
    )
    spec = importlib.util.spec_from_file_location("seed_demo_portfolio", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "init_db", lambda: None)
    return module


class TestSeedDemoPortfolio:
    """Test seeding through the transactional session context."""

    def test_seed_commits_portfolio(self, seed_script, db_session):
        seed_script.main()

        owner = db_session.query(User).filter(User.email == seed_script.DEMO_EMAIL).one()
        assert db_session.query(Property).filter(Property.owner_id == owner.id).count() == 2

        report = build_annual_report(db_session, owner.id, 2024, today=date(2025, 1, 15))
        assert report.property_value == 475000
        assert report.total_income > 0
        # 26 520 listed vs. 20 640 collected; Chambre 3 is never let
        assert report.vacancy_loss == 5880.0

    def test_seed_is_idempotent(self, seed_script, db_session):
        seed_script.main()
        seed_script.main()
        assert db_session.query(User).filter(User.email == seed_script.DEMO_EMAIL).count() == 1
