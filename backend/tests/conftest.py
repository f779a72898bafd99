"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Settings are read at import time: point the app at SQLite before importing it
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from asset_finance_api.main import app
from asset_finance_api.models import (
    Base,
    AssetFinanceAgreement,
    AssetFinanceAsset,
    DeliveryRecord,
    EndOption,
)
from asset_finance_api.resources import REGISTRY
from shared.config.constants import AgreementStatus, DeliveryStatus, EndOptionType, FinanceType
from shared.infrastructure.db import enable_sqlite_foreign_keys, get_db


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

AGREEMENTS_URL = "/api/v1/asset-finance-agreements"


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def registry():
    """The application's resource registry."""
    return REGISTRY


# =============================================================================
# Seed data
# =============================================================================


def _save(db_session, entity):
    db_session.add(entity)
    db_session.commit()
    db_session.refresh(entity)
    return entity


@pytest.fixture
def seed_agreement(db_session):
    """Create an active lease agreement."""
    return _save(db_session, AssetFinanceAgreement(
        finance_type=FinanceType.LEASE,
        agreement_status=AgreementStatus.ACTIVE,
        start_date=date(2025, 1, 1),
        end_date=date(2027, 12, 31),
        total_value=Decimal("36000.00"),
        payment_frequency="MONTHLY",
        services_included=True,
    ))


@pytest.fixture
def other_agreement(db_session):
    """A second, unrelated agreement."""
    return _save(db_session, AssetFinanceAgreement(
        finance_type=FinanceType.RENT,
        agreement_status=AgreementStatus.DRAFT,
    ))


@pytest.fixture
def seed_asset(db_session, seed_agreement):
    """Create an asset under seed_agreement."""
    return _save(db_session, AssetFinanceAsset(
        asset_finance_agreement_id=seed_agreement.asset_finance_agreement_id,
        asset_category="VEHICLE",
        asset_description="Electric delivery van",
        manufacturer="Volta",
        serial_number="VIN-0001",
        asset_value=Decimal("30000.00"),
    ))


@pytest.fixture
def other_asset(db_session, other_agreement):
    """An asset under other_agreement."""
    return _save(db_session, AssetFinanceAsset(
        asset_finance_agreement_id=other_agreement.asset_finance_agreement_id,
        asset_description="Pallet jack",
    ))


@pytest.fixture
def seed_delivery_record(db_session, seed_asset):
    """Create a delivery record for seed_asset."""
    return _save(db_session, DeliveryRecord(
        asset_finance_asset_id=seed_asset.asset_finance_asset_id,
        delivery_status=DeliveryStatus.SCHEDULED,
        delivery_address="1 Dock Road",
        delivery_city="Rotterdam",
    ))


@pytest.fixture
def seed_end_option(db_session, seed_agreement):
    """Create a purchase end option for seed_agreement."""
    return _save(db_session, EndOption(
        asset_finance_agreement_id=seed_agreement.asset_finance_agreement_id,
        option_type=EndOptionType.PURCHASE,
        purchase_price=Decimal("4500.00"),
    ))


# =============================================================================
# URLs and payloads
# =============================================================================


@pytest.fixture
def agreement_url(seed_agreement):
    return f"{AGREEMENTS_URL}/{seed_agreement.asset_finance_agreement_id}"


@pytest.fixture
def asset_url(seed_agreement, seed_asset):
    return (
        f"{AGREEMENTS_URL}/{seed_agreement.asset_finance_agreement_id}"
        f"/assets/{seed_asset.asset_finance_asset_id}"
    )


@pytest.fixture
def agreement_payload():
    """Valid agreement body."""
    return {
        "financeType": "LEASE",
        "agreementStatus": "PENDING",
        "startDate": "2025-03-01",
        "endDate": "2028-02-29",
        "totalValue": "48000.00",
        "paymentFrequency": "MONTHLY",
        "servicesIncluded": False,
        "depositAmount": "2000.00",
        "earlyTerminationFee": "1500.00",
        "residualValue": "5000.00",
        "purchaseOptionAvailable": True,
        "purchaseOptionPrice": "5000.00",
        "remarks": "Three year fleet lease",
    }


@pytest.fixture
def asset_payload():
    """Valid asset body."""
    return {
        "assetCategory": "EQUIPMENT",
        "assetDescription": "Counterbalance forklift",
        "manufacturer": "Liftco",
        "assetModel": "LX-25",
        "serialNumber": "SN-42",
        "assetValue": "21000.00",
        "isActive": True,
    }
