"""
Tests for agreement endpoints.
"""

import uuid
from decimal import Decimal

import pytest

from asset_finance_api.models import AssetFinanceAgreement
from shared.config.constants import Limits


AGREEMENTS_URL = "/api/v1/asset-finance-agreements"


class TestAgreementCreate:
    """POST /api/v1/asset-finance-agreements"""

    def test_create_agreement(self, client, agreement_payload):
        """Create returns the stored agreement with a server-assigned id."""
        response = client.post(AGREEMENTS_URL, json=agreement_payload)
        assert response.status_code == 200
        data = response.json()
        assert uuid.UUID(data["assetFinanceAgreementId"])
        assert data["financeType"] == "LEASE"
        assert data["agreementStatus"] == "PENDING"
        assert data["startDate"] == "2025-03-01"
        assert Decimal(data["totalValue"]) == Decimal("48000")
        assert data["purchaseOptionAvailable"] is True
        assert data["createdAt"] is not None

    def test_created_agreement_is_retrievable(self, client, agreement_payload):
        """The id returned by create resolves to the same representation."""
        created = client.post(AGREEMENTS_URL, json=agreement_payload).json()

        response = client.get(f"{AGREEMENTS_URL}/{created['assetFinanceAgreementId']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_create_ignores_client_identifier(self, client, db_session, agreement_payload):
        """An id in the body is not used as the primary key."""
        client_id = str(uuid.uuid4())
        response = client.post(
            AGREEMENTS_URL,
            json={**agreement_payload, "assetFinanceAgreementId": client_id},
        )
        assert response.status_code == 200
        assert response.json()["assetFinanceAgreementId"] != client_id
        assert db_session.get(AssetFinanceAgreement, uuid.UUID(client_id)) is None

    def test_create_ignores_client_timestamps(self, client, agreement_payload):
        """Past audit timestamps are accepted but replaced by storage."""
        response = client.post(
            AGREEMENTS_URL,
            json={**agreement_payload, "createdAt": "2001-01-01T00:00:00"},
        )
        assert response.status_code == 200
        assert not response.json()["createdAt"].startswith("2001-01-01")

    def test_create_accepts_snake_case_body(self, client):
        """Field names are accepted in snake_case as well."""
        response = client.post(
            AGREEMENTS_URL,
            json={"finance_type": "RENT", "agreement_status": "DRAFT"},
        )
        assert response.status_code == 200
        assert response.json()["financeType"] == "RENT"

    @pytest.mark.parametrize("field", ["createdAt", "updatedAt"])
    def test_create_rejects_future_timestamps(self, client, agreement_payload, field):
        """Audit timestamps in the future are a validation error."""
        response = client.post(
            AGREEMENTS_URL,
            json={**agreement_payload, field: "2999-01-01T00:00:00"},
        )
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "override",
        [
            {"financeType": "LOAN"},
            {"agreementStatus": None},
            {"totalValue": "-1.00"},
            {"depositAmount": "10.123"},
            {"remarks": "x" * 2001},
            {"startDate": "2025-06-01", "endDate": "2025-05-31"},
            {"customerId": "not-a-uuid"},
        ],
    )
    def test_create_rejects_invalid_body(self, client, agreement_payload, override):
        """Invalid bodies never reach the service and return 400."""
        response = client.post(AGREEMENTS_URL, json={**agreement_payload, **override})
        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    def test_create_requires_finance_type(self, client):
        """Required fields must be present."""
        response = client.post(AGREEMENTS_URL, json={"agreementStatus": "DRAFT"})
        assert response.status_code == 400


class TestAgreementRead:
    """GET /api/v1/asset-finance-agreements/{agreement_id}"""

    def test_get_agreement(self, client, seed_agreement, agreement_url):
        response = client.get(agreement_url)
        assert response.status_code == 200
        data = response.json()
        assert data["assetFinanceAgreementId"] == str(seed_agreement.asset_finance_agreement_id)
        assert data["paymentFrequency"] == "MONTHLY"
        assert data["servicesIncluded"] is True

    def test_get_missing_agreement(self, client):
        """Unknown id returns 404 with a descriptive message."""
        missing = uuid.uuid4()
        response = client.get(f"{AGREEMENTS_URL}/{missing}")
        assert response.status_code == 404
        assert str(missing) in response.json()["detail"]

    def test_get_malformed_id(self, client):
        """A path id that is not a UUID is a bad request."""
        response = client.get(f"{AGREEMENTS_URL}/12345")
        assert response.status_code == 400


class TestAgreementUpdate:
    """PUT /api/v1/asset-finance-agreements/{agreement_id}"""

    def test_update_replaces_fields(self, client, agreement_url, agreement_payload):
        """Update overwrites every mutable field, including omitted ones."""
        body = {**agreement_payload, "agreementStatus": "ACTIVE"}
        body.pop("remarks")

        response = client.put(agreement_url, json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["agreementStatus"] == "ACTIVE"
        assert data["remarks"] is None
        assert Decimal(data["totalValue"]) == Decimal("48000")

    def test_update_keeps_identity(self, client, seed_agreement, agreement_url, agreement_payload):
        """Identifier and creation time survive an update."""
        before = client.get(agreement_url).json()

        response = client.put(
            agreement_url,
            json={**agreement_payload, "assetFinanceAgreementId": str(uuid.uuid4())},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["assetFinanceAgreementId"] == before["assetFinanceAgreementId"]
        assert data["createdAt"] == before["createdAt"]

    def test_update_missing_agreement(self, client, agreement_payload):
        response = client.put(f"{AGREEMENTS_URL}/{uuid.uuid4()}", json=agreement_payload)
        assert response.status_code == 404

    def test_update_rejects_invalid_body(self, client, agreement_url, agreement_payload):
        response = client.put(agreement_url, json={**agreement_payload, "financeType": "BARTER"})
        assert response.status_code == 400


class TestAgreementDelete:
    """DELETE /api/v1/asset-finance-agreements/{agreement_id}"""

    def test_delete_agreement(self, client, agreement_url):
        """Delete returns 204 and the agreement is gone."""
        response = client.delete(agreement_url)
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(agreement_url).status_code == 404

    def test_delete_missing_agreement(self, client):
        response = client.delete(f"{AGREEMENTS_URL}/{uuid.uuid4()}")
        assert response.status_code == 404


class TestAgreementList:
    """GET /api/v1/asset-finance-agreements with a filter body."""

    @pytest.fixture
    def three_agreements(self, client):
        bodies = [
            {"financeType": "LEASE", "agreementStatus": "ACTIVE", "totalValue": "1000.00"},
            {"financeType": "LEASE", "agreementStatus": "CLOSED", "totalValue": "5000.00"},
            {"financeType": "RENT", "agreementStatus": "ACTIVE", "totalValue": "9000.00"},
        ]
        return [client.post(AGREEMENTS_URL, json=body).json() for body in bodies]

    def test_list_without_body(self, client, three_agreements):
        """No body lists the first page with default size."""
        response = client.get(AGREEMENTS_URL)
        assert response.status_code == 200
        data = response.json()
        assert data["totalElements"] == 3
        assert len(data["content"]) == 3
        assert data["currentPage"] == 0
        assert data["totalPages"] == 1
        assert data["pageSize"] == 10

    def test_list_empty(self, client, db_session):
        response = client.get(AGREEMENTS_URL)
        assert response.status_code == 200
        data = response.json()
        assert data["content"] == []
        assert data["totalElements"] == 0
        assert data["totalPages"] == 0

    def test_filter_by_equality(self, client, three_agreements):
        response = client.request("GET", AGREEMENTS_URL, json={"filters": {"financeType": "LEASE"}})
        assert response.status_code == 200
        data = response.json()
        assert data["totalElements"] == 2
        assert {a["financeType"] for a in data["content"]} == {"LEASE"}

    def test_filter_accepts_snake_case_field(self, client, three_agreements):
        response = client.request(
            "GET",
            AGREEMENTS_URL,
            json={"filters": {"agreement_status": "ACTIVE"}},
        )
        assert response.status_code == 200
        assert response.json()["totalElements"] == 2

    def test_filter_by_range(self, client, three_agreements):
        """Range bounds are inclusive."""
        response = client.request(
            "GET",
            AGREEMENTS_URL,
            json={"rangeFilters": {"totalValue": {"from": 1000, "to": 5000}}},
        )
        assert response.status_code == 200
        values = sorted(Decimal(a["totalValue"]) for a in response.json()["content"])
        assert values == [Decimal("1000"), Decimal("5000")]

    def test_filter_by_open_range(self, client, three_agreements):
        response = client.request(
            "GET",
            AGREEMENTS_URL,
            json={"rangeFilters": {"totalValue": {"from": "4000"}}},
        )
        assert response.status_code == 200
        assert response.json()["totalElements"] == 2

    def test_sort_and_page(self, client, three_agreements):
        """Pages follow the requested order; totals cover the whole set."""
        body = {"pagination": {"pageNumber": 1, "pageSize": 2, "sortBy": "totalValue", "sortDirection": "DESC"}}
        response = client.request("GET", AGREEMENTS_URL, json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["totalElements"] == 3
        assert data["totalPages"] == 2
        assert data["currentPage"] == 1
        assert len(data["content"]) == 1
        assert Decimal(data["content"][0]["totalValue"]) == Decimal("1000")

    def test_sort_ascending(self, client, three_agreements):
        body = {"pagination": {"sortBy": "totalValue", "sortDirection": "asc"}}
        data = client.request("GET", AGREEMENTS_URL, json=body).json()
        values = [Decimal(a["totalValue"]) for a in data["content"]]
        assert values == sorted(values)

    def test_page_size_is_capped(self, client, three_agreements):
        body = {"pagination": {"pageSize": 10_000}}
        data = client.request("GET", AGREEMENTS_URL, json=body).json()
        assert data["pageSize"] == 200

    def test_unknown_filter_field(self, client, three_agreements):
        response = client.request("GET", AGREEMENTS_URL, json={"filters": {"colour": "red"}})
        assert response.status_code == 400
        assert "colour" in response.json()["detail"]

    def test_unknown_sort_field(self, client, three_agreements):
        response = client.request("GET", AGREEMENTS_URL, json={"pagination": {"sortBy": "colour"}})
        assert response.status_code == 400

    def test_invalid_filter_value(self, client, three_agreements):
        response = client.request("GET", AGREEMENTS_URL, json={"filters": {"startDate": "yesterday"}})
        assert response.status_code == 400

    def test_negative_page_number(self, client):
        response = client.request("GET", AGREEMENTS_URL, json={"pagination": {"pageNumber": -1}})
        assert response.status_code == 400

    def test_page_number_beyond_offset_range(self, client, three_agreements):
        """Page numbers whose offset would not fit a database integer are refused."""
        for page_number in (10**19, Limits.MAX_PAGE_NUMBER + 1):
            body = {"pagination": {"pageNumber": page_number, "pageSize": 10}}
            response = client.request("GET", AGREEMENTS_URL, json=body)
            assert response.status_code == 400

    def test_page_past_the_end_is_empty(self, client, three_agreements):
        body = {"pagination": {"pageNumber": Limits.MAX_PAGE_NUMBER, "pageSize": Limits.MAX_PAGE_SIZE}}
        response = client.request("GET", AGREEMENTS_URL, json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["content"] == []
        assert data["totalElements"] == 3
        assert data["currentPage"] == Limits.MAX_PAGE_NUMBER
