# tests/api/test_sponsors_api.py

from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from sponsor_service import crud
from sponsor_service.main import app
from sponsor_service.api import deps
from tests.conftest import TEST_USER_ID
from tests.utils.auth import get_user_authentication_headers
from tests.utils.event import create_company, create_event_with_edition, make_point_of_contact
from tests.utils.sponsor import create_sponsor


def seed(db):
    company = create_company(db)
    event, edition = create_event_with_edition(db, organizer=company)
    make_point_of_contact(db, TEST_USER_ID, event.id)
    return event, edition, company


def test_upsert_creates_sponsor(test_client: TestClient, db_session, producer):
    event, edition, company = seed(db_session)

    response = test_client.put(
        "/api/v1/sponsor/upsert",
        json={"eventId": event.id, "companyId": company.id, "title": "Gold Sponsor"},
    )

    assert response.status_code == 200
    content = response.json()
    assert content["status"] == {"code": 1, "message": "Sponsor processed successfully"}
    sponsor = crud.sponsor.get(db_session, content["data"]["sponsorId"])
    assert sponsor.title == "Gold Sponsor"
    assert sponsor.position == 1
    producer.send.assert_called_once()
    assert producer.send.call_args.kwargs["value"] == {"event": event.id, "edition": edition.id}


def test_upsert_deletes_sponsor(test_client: TestClient, db_session):
    event, edition, _ = seed(db_session)
    sponsor = create_sponsor(db_session, event_id=event.id, edition_id=edition.id, position=1)

    response = test_client.put(
        "/api/v1/sponsor/upsert",
        json={"eventId": event.id, "sponsorId": sponsor.id, "published": -1},
    )

    assert response.status_code == 200
    assert response.json() == {
        "status": {"code": 1, "message": "Sponsor deleted successfully"},
        "data": {"sponsorId": sponsor.id},
    }


def test_business_failure_is_reported_in_body(test_client: TestClient, db_session):
    event, _, _ = seed(db_session)

    response = test_client.put(
        "/api/v1/sponsor/upsert", json={"eventId": event.id, "published": -1, "name": "A"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "status": {"code": 0, "message": "sponsorId is required for deletion"},
        "data": None,
    }


def test_malformed_body_is_rejected(test_client: TestClient):
    response = test_client.put("/api/v1/sponsor/upsert", json={"eventId": "not-a-number"})

    assert response.status_code == 422


def test_missing_token_is_unauthorized(test_client: TestClient):
    app.dependency_overrides.pop(deps.get_current_user)

    response = test_client.put("/api/v1/sponsor/upsert", json={"eventId": 1, "name": "A"})

    assert response.status_code == 401


def test_real_token_is_accepted(test_client: TestClient, db_session):
    app.dependency_overrides.pop(deps.get_current_user)
    event, _, _ = seed(db_session)

    response = test_client.put(
        "/api/v1/sponsor/upsert",
        headers=get_user_authentication_headers(TEST_USER_ID),
        json={"eventId": event.id, "name": "Local Bakery"},
    )

    assert response.status_code == 200
    assert response.json()["status"]["code"] == 1


def test_health(test_client: TestClient):
    response = test_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "sponsor-service"}


def test_database_health(test_client: TestClient):
    response = test_client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json()["component"] == "database"


def test_storage_health(test_client: TestClient, storage):
    storage.bucket = "sponsor-assets"

    response = test_client.get("/api/v1/health/storage")

    assert response.status_code == 200
    storage.client.head_bucket.assert_called_once_with(Bucket="sponsor-assets")


def test_storage_health_reports_unreachable_bucket(test_client: TestClient, storage):
    storage.bucket = "sponsor-assets"
    storage.client.head_bucket.side_effect = ClientError(
        {"Error": {"Code": "404", "Message": "Not Found"}}, "HeadBucket"
    )

    response = test_client.get("/api/v1/health/storage")

    assert response.status_code == 503
