# tests/test_schemas.py
import pytest
from pydantic import ValidationError

from sponsor_service.schemas.sponsor import SponsorUpsertRequest, SponsorUpsertResponse
from sponsor_service.schemas.token import TokenPayload


def test_request_accepts_camel_case():
    payload = SponsorUpsertRequest.model_validate(
        {"eventId": 10, "editionId": 3, "companyId": 5, "sponsorId": 77, "logo": 12}
    )

    assert payload.event_id == 10
    assert payload.edition_id == 3
    assert payload.company_id == 5
    assert payload.sponsor_id == 77
    assert payload.logo == 12


def test_sponsor_id_zero_means_new():
    payload = SponsorUpsertRequest.model_validate({"eventId": 10, "sponsorId": 0, "name": "A"})

    assert payload.sponsor_id is None


def test_base64_logo_stays_a_string():
    payload = SponsorUpsertRequest.model_validate(
        {"eventId": 10, "logo": "data:image/png;base64,AAAA"}
    )

    assert payload.logo == "data:image/png;base64,AAAA"


def test_deletion_flag():
    assert SponsorUpsertRequest.model_validate({"eventId": 1, "published": -1}).is_deletion
    assert not SponsorUpsertRequest.model_validate({"eventId": 1, "published": 0}).is_deletion


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"eventId": 0},
        {"eventId": 1, "position": -1},
        {"eventId": 1, "published": -2},
    ],
)
def test_invalid_requests(body):
    with pytest.raises(ValidationError):
        SponsorUpsertRequest.model_validate(body)


def test_response_serializes_with_camel_case_id():
    response = SponsorUpsertResponse.success("Sponsor processed successfully", 9)

    assert response.ok
    assert response.model_dump(by_alias=True) == {
        "status": {"code": 1, "message": "Sponsor processed successfully"},
        "data": {"sponsorId": 9},
    }
    assert not SponsorUpsertResponse.failure("Sponsor not found").ok


def test_token_subject_must_be_numeric():
    assert TokenPayload(sub="42", exp=1).user_id == 42
    with pytest.raises(ValidationError):
        TokenPayload(sub="user_abc", exp=1)
