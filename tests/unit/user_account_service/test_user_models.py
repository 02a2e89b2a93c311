"""
User Account Models Unit Tests

Usage:
    pytest tests/unit/user_account_service -v
"""
from datetime import date

import pytest

from microservices.user_account_service.models import ProblemDetails, User, UserPayload
from tests.fixtures import make_user, make_user_payload

pytestmark = [pytest.mark.unit]


class TestUserPayload:

    def test_parses_camel_case_wire_format(self):
        payload = UserPayload.model_validate(make_user_payload(email="john.doe@example.com"))

        assert payload.first_name == "John"
        assert payload.date_of_birth == date(1985, 10, 1)
        assert payload.personal_id_document.country_of_issue == "US"

    def test_drops_client_id(self):
        payload = UserPayload.model_validate(make_user_payload(id="client-id"))

        assert "id" not in payload.model_dump()

    def test_strips_whitespace(self):
        payload = UserPayload.model_validate(make_user_payload(first_name="  Jane "))

        assert payload.first_name == "Jane"


class TestUser:

    def test_dump_by_alias(self):
        data = make_user(user_id="u-1").model_dump(mode="json", by_alias=True)

        assert set(data) == {
            "id", "firstName", "lastName", "email", "dateOfBirth",
            "personalIdDocument", "createdAt", "updatedAt",
        }

    def test_round_trips_through_wire_format(self):
        user = make_user()

        assert User.model_validate(user.model_dump(mode="json", by_alias=True)) == user


class TestProblemDetails:

    def test_defaults(self):
        problem = ProblemDetails(title="Not Found", status=404)

        assert problem.model_dump(exclude_none=True) == {
            "type": "about:blank",
            "title": "Not Found",
            "status": 404,
        }
