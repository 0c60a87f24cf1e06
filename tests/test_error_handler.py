import pytest
from flask import Blueprint
from pydantic import BaseModel, ValidationError

from app import create_app
from config import TestingConfig
from models import db
from utils.errors import DuplicateKey, MalformedId, NotFound, ValidationFailure


class DetailedTestingConfig(TestingConfig):
    EXPOSE_ERROR_DETAIL = True


class _Sample(BaseModel):
    count: int
    label: str


def _raising_blueprint():
    bp = Blueprint("raising", __name__, url_prefix="/_raise")

    @bp.get("/validation")
    def validation():
        raise ValidationFailure(["Name is required", "Email is invalid"])

    @bp.get("/duplicate")
    def duplicate():
        raise DuplicateKey("email")

    @bp.get("/malformed")
    def malformed():
        raise MalformedId(detail="Cast to id failed for value 'zz'")

    @bp.get("/missing")
    def missing():
        raise NotFound("Room not found")

    @bp.get("/schema")
    def schema():
        _Sample.model_validate({"count": "many"})

    @bp.get("/crash")
    def crash():
        raise RuntimeError("database went away")

    return bp


def _build(config):
    app = create_app(config)
    app.register_blueprint(_raising_blueprint())
    return app


@pytest.fixture
def prod_client():
    app = _build(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app.test_client()
        db.session.remove()
        db.drop_all()


@pytest.fixture
def dev_client():
    app = _build(DetailedTestingConfig)
    with app.app_context():
        db.create_all()
        yield app.test_client()
        db.session.remove()
        db.drop_all()


@pytest.mark.parametrize("path, status, message", [
    ("/_raise/validation", 400, "Name is required, Email is invalid"),
    ("/_raise/duplicate", 400, "Email already exists"),
    ("/_raise/malformed", 400, "Invalid ID format"),
    ("/_raise/missing", 404, "Room not found"),
    ("/_raise/crash", 500, "Internal Server Error"),
])
def test_maps_each_error_kind(prod_client, path, status, message):
    resp = prod_client.get(path)

    assert resp.status_code == status
    assert resp.get_json() == {"success": False, "message": message}


def test_schema_errors_become_field_messages(prod_client):
    resp = prod_client.get("/_raise/schema")

    assert resp.status_code == 400
    message = resp.get_json()["message"]
    assert message.startswith("count: ")
    assert message.endswith(", label: Field required")


def test_http_errors_keep_their_status(prod_client):
    not_found = prod_client.get("/no/such/route")
    wrong_method = prod_client.patch("/bookings")

    assert not_found.status_code == 404
    assert not_found.get_json()["success"] is False
    assert wrong_method.status_code == 405
    assert wrong_method.get_json()["success"] is False


def test_production_hides_raw_error(prod_client):
    body = prod_client.get("/_raise/crash").get_json()

    assert "error" not in body


def test_development_echoes_raw_error(dev_client):
    crash = dev_client.get("/_raise/crash").get_json()
    malformed = dev_client.get("/_raise/malformed").get_json()

    assert crash["message"] == "Internal Server Error"
    assert crash["error"] == "database went away"
    assert malformed["message"] == "Invalid ID format"
    assert malformed["error"] == "Cast to id failed for value 'zz'"


def test_duplicate_key_capitalizes_field():
    assert DuplicateKey("number").message == "Number already exists"
    assert DuplicateKey("email").status_code == 400


def test_validation_failure_keeps_one_message_per_field():
    with pytest.raises(ValidationError) as exc:
        _Sample.model_validate({"count": "many"})

    failure = ValidationFailure.from_pydantic(exc.value)

    assert len(failure.messages) == 2
    assert failure.messages[0].startswith("count: Input should be a valid integer")
    assert failure.messages[1] == "label: Field required"
    assert failure.message == ", ".join(failure.messages)
