"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint

from authsvc.api.deps import get_auth_service, json_body, json_response, timing
from authsvc.schemas import LoginSchema, RefreshSchema, RegisterSchema, TokenPairSchema
from authsvc.services.auth.dto import LoginIn, RefreshIn, RegisterIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
refresh_schema = RefreshSchema()
token_schema = TokenPairSchema()


@bp.post("/register")
@timing
def register():
    """Register a new account and return its first token pair."""

    data = register_schema.load(json_body())
    pair = get_auth_service().register(RegisterIn(email=data["email"], password=data["password"]))
    return json_response(token_schema.dump(pair), status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue a token pair."""

    data = login_schema.load(json_body())
    pair = get_auth_service().login(LoginIn(email=data["email"], password=data["password"]))
    return json_response(token_schema.dump(pair))


@bp.post("/refresh")
@timing
def refresh():
    """Exchange a refresh token for a new pair; the old token stops working."""

    data = refresh_schema.load(json_body())
    pair = get_auth_service().refresh(RefreshIn(refresh_token=data["refresh_token"]))
    return json_response(token_schema.dump(pair))
