from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

PUBLIC_ENDPOINTS = {
    ("POST", "/api/v1/signup"),
    ("POST", "/api/v1/signin"),
    ("POST", "/api/v1/signout"),
    ("GET", "/health"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Mesto API",
            version="0.1.0",
            summary="User accounts and profiles for Mesto",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "JwtCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": "jwt",
                "description": "Session token set by /signin",
            },
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "The same session token sent as a Bearer header",
            },
        }

        # Applied globally, then removed for public endpoints
        openapi_schema["security"] = [{"JwtCookie": []}, {"BearerAuth": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Incorrect email or password", "type": "authentication_error"},
                {"message": "User not found", "type": "not_found"},
                {"message": "User with this email already exists", "type": "conflict"},
            ]
        }
    }
