"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from pca_client.contentmodel.inputs import ClaimValue


class PcaClientConfig(BaseModel):
    endpoint: str
    auth: str = "none"
    token: str | None = None
    token_env: str = "PCA_CLIENT_TOKEN"
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)
    headers: dict[str, str] = Field(default_factory=dict)
    default_claims: list[ClaimValue] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> PcaClientConfig:
        if not self.endpoint.strip():
            raise ValueError("endpoint must be a non-empty URL")
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"none", "env", "token"}:
            raise ValueError("auth must be one of: none, env, token")
        return self
