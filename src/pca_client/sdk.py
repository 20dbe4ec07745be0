"""SDK composition root for pca-client."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pca_client.api import PublicContentApi
from pca_client.auth import create_token_resolver
from pca_client.contentmodel.inputs import ContextData
from pca_client.contracts.config import PcaClientConfig
from pca_client.contracts.exceptions import ConfigError
from pca_client.graphql import HttpGraphQLClient

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> PcaClientConfig:
    """Load and validate client config from JSON."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return PcaClientConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


async def create_public_content_api(config: PcaClientConfig) -> PublicContentApi:
    """Resolve credentials and wire an HTTP-backed :class:`PublicContentApi`.

    The returned API owns its HTTP client; close it with ``aclose()`` or use
    it as an async context manager.
    """
    token = await create_token_resolver(config).resolve()
    logger.debug("Connecting to %s (auth=%s)", config.endpoint, config.auth)

    client = HttpGraphQLClient(
        config.endpoint,
        token=token,
        timeout=config.timeout,
        max_retries=config.max_retries,
        headers=config.headers,
    )
    default_context_data = ContextData(claim_values=list(config.default_claims)) if config.default_claims else None
    return PublicContentApi(client, default_context_data=default_context_data)
