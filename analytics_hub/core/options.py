import copy
from collections.abc import Mapping
from typing import Any

from analytics_hub.core.errors import ConfigurationError


def resolve_options(
    name: str,
    config: Any,
    key: str | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Normalize a provider config into the full options mapping.

    A bare string is only accepted when the provider declares a default
    ``key``; a mapping is merged over a copy of ``defaults``.
    """
    if isinstance(config, str):
        if not key:
            raise ConfigurationError(
                f'Provider "{name}" has no default key, pass a mapping of options instead'
            )
        config = {key: config}
    elif not isinstance(config, Mapping):
        raise ConfigurationError(
            f'Could not resolve options for provider "{name}": {type(config).__name__}'
        )

    return {**copy.deepcopy(dict(defaults or {})), **config}
