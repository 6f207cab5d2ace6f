"""Logic for computing stable hashes of resolver configurations."""

import hashlib
import json

from src.resolver_config import ResolverConfig


def compute_config_hash(config: ResolverConfig) -> str:
    """Compute a stable hash of the configuration.

    Uses canonical JSON serialization (sorted keys) of ``config.to_dict()``.
    """
    config_json = json.dumps(config.to_dict(), sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
