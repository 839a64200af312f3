# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import math
import os
from logging import Logger, getLogger

_logger: Logger = getLogger(__name__)

AWS_XRAY_SAMPLING_RULE_CACHE_TTL_CONFIG = "AWS_XRAY_SAMPLING_RULE_CACHE_TTL"
DEFAULT_CACHE_TTL_SECONDS = 3600


def get_cache_ttl_seconds() -> float:
    """Staleness threshold of the sampling rule cache, in seconds.

    Read from ``AWS_XRAY_SAMPLING_RULE_CACHE_TTL``; missing or invalid values fall back to one hour.
    """
    cache_ttl = os.environ.get(AWS_XRAY_SAMPLING_RULE_CACHE_TTL_CONFIG)
    if cache_ttl is None or cache_ttl.strip() == "":
        return DEFAULT_CACHE_TTL_SECONDS

    try:
        cache_ttl_seconds = float(cache_ttl)
    except ValueError:
        cache_ttl_seconds = -1

    if not math.isfinite(cache_ttl_seconds) or cache_ttl_seconds <= 0:
        _logger.warning(
            "Improper configuration: %s must be a positive number of seconds, got %s. Using default of %s.",
            AWS_XRAY_SAMPLING_RULE_CACHE_TTL_CONFIG,
            cache_ttl,
            DEFAULT_CACHE_TTL_SECONDS,
        )
        return DEFAULT_CACHE_TTL_SECONDS
    return cache_ttl_seconds
