# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Optional


class _Reservoir:
    """Quota state of a single sampling rule.

    ``size`` comes from the rule definition. ``quota``, ``ttl`` and ``interval`` are assigned by
    sampling targets and stay ``None`` until the first target for the rule arrives.
    """

    def __init__(self, size: int = 0):
        self.size = size
        self.quota: Optional[int] = None
        self.ttl: Optional[float] = None
        self.interval: Optional[int] = None

    def load_target_info(self, quota: Optional[int], ttl: Optional[float], interval: Optional[int]) -> None:
        self.quota = quota
        self.ttl = ttl
        self.interval = interval
