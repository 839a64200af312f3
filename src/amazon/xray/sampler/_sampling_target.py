# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from logging import getLogger

_logger = getLogger(__name__)


# Disable snake_case naming style so this class can match the sampling targets response from X-Ray
# pylint: disable=invalid-name
class _SamplingTarget:
    def __init__(
        self,
        FixedRate: float = None,
        Interval: int = None,
        ReservoirQuota: int = None,
        ReservoirQuotaTTL: float = None,
        RuleName: str = None,
        **kwargs,
    ):
        self.FixedRate = FixedRate  # can be None
        self.Interval = Interval  # can be None
        self.ReservoirQuota = ReservoirQuota  # can be None
        self.ReservoirQuotaTTL = ReservoirQuotaTTL  # can be None
        self.RuleName = RuleName if RuleName is not None else ""

        if kwargs:
            _logger.debug("Ignoring unknown fields in _SamplingTarget: %s", list(kwargs.keys()))
