# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from threading import Lock
from typing import Mapping, Optional, Tuple

from amazon.xray.sampler._matcher import _Matcher
from amazon.xray.sampler._reservoir import _Reservoir
from amazon.xray.sampler._sampling_request import HOST, HTTP_METHOD, SERVICE, SERVICE_TYPE, URL_PATH
from amazon.xray.sampler._sampling_rule import DEFAULT_RULE_NAME, _SamplingRule
from amazon.xray.sampler._sampling_target import _SamplingTarget


class _SamplingRuleApplier:
    """A sampling rule definition together with the runtime state collected for it.

    Counters and target state are guarded by a per-rule lock, so they may be updated from the request
    path and from the target poller concurrently.
    """

    def __init__(self, sampling_rule: _SamplingRule):
        self.sampling_rule = sampling_rule
        self.reservoir = _Reservoir(sampling_rule.ReservoirSize)

        self.__fixed_rate = sampling_rule.FixedRate
        self.__request_count = 0
        self.__sampled_count = 0
        self.__borrow_count = 0
        self.__lock = Lock()

    @property
    def name(self) -> str:
        return self.sampling_rule.RuleName

    @property
    def priority(self) -> int:
        return self.sampling_rule.Priority

    @property
    def fixed_rate(self) -> float:
        return self.__fixed_rate

    @property
    def request_count(self) -> int:
        return self.__request_count

    @property
    def sampled_count(self) -> int:
        return self.__sampled_count

    @property
    def borrow_count(self) -> int:
        return self.__borrow_count

    def is_default(self) -> bool:
        return self.name == DEFAULT_RULE_NAME

    def matches(self, sampling_request: Optional[Mapping[str, str]]) -> bool:
        if sampling_request is None:
            sampling_request = {}

        return (
            _Matcher.wild_card_match(sampling_request.get(HOST) or "", self.sampling_rule.Host)
            and _Matcher.wild_card_match(sampling_request.get(HTTP_METHOD) or "", self.sampling_rule.HTTPMethod)
            and _Matcher.wild_card_match(sampling_request.get(URL_PATH) or "", self.sampling_rule.URLPath)
            and _Matcher.wild_card_match(sampling_request.get(SERVICE) or "", self.sampling_rule.ServiceName)
            and _Matcher.wild_card_match(sampling_request.get(SERVICE_TYPE) or "", self.sampling_rule.ServiceType)
        )

    def increment_request_count(self) -> None:
        with self.__lock:
            self.__request_count += 1

    def increment_sampled_count(self) -> None:
        with self.__lock:
            self.__sampled_count += 1

    def increment_borrow_count(self) -> None:
        with self.__lock:
            self.__borrow_count += 1

    def ever_matched(self) -> bool:
        return self.__request_count > 0

    def apply_target(self, target: _SamplingTarget) -> None:
        with self.__lock:
            interval = target.Interval if target.Interval is not None else self.reservoir.interval
            self.reservoir.load_target_info(target.ReservoirQuota, target.ReservoirQuotaTTL, interval)
            if target.FixedRate is not None:
                self.__fixed_rate = target.FixedRate

    def get_target_info(self) -> Tuple[float, Optional[int], Optional[float], Optional[int]]:
        with self.__lock:
            return self.__fixed_rate, self.reservoir.quota, self.reservoir.ttl, self.reservoir.interval

    def merge_statistics(self, previous: "_SamplingRuleApplier") -> None:
        """Carry counters and reservoir quota of the rule this one replaces on a rule reload."""
        request_count, sampled_count, borrow_count = previous.__read_counters()
        _, quota, ttl, interval = previous.get_target_info()
        with self.__lock:
            self.__request_count = request_count
            self.__sampled_count = sampled_count
            self.__borrow_count = borrow_count
            self.reservoir.load_target_info(quota, ttl, interval)

    def snapshot_statistics(self) -> dict:
        with self.__lock:
            statistics = {
                "RequestCount": self.__request_count,
                "SampleCount": self.__sampled_count,
                "BorrowCount": self.__borrow_count,
            }
            self.__request_count = 0
            self.__sampled_count = 0
            self.__borrow_count = 0
        return statistics

    def __read_counters(self) -> Tuple[int, int, int]:
        with self.__lock:
            return self.__request_count, self.__sampled_count, self.__borrow_count
