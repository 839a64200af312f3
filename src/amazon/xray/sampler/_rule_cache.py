# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import datetime
from logging import getLogger
from threading import Lock
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from amazon.xray.sampler._clock import _Clock
from amazon.xray.sampler._sampling_rule import _SamplingRule
from amazon.xray.sampler._sampling_rule_applier import _SamplingRuleApplier
from amazon.xray.sampler._sampling_statistics_document import _SamplingStatisticsDocument
from amazon.xray.sampler._sampling_target import _SamplingTarget
from amazon.xray.sampler._utils import get_cache_ttl_seconds

_logger = getLogger(__name__)


class _RuleCache:
    """Sampling rules of the X-Ray remote sampler, ordered by priority and then by rule name.

    Writers (``load_rules`` and ``load_targets``) are serialized on the cache lock. Readers never take
    that lock: each rule load installs a new immutable tuple of rules with a single assignment, so
    ``get_matched_rule`` sees either the previous or the new rule set, never a partial merge.
    """

    def __init__(self, clock: _Clock, lock: Lock, cache_ttl_seconds: float = None):
        if cache_ttl_seconds is None:
            cache_ttl_seconds = get_cache_ttl_seconds()

        self.__rule_appliers: Tuple[_SamplingRuleApplier, ...] = ()
        self.__cache_lock = lock
        self._clock = clock
        self._ttl = clock.time_delta(cache_ttl_seconds)
        self._last_updated = self._clock.now()

    @property
    def rules(self) -> Tuple[_SamplingRuleApplier, ...]:
        return self.__rule_appliers

    @property
    def ttl(self) -> datetime.timedelta:
        return self._ttl

    @property
    def last_updated(self) -> datetime.datetime:
        return self._last_updated

    def get_matched_rule(
        self, sampling_request: Optional[Mapping[str, str]], now: datetime.datetime = None
    ) -> Optional[_SamplingRuleApplier]:
        if now is None:
            now = self._clock.now()
        if self.expired(now):
            _logger.debug("Sampling rule cache expired, last updated at %s", self._last_updated)
            return None

        for rule_applier in self.__rule_appliers:
            if rule_applier.matches(sampling_request):
                return rule_applier
        return None

    def load_rules(self, sampling_rules: Sequence[_SamplingRule]) -> None:
        valid_rules = []
        for sampling_rule in sampling_rules:
            if not sampling_rule.RuleName:
                _logger.debug("sampling rule without rule name is not supported")
                continue
            if sampling_rule.Version != 1:
                _logger.debug("sampling rule without Version 1 is not supported: RuleName: %s", sampling_rule.RuleName)
                continue
            valid_rules.append(sampling_rule)

        with self.__cache_lock:
            # map list of rule appliers by each applier's sampling_rule name
            rule_applier_map = {rule.name: rule for rule in self.__rule_appliers}
            self.__rule_appliers = tuple(_merge_rule_appliers(rule_applier_map, valid_rules))
            self._last_updated = self._clock.now()

        if not any(rule.is_default() for rule in self.__rule_appliers):
            _logger.warning("Sampling rules loaded without a Default rule, unmatched requests have no rule")
        _logger.debug("Loaded %s sampling rules", len(self.__rule_appliers))

    def load_targets(self, sampling_targets: Mapping[str, _SamplingTarget]) -> None:
        with self.__cache_lock:
            rule_names = set()
            for rule_applier in self.__rule_appliers:
                rule_names.add(rule_applier.name)
                target = sampling_targets.get(rule_applier.name, None)
                if target is not None:
                    rule_applier.apply_target(target)

        for rule_name in sampling_targets:
            if rule_name not in rule_names:
                _logger.debug("Ignoring sampling target for unknown rule: %s", rule_name)

    def expired(self, now: datetime.datetime = None) -> bool:
        if now is None:
            now = self._clock.now()
        return now - self._last_updated > self._ttl

    def get_statistics_documents(self, client_id: str) -> List[dict]:
        statistics_documents = []
        # load_rules copies counters into new appliers under the same lock
        with self.__cache_lock:
            for rule_applier in self.__rule_appliers:
                if not rule_applier.ever_matched():
                    continue
                statistics = rule_applier.snapshot_statistics()
                statistics_document = _SamplingStatisticsDocument(
                    client_id,
                    rule_applier.name,
                    RequestCount=statistics["RequestCount"],
                    BorrowCount=statistics["BorrowCount"],
                    SampleCount=statistics["SampleCount"],
                )
                statistics_documents.append(statistics_document.snapshot(self._clock))
        return statistics_documents


def _merge_rule_appliers(
    previous_rule_appliers: Dict[str, _SamplingRuleApplier], sampling_rules: Sequence[_SamplingRule]
) -> List[_SamplingRuleApplier]:
    """Build the rule appliers of a new rule set, keeping statistics of rules that already existed.

    Rules missing from ``sampling_rules`` are dropped. An unchanged rule keeps its applier; a changed
    rule gets a new applier carrying the counters and reservoir quota of the old one.
    """
    rule_appliers = []
    rule_names = set()
    for sampling_rule in sampling_rules:
        if sampling_rule.RuleName in rule_names:
            _logger.debug("Ignoring duplicate sampling rule: RuleName: %s", sampling_rule.RuleName)
            continue
        rule_names.add(sampling_rule.RuleName)

        previous_applier = previous_rule_appliers.get(sampling_rule.RuleName, None)
        if previous_applier is not None and previous_applier.sampling_rule == sampling_rule:
            rule_appliers.append(previous_applier)
            continue

        rule_applier = _SamplingRuleApplier(sampling_rule)
        if previous_applier is not None:
            rule_applier.merge_statistics(previous_applier)
        rule_appliers.append(rule_applier)

    rule_appliers.sort(key=lambda applier: applier.sampling_rule)
    return rule_appliers
