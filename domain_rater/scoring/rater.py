import logging
from typing import Dict, Iterable, List, Optional

from domain_rater.domain import Domain, parse
from domain_rater.features import charclass
from domain_rater.features.base import Feature
from domain_rater.features.registry import PASSES
from domain_rater.scoring.report import RatingReport

logger = logging.getLogger(__name__)

INVALID_DOMAIN = "Invalid domain."


class DomainRater:
    """
    Rate a domain name.

    The raw string is parsed once; when it is a valid domain every rating
    pass runs in order (protocol, subdomain, main domain, TLD) and adds its
    messages and score deltas to the report. Lower scores are better.
    """

    def __init__(self, raw: str, passes: Optional[List[Feature]] = None):
        self.domain: Domain = parse(raw)
        self._report = RatingReport()
        self._category_scores: Dict[str, int] = {}

        if self.domain.valid:
            self._report.add_header(self.domain.domain_without_directory)
            for feature in passes if passes is not None else PASSES:
                before = self._report.score
                feature.rate(self.domain, self._report)
                category = feature.category.value
                self._category_scores[category] = self._category_scores.get(category, 0) + self._report.score - before
            logger.debug("domain_rated domain=%s score=%d", self.domain.domain_without_directory, self._report.score)
        else:
            self._report.add_header("Invalid domain name pattern.")

    def get_domain(self) -> str:
        if self.domain.valid:
            return self.domain.apex_domain
        return INVALID_DOMAIN

    def get_score(self) -> int:
        return self._report.score

    def get_messages(self) -> List[str]:
        return list(self._report.messages)

    def get_category_scores(self) -> Dict[str, int]:
        """Score contributed by each rated component, in rating order."""
        return dict(self._category_scores)

    def get_pattern(self) -> str:
        """Shape of the apex domain, e.g. ``7L.com`` or ``LLLNNN.net``."""
        if self.domain.valid:
            return charclass.shape(self.domain.main_domain) + "." + self.domain.tld
        return INVALID_DOMAIN


def rate_many(targets: Iterable[str]) -> List[DomainRater]:
    return [DomainRater(target) for target in targets]
