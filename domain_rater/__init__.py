from domain_rater.domain import Domain, parse
from domain_rater.scoring.rater import INVALID_DOMAIN, DomainRater, rate_many

__all__ = ["Domain", "DomainRater", "INVALID_DOMAIN", "parse", "rate_many"]
