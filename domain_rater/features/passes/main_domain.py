from domain_rater.features.base import Feature
from domain_rater.features.name_rating import rate_name
from domain_rater.features.types import Category


class MainDomainFeature(Feature):
    name = "main_domain"
    order = 30
    category = Category.MAIN_DOMAIN

    def header(self, domain):
        return f"Main Domain ({domain.main_domain})"

    def run(self, domain, report):
        rate_name(domain.main_domain, report)
