from domain_rater.features.base import Feature
from domain_rater.features.name_rating import rate_name
from domain_rater.features.types import Category


class SubDomainFeature(Feature):
    name = "subdomain"
    order = 20
    category = Category.SUBDOMAIN

    def header(self, domain):
        return f"Subdomain ({domain.sub_domain})"

    def run(self, domain, report):
        if domain.sub_domain == "":
            report.add_message("There is no subdomain.")
            return
        if domain.sub_domain == "www":
            report.add_message("Default subdomain.")
            return

        # Each level is rated on its own; "a..b" leaves an empty level
        for part in domain.sub_domain.split("."):
            if part:
                rate_name(part, report)
            else:
                report.add_message("Malformed subdomain.")
