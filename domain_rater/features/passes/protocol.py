from domain_rater.config import get_weight
from domain_rater.features.base import Feature
from domain_rater.features.types import Category, ConfigCat


class ProtocolFeature(Feature):
    name = "protocol"
    order = 10
    category = Category.PROTOCOL

    def header(self, domain):
        return f"Domain Protocol ({domain.protocol})"

    def run(self, domain, report):
        protocol = domain.protocol

        if protocol == "":
            report.add_message("No web protocol specified.")
        elif protocol == "http":
            report.add_message("Unsecured connection protocol.", get_weight(ConfigCat.PROTOCOL, "http", 5))
        elif protocol == "https":
            report.add_message("Secured connection protocol.", 0)
        elif protocol == "ftp":
            report.add_message("File transfer protocol.", 0)
        else:
            report.add_message("Unknown protocol.")
