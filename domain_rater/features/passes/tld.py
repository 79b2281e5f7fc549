from domain_rater.config import get_weight
from domain_rater.features.base import Feature
from domain_rater.features.types import Category, ConfigCat


class TLDFeature(Feature):
    """
    Reputation of the top level domain.

    The length of the TLD always counts (linearly), then the TLD is
    looked up in a fixed table from most to least desirable.
    """

    name = "tld"
    order = 40
    category = Category.TLD

    COMMERCIAL = {"com"}
    NETWORK = {"net", "org"}
    OFFICIAL = {"edu", "gov", "mil", "int"}

    # ------------------------------------------------------------------
    # Country-level TLDs with registration restrictions
    # ------------------------------------------------------------------
    RESTRICTED_CCTLDS = {
        "au",  # Australia
        "br",  # Brazil
        "ca",  # Canada
        "eu",  # European Union
        "fr",  # France
        "ie",  # Ireland
        "it",  # Italy
        "mc",  # Monaco
        "mg",  # Madagascar
        "mo",  # Macau
        "my",  # Malaysia
        "no",  # Norway
        "re",  # Reunion
        "sa",  # Saudi Arabia
        "sk",  # Slovakia
        "sm",  # San Marino
        "ua",  # Ukraine
        "uk",  # United Kingdom
        "us",  # United States
        "va",  # Vatican City
    }

    DEFAULT_WEIGHTS = {
        "commercial": 0,
        "network": 5,
        "official": 0,
        "restricted_cctld": 10,
        "open_cctld": 35,
        "unknown": 45,
    }

    def _weight(self, key):
        return get_weight(ConfigCat.TLD, key, self.DEFAULT_WEIGHTS[key])

    def header(self, domain):
        return f"Top Level Domain ({domain.tld})"

    def run(self, domain, report):
        tld = domain.tld
        report.add_message("Number of characters in TLD", len(tld))

        if tld in self.COMMERCIAL:
            report.add_message(
                "Extremely well-known commercial TLD with a long reputation. Highly desirable.",
                self._weight("commercial"),
            )
        elif tld in self.NETWORK:
            report.add_message(
                "Well-known network or organization TLD. Desirable.",
                self._weight("network"),
            )
        elif tld in self.OFFICIAL:
            report.add_message(
                "Official governmental or educational TLD. Highly desirable, but only issued by the US government.",
                self._weight("official"),
            )
        elif tld in self.RESTRICTED_CCTLDS:
            report.add_message(
                "Country-level TLD with some restrictions. Usually these are safe and reputable.",
                self._weight("restricted_cctld"),
            )
        elif len(tld) == 2:
            report.add_message(
                "Country-level TLD with few or no restrictions. These often are marked as spam websites.",
                self._weight("open_cctld"),
            )
        else:
            report.add_message(
                "Fun or unknown TLD. Not desirable as these websites may be flagged as spam by some search engines.",
                self._weight("unknown"),
            )
