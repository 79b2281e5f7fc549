from domain_rater.domain import Domain
from domain_rater.features.types import Category
from domain_rater.scoring.report import RatingReport


class Feature:
    """
    Base class for rating passes.

    Attributes:
        name:      unique identifier for output
        order:     position of the pass within a rating (lowest runs first)
        category:  which component of the domain the pass rates
    """

    name = "base"
    order = 0
    category: Category = Category.MAIN_DOMAIN

    def header(self, domain: Domain) -> str:
        """Header line written before the pass's detail messages."""
        raise NotImplementedError()

    def rate(self, domain: Domain, report: RatingReport) -> None:
        """Write the header, then the detail messages."""
        report.add_header(self.header(domain))
        self.run(domain, report)

    def run(self, domain: Domain, report: RatingReport) -> None:
        """
        MUST be overridden by each pass.

        ``domain`` is always valid here; ``report`` collects the messages
        and score deltas.
        """
        raise NotImplementedError()
