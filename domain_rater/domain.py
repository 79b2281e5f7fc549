import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# (scheme://)?(subdomain.)?main.tld(/path)?; the path holds no line terminators
DOMAIN_REGEX = re.compile(
    r"(?:([a-z]+)://)?(?:([a-z0-9.\-]+)\.)?([a-z0-9\-]+)\.([a-z0-9\-]+)(/[^\n\r\u2028\u2029]*)?",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class Domain:
    """
    A web domain split into its components.

    Only ``valid`` is meaningful when the raw string did not match the
    domain pattern; every other field is then an empty string.
    """

    valid: bool
    complete_domain: str = ""
    protocol: str = ""
    sub_domain: str = ""
    main_domain: str = ""
    tld: str = ""
    directory: str = ""

    @property
    def apex_domain(self) -> str:
        """Example: ``example.com``"""
        return self.main_domain + "." + self.tld

    @property
    def domain_without_directory(self) -> str:
        protocol = self.protocol + "://" if self.protocol else ""
        sub_domain = self.sub_domain + "." if self.sub_domain else ""
        return protocol + sub_domain + self.apex_domain


def parse(raw: str) -> Domain:
    """Parse a raw string such as ``https://www.example.com/a?b=c``."""
    if not isinstance(raw, str):
        raise TypeError(f"Domain must be of type str but was of type {type(raw).__name__}.")

    match = DOMAIN_REGEX.fullmatch(raw)
    if not match:
        logger.debug("domain_invalid raw=%r", raw)
        return Domain(valid=False)

    protocol, sub_domain, main_domain, tld, directory = match.groups(default="")
    domain = Domain(
        valid=True,
        complete_domain=match.group(0),
        protocol=protocol.lower(),
        sub_domain=sub_domain.lower(),
        main_domain=main_domain.lower(),
        tld=tld.lower(),
        directory=directory,
    )
    logger.debug("domain_parsed raw=%r apex=%s", raw, domain.apex_domain)
    return domain
