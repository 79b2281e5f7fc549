from domain_rater.config import get_weight
from domain_rater.features import charclass
from domain_rater.features.types import ConfigCat
from domain_rater.scoring.report import RatingReport


def _rate_runs(name: str, report: RatingReport, charset: str, label: str) -> None:
    runs = charclass.find_runs(name, charset)
    if not runs:
        return

    report.add_message(
        f"{len(runs)} groups of 3 or more {label}: {', '.join(runs)}",
        get_weight(ConfigCat.NAME, "run_group", 10) * len(runs),
    )
    for run in runs:
        report.add_message(
            f"{len(run)} {label} in sequence: {run}",
            get_weight(ConfigCat.NAME, "run_char", 5) * len(run),
        )


def rate_name(name: str, report: RatingReport) -> None:
    """
    Rate a single label (main domain or one subdomain level).

    Longer names cost quadratically more, then runs of vowels or
    consonants, then every character by how common it is. A character
    inside a run is still counted in its letter class.
    """
    if not isinstance(name, str):
        raise TypeError("Invalid parameter types.")

    report.add_message(f"Length of {name}: {len(name)} characters", len(name) ** 2)

    if name.startswith("-") or name.endswith("-"):
        report.add_message("Invalid identifier. Cannot start or end with a hyphen!")

    _rate_runs(name, report, charclass.VOWELS, "vowels")
    _rate_runs(name, report, charclass.CONSONANTS, "consonants")

    cheap = charclass.count_class(name, charclass.CHEAP)
    medium = charclass.count_class(name, charclass.MEDIUM)
    expensive = charclass.count_class(name, charclass.EXPENSIVE)
    special = charclass.count_class(name, charclass.SPECIAL)

    if cheap:
        report.add_message(f"{cheap} characters from [{charclass.CHEAP}]", get_weight(ConfigCat.NAME, "cheap", 10) * cheap)
    if medium:
        report.add_message(f"{medium} characters from [{charclass.MEDIUM}]", get_weight(ConfigCat.NAME, "medium", 15) * medium)
    if expensive:
        report.add_message(f"{expensive} characters from [{charclass.EXPENSIVE}]", get_weight(ConfigCat.NAME, "expensive", 20) * expensive)
    if special:
        report.add_message(f"{special} numbers and hyphens", get_weight(ConfigCat.NAME, "special", 20) * special)
