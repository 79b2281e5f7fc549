from typing import Any, Dict

from domain_rater.scoring.color import score_color, score_hue
from domain_rater.scoring.rater import DomainRater


def analyze_domain(target: str) -> Dict[str, Any]:
    rating = DomainRater(target)
    domain = rating.domain

    components = None
    if domain.valid:
        components = {
            "protocol": domain.protocol,
            "sub_domain": domain.sub_domain,
            "main_domain": domain.main_domain,
            "tld": domain.tld,
            "directory": domain.directory,
            "apex_domain": domain.apex_domain,
        }

    score = rating.get_score()

    return {
        "target": target,
        "type": "domain",
        "valid": domain.valid,

        "domain": rating.get_domain(),
        "pattern": rating.get_pattern(),
        "score": score,
        "hue": score_hue(score),
        "color": score_color(score),

        "components": components,
        "category_scores": rating.get_category_scores(),
        "messages": rating.get_messages(),
    }
