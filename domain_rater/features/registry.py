import pkgutil
import importlib
from typing import List
from .base import Feature


def _load_from_package(package_name: str) -> List[Feature]:
    passes = {}

    pkg = importlib.import_module(package_name)

    for module_info in pkgutil.walk_packages(pkg.__path__, package_name + "."):
        module = importlib.import_module(module_info.name)

        # Extract Feature subclasses
        for attr in dir(module):
            obj = getattr(module, attr)
            if (
                isinstance(obj, type)
                and issubclass(obj, Feature)
                and obj is not Feature
                and obj.__module__ == module.__name__
            ):
                instance = obj()
                passes[instance.name] = instance

    return sorted(passes.values(), key=lambda f: f.order)


# Protocol, subdomain, main domain, TLD
PASSES = _load_from_package("domain_rater.features.passes")
