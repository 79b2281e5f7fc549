from enum import Enum

class Category(str, Enum):
    PROTOCOL = "protocol"
    SUBDOMAIN = "subdomain"
    MAIN_DOMAIN = "main_domain"
    TLD = "tld"

class ConfigCat(str, Enum):
    PROTOCOL = "protocol"
    NAME = "name"
    TLD = "tld"
