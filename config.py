"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of stack settings. All settings are read from
Pulumi config (e.g. Pulumi.<stack>.yaml or pulumi config set). ``domain_name``
is required; every other key falls back to a default. Used by __main__.main()
to name resources and locate the site content.
"""

from dataclasses import dataclass
from typing import Any, Callable

import pulumi

from components.cdn import PRICE_CLASSES


def _require_str(config: pulumi.Config, key: str) -> str:
    return config.require(key)


def _optional_str(default: str) -> Callable[[pulumi.Config, str], str]:
    def parse(config: pulumi.Config, key: str) -> str:
        value = config.get(key)
        return default if value is None else value

    return parse


def _price_class(config: pulumi.Config, key: str) -> str:
    value = config.get(key) or "PriceClass_100"
    if value not in PRICE_CLASSES:
        raise ValueError(
            f"{key} must be one of {', '.join(PRICE_CLASSES)}; got {value!r}"
        )
    return value


# (key, parser); parser receives (config, key) and returns value.
_CONFIG_SPEC: list[tuple[str, Callable[[pulumi.Config, str], Any]]] = [
    ("domain_name", _require_str),
    ("subdomain", _optional_str("www")),
    ("content_dir", _optional_str("./content")),
    ("index_document", _optional_str("index.html")),
    ("error_document", _optional_str("error.html")),
    ("price_class", _price_class),
    ("oai_comment", _optional_str("OAI for accessing S3 bucket")),
]


@dataclass(frozen=True)
class StackConfig:
    """
    Stack configuration from Pulumi config.

    Attributes:
        domain_name: Domain for the Route 53 hosted zone (required).
        subdomain: Label of the alias record; empty string for the apex.
        content_dir: Local directory whose files are uploaded to the bucket.
        index_document: Website index document and CloudFront root object.
        error_document: Website error document key.
        price_class: CloudFront price class.
        oai_comment: Comment on the origin access identity.
    """

    domain_name: str
    subdomain: str
    content_dir: str
    index_document: str
    error_document: str
    price_class: str
    oai_comment: str

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config) -> "StackConfig":
        """
        Build StackConfig from pulumi.Config(). Only domain_name is required.
        """
        kwargs = {key: parser(config, key) for key, parser in _CONFIG_SPEC}
        return cls(**kwargs)
