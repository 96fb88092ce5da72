from __future__ import annotations

import logging
import textwrap

import pytest


SPEC_YAML = textwrap.dedent(
    """\
    actor_details:
      categories: [AUTOMATION, DEVELOPER_TOOLS]
    schemas:
      actor:
        name: shop-scraper
        version: "1.2"
        build_tag: beta
        environment_variables:
          LOG_LEVEL: info
      input:
        required: [start_urls]
        fields:
          start_urls:
            type: array
            description: Pages to start from
            prefill: ["https://example.com"]
          max_pages:
            type: integer
            minimum: 1
            default: 10
          include_reviews:
            type: boolean
            group: reviews
          proxy_country:
            desc: Two-letter country code
      dataset:
        fields:
          title: {}
          price:
            type: number
          product_url:
            nullable: false
        field_groups:
          reviews:
            rating:
              type: number
              label: Stars
            review_links:
              array: true
        views:
          overview:
            title: Products
            fields: [title, price, product_url, rating]
      output:
        title: Shop data
    """
)


@pytest.fixture
def spec_yaml() -> str:
    return SPEC_YAML


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "websy-spec.yml"
    path.write_text(SPEC_YAML, encoding="utf-8")
    return path


@pytest.fixture
def schemas_config():
    """The ``schemas`` section of SPEC_YAML as a parsed mapping."""
    return {
        "actor": {
            "name": "shop-scraper",
            "version": "1.2",
            "build_tag": "beta",
            "environment_variables": {"LOG_LEVEL": "info"},
        },
        "input": {
            "required": ["start_urls"],
            "fields": {
                "start_urls": {
                    "type": "array",
                    "description": "Pages to start from",
                    "prefill": ["https://example.com"],
                },
                "max_pages": {"type": "integer", "minimum": 1, "default": 10},
                "include_reviews": {"type": "boolean", "group": "reviews"},
                "proxy_country": {"desc": "Two-letter country code"},
            },
        },
        "dataset": {
            "fields": {
                "title": {},
                "price": {"type": "number"},
                "product_url": {"nullable": False},
            },
            "field_groups": {
                "reviews": {
                    "rating": {"type": "number", "label": "Stars"},
                    "review_links": {"array": True},
                },
            },
            "views": {
                "overview": {
                    "title": "Products",
                    "fields": ["title", "price", "product_url", "rating"],
                },
            },
        },
        "output": {"title": "Shop data"},
    }


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    # The CLI installs its own stream handlers on the root logger.
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
