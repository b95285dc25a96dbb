"""Shared test fixtures for the scene tagger."""

import logging
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging setup done by configure_logging() or the CLI group."""
    package_logger = logging.getLogger("stash_tagger")
    original_handlers = package_logger.handlers[:]
    original_level = package_logger.level
    original_propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    package_logger.handlers[:] = original_handlers
    package_logger.setLevel(original_level)
    package_logger.propagate = original_propagate


@pytest.fixture
def scraped_performer() -> dict[str, Any]:
    """Return a scraped performer record as sent by a stash-box provider."""
    return {
        "stored_id": "12",
        "remote_site_id": "perf-uuid-1",
        "name": "Jane Doe",
        "gender": "FEMALE",
        "url": "https://example.com/jane",
        "twitter": None,
        "instagram": "janedoe",
        "birthdate": "1990-05-01",
        "ethnicity": "CAUCASIAN",
        "country": "US",
        "eye_color": "light brown",
        "height": "168",
        "measurements": "34B-24-35",
        "fake_tits": "NATURAL",
        "career_length": "2012-",
        "tattoos": "left ankle",
        "piercings": "",
        "aliases": "J. Doe",
        "images": ["https://example.com/jane.jpg"],
        "details": None,
        "death_date": None,
        "hair_color": "BLONDE",
        "weight": "55",
    }


@pytest.fixture
def scraped_scene(scraped_performer: dict[str, Any]) -> dict[str, Any]:
    """Return a scraped scene record with studio, tags and fingerprints."""
    return {
        "remote_site_id": "scene-uuid-1",
        "title": "Example Scene",
        "date": "2021-03-04",
        "duration": 1800,
        "details": "A scene.",
        "url": "https://example.com/scene",
        "image": "https://example.com/scene.jpg",
        "studio": {
            "stored_id": None,
            "remote_site_id": "studio-uuid-1",
            "name": "Example Studio",
            "url": "https://example.com/studio",
            "image": "https://example.com/studio.png",
        },
        "tags": [
            {"stored_id": "3", "name": "Outdoor"},
            {"stored_id": None, "name": None},
        ],
        "performers": [scraped_performer],
        "fingerprints": [
            {"hash": "abc123", "algorithm": "OSHASH", "duration": 1799},
            {"hash": "def456", "algorithm": "PHASH", "duration": 1801},
        ],
    }
