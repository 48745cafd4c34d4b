"""Pytest configuration for the priceinput test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from priceinput.catalog import InMemoryCurrencyCatalog, clear_currency_cache
from priceinput.formatting import LocaleNumberFormatter

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_caches() -> Iterator[None]:
    """Start every test with empty formatter and CLDR lookup caches."""
    LocaleNumberFormatter.clear_cache()
    clear_currency_cache()
    yield
    LocaleNumberFormatter.clear_cache()


@pytest.fixture
def usd_catalog() -> InMemoryCurrencyCatalog:
    """Single-currency catalog."""
    return InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2})


@pytest.fixture
def usd_eur_catalog() -> InMemoryCurrencyCatalog:
    """Two currencies with equal precision."""
    return InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2, "EUR": 2})


@pytest.fixture
def usd_jpy_catalog() -> InMemoryCurrencyCatalog:
    """Two currencies with different precision."""
    return InMemoryCurrencyCatalog.from_fraction_digits({"USD": 2, "JPY": 0})


@pytest.fixture
def empty_catalog() -> InMemoryCurrencyCatalog:
    """Catalog with no currencies."""
    return InMemoryCurrencyCatalog()
