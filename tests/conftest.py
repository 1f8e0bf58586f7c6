"""Pytest configuration for TSLexEngine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared TS fixtures are modeled on real lupdate output (Chinese and Persian
catalogs of a translator application).
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
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
    2. CI=true env var (GitHub Actions auto-detection)
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


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    - Specific fuzz directory (pytest tests/fuzz): Runs as specified
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    for arg in config.invocation_params.args:
        if "fuzz" in str(arg):
            return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED TS FIXTURES
# =============================================================================

ZH_CN_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.0" language="zh_CN">
<context>
    <name>--------</name>
    <message>
        <location filename="../src/main.cpp" line="179"/>
        <source>AUTHORS</source>
        <comment>A list of translation authors</comment>
        <translation>gwmgdemj, 太空飞瓜 (finalmix)</translation>
    </message>
</context>
<context>
    <name>AboutPage</name>
    <message>
        <location filename="../qml/bb10/AboutPage.qml" line="42"/>
        <location filename="../qml/harmattan/AboutPage.qml" line="59"/>
        <source>Version: &lt;b&gt;%1&lt;/b&gt;</source>
        <translation>版本：&lt;b&gt;%1&lt;/b&gt;</translation>
    </message>
    <message>
        <location filename="../qml/sailfish/AboutPage.qml" line="50"/>
        <source>About</source>
        <translation>关于</translation>
    </message>
</context>
<context>
    <name>DonationManager</name>
    <message numerus="yes">
        <location filename="../src/bb10/donationmanager.cpp" line="47"/>
        <source>%n coins</source>
        <translation>
            <numerusform>%n 个硬币</numerusform>
        </translation>
    </message>
</context>
<context>
    <name>LanguageListModel</name>
    <message>
        <location filename="../src/languagelistmodel.cpp" line="68"/>
        <source>Unknown (%1)</source>
        <comment>Unknown language</comment>
        <translation>未知语言(%1)</translation>
    </message>
</context>
</TS>
"""

FA_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.0" language="fa">
<context>
    <name>AboutPage</name>
    <message numerus="yes">
        <location filename="../qml/bb10/AboutPage.qml" line="47"/>
        <source>You donated &lt;b&gt;%n coins&lt;/b&gt;. Thank you!</source>
        <translation type="unfinished">
            <numerusform></numerusform>
        </translation>
    </message>
    <message>
        <location filename="../qml/sailfish/AboutPage.qml" line="50"/>
        <source>About</source>
        <translation type="unfinished"></translation>
    </message>
    <message>
        <location filename="../qml/sailfish/AboutPage.qml" line="55"/>
        <source>Translate</source>
        <translation>ترجمه</translation>
    </message>
</context>
</TS>
"""

RU_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="ru_RU">
<context>
    <name>DonationManager</name>
    <message numerus="yes">
        <source>%n coins</source>
        <translation>
            <numerusform>%n монета</numerusform>
            <numerusform>%n монеты</numerusform>
            <numerusform>%n монет</numerusform>
        </translation>
    </message>
</context>
</TS>
"""


@pytest.fixture
def zh_source() -> str:
    """Chinese catalog: finished translations, one numerus message."""
    return ZH_CN_TS


@pytest.fixture
def fa_source() -> str:
    """Persian catalog: mostly unfinished, one finished message."""
    return FA_TS


@pytest.fixture
def ru_source() -> str:
    """Russian catalog with three numerus forms."""
    return RU_TS
