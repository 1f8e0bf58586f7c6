"""TSLocalization Example - Multi-Locale Fallback Chains.

Demonstrates TSLocalization for applications whose translations are
incomplete: a Persian catalog with many unfinished messages falls back
to a complete Chinese catalog, and finally to the source text.

Scenarios covered:
1. Fallback between two in-memory catalogs
2. Loading catalogs from disk with PathCatalogLoader
3. Observing fallbacks with on_fallback

Note on Error Handling:
    Examples use underscore pattern (result, _) to ignore errors for brevity.
    In production code, ALWAYS check the errors and log translation issues.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from tslexengine import TSLocalization
from tslexengine.localization import FallbackInfo, PathCatalogLoader

FA_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="fa">
<context>
    <name>AboutPage</name>
    <message>
        <source>About</source>
        <translation type="unfinished"></translation>
    </message>
    <message>
        <source>Translate</source>
        <translation>ترجمه</translation>
    </message>
</context>
</TS>
"""

ZH_CN_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="zh_CN">
<context>
    <name>AboutPage</name>
    <message>
        <source>About</source>
        <translation>关于</translation>
    </message>
    <message>
        <source>Translate</source>
        <translation>翻译</translation>
    </message>
</context>
</TS>
"""


def example_1_basic_fallback() -> None:
    """Example 1: Basic two-locale fallback (Persian → Chinese)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (fa → zh_CN)")
    print("=" * 60)

    l10n = TSLocalization(["fa", "zh_CN"])
    l10n.add_catalog("fa", FA_TS)
    l10n.add_catalog("zh_CN", ZH_CN_TS)

    for source in ("Translate", "About", "Settings"):
        result, errors = l10n.translate("AboutPage", source)
        print(f"{source!r:12} -> {result!r} ({len(errors)} error(s))")
    # 'Translate'  -> 'ترجمه' (0 error(s))
    # 'About'      -> '关于' (0 error(s))
    # 'Settings'   -> 'Settings' (1 error(s))


def example_2_disk_loading() -> None:
    """Example 2: Load taot_{locale}.ts files from a directory."""
    print("\n" + "=" * 60)
    print("Example 2: Loading Catalogs from Disk")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        (base / "taot_fa.ts").write_text(FA_TS, encoding="utf-8")
        (base / "taot_zh_CN.ts").write_text(ZH_CN_TS, encoding="utf-8")

        loader = PathCatalogLoader(str(base))
        l10n = TSLocalization(["fa", "de", "zh_CN"], ["taot_{locale}.ts"], loader)

        summary = l10n.get_load_summary()
        print(summary)
        for missing in summary.get_not_found():
            print(f"Missing: {missing.source_path}")

        print(l10n.tr("AboutPage", "About"))
        # 关于


def example_3_fallback_callback() -> None:
    """Example 3: Report which messages the primary locale lacks."""
    print("\n" + "=" * 60)
    print("Example 3: Observing Fallbacks")
    print("=" * 60)

    def report(info: FallbackInfo) -> None:
        print(
            f"[fallback] {info.context}::{info.source!r} "
            f"{info.requested_locale} -> {info.resolved_locale}"
        )

    l10n = TSLocalization(["fa", "zh_CN"], on_fallback=report)
    l10n.add_catalog("fa", FA_TS)
    l10n.add_catalog("zh_CN", ZH_CN_TS)

    l10n.translate("AboutPage", "Translate")
    l10n.translate("AboutPage", "About")
    # [fallback] AboutPage::'About' fa -> zh_CN


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_disk_loading()
    example_3_fallback_callback()
