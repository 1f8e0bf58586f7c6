"""Quickstart example for tslexengine.

This example demonstrates basic lookups against a Qt Linguist catalog:
plain messages, positional placeholders, numerus messages and fallbacks.

Note: Examples ignore the 'errors' return value for brevity. In production,
always check errors and log/report translation issues.
"""

from tslexengine import Translator
from tslexengine.introspection import introspect_message

ZH_CN_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="zh_CN">
<context>
    <name>AboutPage</name>
    <message>
        <location filename="../qml/AboutPage.qml" line="42"/>
        <source>Version: &lt;b&gt;%1&lt;/b&gt;</source>
        <translation>版本：&lt;b&gt;%1&lt;/b&gt;</translation>
    </message>
    <message>
        <location filename="../qml/AboutPage.qml" line="50"/>
        <source>About</source>
        <translation>关于</translation>
    </message>
</context>
<context>
    <name>DonationManager</name>
    <message numerus="yes">
        <location filename="../src/donationmanager.cpp" line="47"/>
        <source>%n coins</source>
        <translation>
            <numerusform>%n 个硬币</numerusform>
        </translation>
    </message>
</context>
<context>
    <name>MainPage</name>
    <message>
        <source>%1 → %2</source>
        <translation>%2 ← %1</translation>
    </message>
</context>
</TS>
"""

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

translator = Translator("zh_CN")
catalog = translator.add_catalog(ZH_CN_TS)

result, _ = translator.translate("AboutPage", "About")
print(result)
# Output: 关于

# Example 2: Positional placeholders
print("\n" + "=" * 50)
print("Example 2: Positional Placeholders")
print("=" * 50)

result, _ = translator.translate("AboutPage", "Version: <b>%1</b>", args=["1.4"])
print(result)
# Output: 版本：<b>1.4</b>

# Translators may reorder placeholders; %1 still receives the first argument
result, _ = translator.translate("MainPage", "%1 → %2", args=["English", "中文"])
print(result)
# Output: 中文 ← English

# Example 3: Numerus messages
print("\n" + "=" * 50)
print("Example 3: Numerus (Plural) Messages")
print("=" * 50)

for count in (1, 5):
    result, _ = translator.translate("DonationManager", "%n coins", n=count)
    print(result)
# Output: 1 个硬币
# Output: 5 个硬币

# Example 4: Missing translations
print("\n" + "=" * 50)
print("Example 4: Missing Translation")
print("=" * 50)

result, errors = translator.translate("SettingsPage", "Dark theme")
print(f"Result: {result}")
print(f"Errors: {len(errors)}")
for error in errors:
    print(f"  {error.diagnostic.message if error.diagnostic else error}")
# Output: Result: Dark theme
# Output: Errors: 1

# Example 5: Introspection
print("\n" + "=" * 50)
print("Example 5: Message Introspection")
print("=" * 50)

for context_name, message in catalog.iter_messages():
    info = introspect_message(message)
    print(
        f"{context_name}::{message.source!r}: args={sorted(info.source_numbers)}, "
        f"count={info.uses_count}"
    )

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
