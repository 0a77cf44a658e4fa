"""Quickstart example for cldrnumbers.

This example demonstrates looking up CLDR number formats and classifying
format styles for a few locales.

Note: Examples unpack the 'errors' return value only where a lookup can
fail. In production, always check errors and log/report unknown locales.
"""

import logging

from cldrnumbers import (
    FormatTableConfig,
    NumberSystemRole,
    UnknownNumberSystemError,
    decimal_format_list_for,
    decimal_format_styles_for,
    formats_for,
    formats_for_or_raise,
    initialize,
    minimum_grouping_digits_for,
    short_format_styles_for,
    system_names,
)
from cldrnumbers.diagnostics import DiagnosticFormatter, OutputFormat

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Fix the locale universe once, at startup
initialize(FormatTableConfig(known_locales=("en", "en-IN", "es", "th", "he")))

# Example 1: Default number system
print("=" * 50)
print("Example 1: Default Number System")
print("=" * 50)

fs, _ = formats_for("en")
print(fs.standard, fs.percent, fs.scientific)
# Output: #,##0.### #,##0% #E0

fs, _ = formats_for("en-IN")
print(fs.standard)
# Output: #,##,##0.###

# Example 2: Compact patterns
print("\n" + "=" * 50)
print("Example 2: Compact Patterns")
print("=" * 50)

fs = formats_for_or_raise("en")
for entry in fs.decimal_long[:3]:
    # Plural rules pick the category; 'other' is the fallback
    print(entry.threshold, entry.patterns.get("one", entry.patterns["other"]))
# Output:
# 1000 0 thousand
# 10000 00 thousand
# 100000 000 thousand

# Example 3: Native digits
print("\n" + "=" * 50)
print("Example 3: Number Systems")
print("=" * 50)

names, _ = system_names("th")
print(sorted(names))
# Output: ['latn', 'thai']

fs, _ = formats_for("th", NumberSystemRole.NATIVE)
print(fs.currency)

# Example 4: Style classification
print("\n" + "=" * 50)
print("Example 4: Style Classification")
print("=" * 50)

styles, _ = short_format_styles_for("he")
print(sorted(styles))
# Output: ['currency_short', 'decimal_long', 'decimal_short']

styles, _ = decimal_format_styles_for("en")
print(sorted(styles))
# Output: ['accounting', 'currency', 'percent', 'scientific', 'standard']

# Example 5: Grouping and pattern catalog
print("\n" + "=" * 50)
print("Example 5: Grouping Digits and Pattern Catalog")
print("=" * 50)

print(minimum_grouping_digits_for("en"), minimum_grouping_digits_for("es"))
# Output: (1, ()) (2, ())

patterns, _ = decimal_format_list_for("es")
print(len(patterns), "patterns for es")

# Example 6: Errors are values
print("\n" + "=" * 50)
print("Example 6: Error Handling")
print("=" * 50)

fs, errors = formats_for("fr")
for error in errors:
    print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(error.diagnostic))
# Output: LOCALE_UNKNOWN: The locale 'fr' is not known

try:
    formats_for_or_raise("th", "arab")
except UnknownNumberSystemError as e:
    print(e.diagnostic.format_error())
# Output:
# error[NUMBER_SYSTEM_UNKNOWN]: The number system 'arab' is unknown for the locale 'th'
#   = locale: th
#   = number system: arab
#   = help: Use system_roles() or system_names() to list what the locale declares
#   = note: see https://www.unicode.org/reports/tr35/tr35-numbers.html#Numbering_Systems
