"""Shared constants for IpaCyr."""

# Notation modifiers
LENGTH_MARK = "ː"
PALATALIZATION_MARK = "ʲ"
PRIMARY_STRESS = "ˈ"
SECONDARY_STRESS = "ˌ"

# ASCII stand-ins accepted by the parser
SYMBOL_ALIASES = {
    ":": LENGTH_MARK,
    "g": "ɡ",
}

IGNORED_SYMBOLS = frozenset({PRIMARY_STRESS, SECONDARY_STRESS})

# Output glyphs shared by the renderer
HARD_SIGN = "ъ"
WORD_SEPARATOR = " "
