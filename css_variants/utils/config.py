"""Configuration utility for CSS Variants."""

import os

# Project version
VERSION = "1.0.0"

# Default directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Breakpoints (name -> minimum width in pixels). Zero-width entries never
# produce a media query.
BREAKPOINTS = {
    'xs': 0,
    'sm': 640,
    'md': 768,
    'lg': 1024,
    'xl': 1280,
}

# Non-breakpoint conditional variants (name -> media feature expression)
MEDIA_FEATURES = {
    'light': '(prefers-color-scheme: light)',
    'dark': '(prefers-color-scheme: dark)',
    'touch': '(pointer: coarse)',
    'mouse': '(pointer: fine)',
    'contrast-more': '(prefers-contrast: more)',
    'contrast-less': '(prefers-contrast: less)',
    'motion-safe': '(prefers-reduced-motion: no-preference)',
    'motion-reduce': '(prefers-reduced-motion: reduce)',
    'print': 'print',
}

# Reserved variant names
RESPONSIVE_VARIANT = 'responsive'
PRINT_VARIANT = 'print'
LIGHT_VARIANT = 'light'
DARK_VARIANT = 'dark'
GROUP_PREFIX = 'group-'
GROUP_CLASS = '.group'

# Output formatting
INDENT = '  '

# Logging
LOG_FILE = os.path.join(BASE_DIR, 'logs', 'css_variants.log')
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION', 'BASE_DIR',
    'BREAKPOINTS', 'MEDIA_FEATURES',
    'RESPONSIVE_VARIANT', 'PRINT_VARIANT', 'LIGHT_VARIANT', 'DARK_VARIANT',
    'GROUP_PREFIX', 'GROUP_CLASS',
    'INDENT', 'LOG_FILE', 'LOG_LEVEL',
]
