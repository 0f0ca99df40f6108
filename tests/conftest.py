"""
Shared test configuration.
"""

import os

# Widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
