"""
pacdef package initializer.

Declare the packages you want in group files, one section per package
manager, and let pacdef install what is missing or report what is not
declared anywhere.
"""

from __future__ import annotations

__version__ = "0.4.0"
