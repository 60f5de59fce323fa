"""Radnt -- Next.js + shadcn/ui project CLI.

Exposes the typo-tolerant component-name resolver used by ``radnt add`` and
the command implementations behind the ``radnt`` console script.
"""

__version__ = "1.2.0"
