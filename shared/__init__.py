"""Reference data shared by the CLI and the test suite.

Kept outside tests/ so scripts never import from the tests package.
"""

from __future__ import annotations
