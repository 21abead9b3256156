from __future__ import annotations

# Import fixtures from testing/ so they are known by pytest
from testing.programs import empty_path  # noqa: F401
from testing.programs import fake_program  # noqa: F401
