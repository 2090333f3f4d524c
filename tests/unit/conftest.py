"""Unit test fixtures.

Configuration helpers live in tests/conftest.py.
"""

from tests.conftest import minimal_config_dict, run_cmd, write_config

__all__ = ["minimal_config_dict", "run_cmd", "write_config"]
