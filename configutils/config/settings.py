"""
Process-wide default settings accessor.

**Conceptual**: Most applications read all their configuration from one place:
environment variables, optionally seeded from a .env file during local
development. This module wires that up once and caches the resulting
SettingsAccessor, so application code can simply call get_settings().

**Why lazy initialization?**
  - The .env file is only read when settings are actually needed, not at
    import time.
  - Tests can bypass the singleton entirely by building their own
    SettingsAccessor over a MappingStore, or call reset_settings() after
    changing the environment.

**Teaching note**: Singletons make dependencies implicit. Library code should
accept a SettingsAccessor as an argument; get_settings() is meant for the
application's entrypoint (see actions/show_setting.py).

**.env handling**: load_dotenv() never overrides variables that are already
set in the real environment, so deployment-time environment variables always
win over the checked-out .env file.
"""

from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from configutils.config.accessor import SettingsAccessor
from configutils.config.stores import EnvironmentStore

# .env at the project root (next to pyproject.toml)
DEFAULT_DOTENV_PATH = Path(__file__).parent.parent.parent / ".env"

_default_settings: Optional[SettingsAccessor] = None


def get_settings(dotenv_path: Optional[Union[str, Path]] = None) -> SettingsAccessor:
    """
    Get the global settings accessor.

    On first call, loads the .env file (if it exists) into os.environ and
    creates a SettingsAccessor over the environment. Later calls return the
    cached accessor; dotenv_path is ignored once settings are loaded.

    Args:
        dotenv_path: .env file to load. Defaults to the project root's .env.

    Returns:
        Global SettingsAccessor singleton.

    Usage example:
        >>> from configutils.config.settings import get_settings
        >>>
        >>> settings = get_settings()
        >>> port = settings.get_typed("PORT", 8080)
        >>> dsn = settings.get_connection_string("DATABASE_URL")
    """
    global _default_settings

    if _default_settings is None:
        path = Path(dotenv_path) if dotenv_path is not None else DEFAULT_DOTENV_PATH
        if path.is_file():
            load_dotenv(dotenv_path=path)
        _default_settings = SettingsAccessor(EnvironmentStore())

    return _default_settings


def reset_settings() -> None:
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("PORT", "9000")
          reset_settings()
          assert get_settings().get_typed("PORT", 8080) == 9000
      ```
    """
    global _default_settings
    _default_settings = None
