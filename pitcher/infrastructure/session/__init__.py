from pitcher.infrastructure.session.dotenv_source import DotenvSource
from pitcher.infrastructure.session.env_source import EnvironmentSource

__all__ = ["DotenvSource", "EnvironmentSource"]
