from .settings import Settings, getSettings
