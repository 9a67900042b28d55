"""Guide Pipeline - AI-generated VS Code development guides."""

__version__ = "0.1.0"
