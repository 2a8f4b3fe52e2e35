"""Megastore catalog backend: categories, colors and branches."""

__version__ = "1.0.0"


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from megastore.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
