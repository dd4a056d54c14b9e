import os

# Keep telelog off the console while the suite runs.
os.environ.setdefault("EMBLEM_ENGINE_DISABLE_CONSOLE", "1")
