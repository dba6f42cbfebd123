import os

# headless matplotlib for the plotting tests
os.environ.setdefault("MPLBACKEND", "Agg")
