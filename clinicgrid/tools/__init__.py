"""clinicgrid.tools package

Developer utilities (event replay, etc.).

Keep this package's __init__ free of eager imports so `python -m
clinicgrid.tools.<name>` has no import-time side effects.
"""

__all__: list[str] = []
