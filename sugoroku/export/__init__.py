"""Document export for Sugoroku boards."""

from sugoroku.export.tex import world_to_tex, write_world_tex

__all__ = ["world_to_tex", "write_world_tex"]
