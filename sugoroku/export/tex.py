"""
Sugoroku - LaTeX Export

Renders a board as a printable document: one titled box per square.
"""

import logging
from pathlib import Path

from sugoroku.config.loader import read_world
from sugoroku.engine.locale import Locale
from sugoroku.engine.world import World

logger = logging.getLogger(__name__)

_PREAMBLE = (
    r"\documentclass[11pt,dvipdfmx]{jsarticle}",
    "",
    r"\usepackage{tcolorbox}",
    r"\newtcolorbox{areabox}[2][]{colbacktitle=black,coltitle=white,title={#2}}",
    "",
    r"\begin{document}",
)


def world_to_tex(world: World, locale: Locale) -> str:
    """Render ``world`` as a LaTeX document."""
    lines = list(_PREAMBLE)
    lines += [
        rf"\title{{{world.title}}}",
        r"\author{}",
        r"\date{}",
        r"\maketitle",
        "",
    ]
    for index, area in enumerate(world.area_list):
        lines.append(rf"\begin{{areabox}}{{{index}}}")
        lines.extend(f"{line}\\\\" for line in area.describe(locale).splitlines())
        lines.append(r"\end{areabox}")
        lines.append("")
    lines.append(r"\end{document}")
    return "\n".join(lines) + "\n"


def write_world_tex(world_path: Path, locale: Locale) -> Path:
    """
    Load a board file and write ``<stem>.tex`` next to it.

    Returns:
        Path of the written document
    """
    world_path = Path(world_path)
    world = read_world(world_path)
    output = world_path.with_suffix(".tex")
    output.write_text(world_to_tex(world, locale), encoding="utf-8")
    logger.info("Wrote %s", output)
    return output
