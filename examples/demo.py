"""Demo script: generate a dome and render it with matplotlib."""

import logging
from pathlib import Path

from geodome import DomeDesign, DomeVariant

OUTPUT = Path(__file__).resolve().parent / "dome.pdf"


def main():
    logging.basicConfig(level=logging.DEBUG)

    design = DomeDesign.from_diameter(
        30.0,
        frequency=4,
        variant=DomeVariant.PENTAGON_RING_FLAT_RIM,
        palette=["purple", "indigo", "blue"],
    )
    mesh = design.generate()
    print(f"Generated {mesh.variant}: {mesh.n_vertices} vertices, {mesh.n_faces} faces")
    print(f"Rim vertices: {int(mesh.is_base_perimeter.sum())}")

    design.render_mpl(output=OUTPUT, show=False)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
